"""Integrity guards shared by every resource service.

Both guards are read-only: they look records up and raise, never write.

* Referential guard: every foreign key present in a payload must name an
  existing row in its target collection.
* Uniqueness guard: a natural key (one field or an ordered tuple of fields)
  must not match a record other than the one being updated.
"""

from __future__ import annotations

import uuid
from collections.abc import Awaitable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from app.services.errors import ConflictError, NotFoundError


class ReferenceSource(Protocol):
	"""Anything that can fetch a record of one collection by id."""

	@property
	def resource_name(self) -> str: ...

	def find_by_id(self, record_id: uuid.UUID) -> Awaitable[Any | None]: ...


class UniquenessSource(Protocol):
	"""A dedicated lookup for one natural-key scope, called with the key values in order."""

	def __call__(self, *values: Any) -> Awaitable[Any | None]: ...


@dataclass(frozen=True, slots=True)
class Reference:
	field: str
	source: ReferenceSource


@dataclass(frozen=True, slots=True)
class UniqueScope:
	fields: tuple[str, ...]
	lookup: UniquenessSource


async def ensure_references_exist(
	references: Sequence[Reference],
	values: Mapping[str, Any],
) -> None:
	"""Raise ``NotFoundError`` for the first referenced record that is missing.

	Only references whose field appears in ``values`` are checked, so a partial
	update re-validates just the foreign keys it actually changes.
	"""
	for reference in references:
		if reference.field not in values:
			continue
		target_id = values[reference.field]
		if await reference.source.find_by_id(target_id) is None:
			raise NotFoundError(reference.source.resource_name, target_id)


async def ensure_unique(
	resource: str,
	scope: UniqueScope,
	candidate: Mapping[str, Any],
	current_id: uuid.UUID | None = None,
) -> None:
	"""Raise ``ConflictError`` if another record already holds the scope's key.

	``current_id`` is the record being updated; matching itself is not a
	conflict.  On create it is ``None`` and any match conflicts.
	"""
	key = tuple(candidate[name] for name in scope.fields)
	existing = await scope.lookup(*key)
	if existing is not None and existing.id != current_id:
		raise ConflictError(resource, scope.fields)
