"""Shared create/read/update/delete lifecycle for registry resources."""

from __future__ import annotations

import uuid
from typing import Any, ClassVar, Generic, TypeVar

import structlog
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.errors import ConflictError, DomainRuleError, NotFoundError
from app.services.guards import Reference, UniqueScope, ensure_references_exist, ensure_unique
from app.services.repositories import RepositorySet

ModelT = TypeVar("ModelT")

_logger = structlog.get_logger("agroregistry.services")


class ResourceService(Generic[ModelT]):
	"""Runs every write through the referential guard, the uniqueness guard and
	the invariant hook, in that order, before delegating to the repository.

	Subclasses name their ``collection`` on :class:`RepositorySet`, list their
	writable ``fields`` and override :meth:`references`, :meth:`unique_scopes`
	and :meth:`check_invariants` as needed.
	"""

	collection: ClassVar[str]
	fields: ClassVar[tuple[str, ...]]

	def __init__(self, db: AsyncSession, *, repositories: RepositorySet | None = None):
		self.db = db
		if repositories is None:
			repositories = RepositorySet.from_session(db)
		self.repositories = repositories
		self.repository = getattr(repositories, self.collection)

	@property
	def resource_name(self) -> str:
		return self.repository.resource_name

	def references(self) -> list[Reference]:
		return []

	def unique_scopes(self) -> list[UniqueScope]:
		return []

	def check_invariants(self, candidate: dict[str, Any]) -> None:
		return None

	async def create(self, payload: BaseModel) -> ModelT:
		candidate = payload.model_dump()
		await self._validate(candidate, supplied=candidate, current_id=None)
		record = await self.repository.create(candidate)
		_logger.info("resource_created", resource=self.resource_name, record_id=str(record.id))
		return record

	async def find_all(self) -> list[ModelT]:
		return await self.repository.find_all()

	async def find_one(self, record_id: uuid.UUID) -> ModelT:
		record = await self.repository.find_by_id(record_id)
		if record is None:
			raise NotFoundError(self.resource_name, record_id)
		return record

	async def update(self, record_id: uuid.UUID, payload: BaseModel) -> ModelT:
		current = await self.find_one(record_id)
		changes = payload.model_dump(exclude_unset=True, exclude_none=True)
		effective = self.effective_candidate(current, changes)
		await self._validate(effective, supplied=changes, current_id=current.id)
		record = await self.repository.update(current.id, changes)
		_logger.info(
			"resource_updated",
			resource=self.resource_name,
			record_id=str(record.id),
			fields=sorted(changes),
		)
		return record

	async def remove(self, record_id: uuid.UUID) -> None:
		current = await self.find_one(record_id)
		await self.repository.remove(current.id)
		_logger.info("resource_removed", resource=self.resource_name, record_id=str(current.id))

	def effective_candidate(self, current: ModelT, changes: dict[str, Any]) -> dict[str, Any]:
		"""Overlay the supplied fields on the stored record."""
		effective = {name: getattr(current, name) for name in self.fields}
		effective.update(changes)
		return effective

	async def _validate(
		self,
		candidate: dict[str, Any],
		*,
		supplied: dict[str, Any],
		current_id: uuid.UUID | None,
	) -> None:
		try:
			await ensure_references_exist(self.references(), supplied)
			for scope in self.unique_scopes():
				await ensure_unique(self.resource_name, scope, candidate, current_id)
			self.check_invariants(candidate)
		except (NotFoundError, ConflictError, DomainRuleError) as exc:
			_logger.info(
				"resource_rejected",
				resource=self.resource_name,
				kind=type(exc).__name__,
				reason=str(exc),
			)
			raise
