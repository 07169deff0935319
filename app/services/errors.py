"""Domain error kinds raised by the registry services.

Routes translate these into HTTP status codes; nothing in the service layer
retries or recovers from them.
"""

from __future__ import annotations

from collections.abc import Sequence


class NotFoundError(LookupError):
	"""A targeted or referenced record does not exist."""

	def __init__(self, resource: str, record_id: object):
		self.resource = resource
		self.record_id = record_id
		super().__init__(f"{resource} {record_id} not found")


class ConflictError(Exception):
	"""A natural-key collision with another record."""

	def __init__(self, resource: str, fields: Sequence[str], message: str | None = None):
		self.resource = resource
		self.fields = tuple(fields)
		if message is None:
			message = f"{resource} with the same {', '.join(self.fields)} already exists"
		super().__init__(message)


class DomainRuleError(ValueError):
	"""A business rule relating several fields of one record is violated."""
