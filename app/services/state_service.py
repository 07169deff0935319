"""State service: name and acronym are unique independently."""

from __future__ import annotations

from app.models.locations import State
from app.services.guards import UniqueScope
from app.services.resource_service import ResourceService


class StateService(ResourceService[State]):
	collection = "states"
	fields = ("name", "acronym")

	def unique_scopes(self) -> list[UniqueScope]:
		# Evaluated in order; the name scope short-circuits the acronym lookup.
		return [
			UniqueScope(("name",), self.repository.find_by_name),
			UniqueScope(("acronym",), self.repository.find_by_acronym),
		]
