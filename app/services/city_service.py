"""City service: unique per (name, state_id), state must exist."""

from __future__ import annotations

from app.models.locations import City
from app.services.guards import Reference, UniqueScope
from app.services.resource_service import ResourceService


class CityService(ResourceService[City]):
	collection = "cities"
	fields = ("name", "state_id")

	def references(self) -> list[Reference]:
		return [Reference("state_id", self.repositories.states)]

	def unique_scopes(self) -> list[UniqueScope]:
		return [UniqueScope(("name", "state_id"), self.repository.find_by_name_and_state)]
