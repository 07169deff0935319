"""Plantation service: farm × crop × harvest association.

The natural key is the triple of foreign keys, so the same three fields go
through both guards: each id must exist (farm, then crop, then harvest) and
the resulting triple must not belong to another plantation.
"""

from __future__ import annotations

from app.models.crops import Plantation
from app.services.guards import Reference, UniqueScope
from app.services.resource_service import ResourceService


class PlantationService(ResourceService[Plantation]):
	collection = "plantations"
	fields = ("farm_id", "crop_id", "harvest_id")

	def references(self) -> list[Reference]:
		return [
			Reference("farm_id", self.repositories.farms),
			Reference("crop_id", self.repositories.crops),
			Reference("harvest_id", self.repositories.harvests),
		]

	def unique_scopes(self) -> list[UniqueScope]:
		return [UniqueScope(self.fields, self.repository.find_by_unique_keys)]
