"""Crop service: crop names are unique."""

from __future__ import annotations

from app.models.crops import Crop
from app.services.guards import UniqueScope
from app.services.resource_service import ResourceService


class CropService(ResourceService[Crop]):
	collection = "crops"
	fields = ("name",)

	def unique_scopes(self) -> list[UniqueScope]:
		return [UniqueScope(("name",), self.repository.find_by_name)]
