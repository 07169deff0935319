"""Farm service: city/producer references and land-area conservation."""

from __future__ import annotations

from typing import Any

from app.models.farm import Farm
from app.services.errors import DomainRuleError
from app.services.guards import Reference
from app.services.resource_service import ResourceService


def check_area_allocation(
	total_area: float,
	vegetation_area: float,
	agricultural_area: float,
) -> None:
	"""Vegetation plus agricultural area may not exceed the farm's total area."""
	allocated = vegetation_area + agricultural_area
	if allocated > total_area:
		raise DomainRuleError(
			f"vegetation_area + agricultural_area ({allocated:g}) "
			f"exceeds total_area ({total_area:g})"
		)


class FarmService(ResourceService[Farm]):
	collection = "farms"
	fields = (
		"farm_name",
		"total_area",
		"vegetation_area",
		"agricultural_area",
		"city_id",
		"producer_id",
	)

	def references(self) -> list[Reference]:
		return [
			Reference("city_id", self.repositories.cities),
			Reference("producer_id", self.repositories.producers),
		]

	def check_invariants(self, candidate: dict[str, Any]) -> None:
		check_area_allocation(
			candidate["total_area"],
			candidate["vegetation_area"],
			candidate["agricultural_area"],
		)
