"""Harvest service: plain lifecycle, no natural key and no references."""

from __future__ import annotations

from app.models.crops import Harvest
from app.services.resource_service import ResourceService


class HarvestService(ResourceService[Harvest]):
	collection = "harvests"
	fields = ("name", "year")
