"""Pydantic request/response schemas for crops, harvests and plantations."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

HARVEST_YEAR_MIN = 1900
HARVEST_YEAR_MAX = 2100


class CropCreate(BaseModel):
	name: str = Field(min_length=1, max_length=255)


class CropUpdate(BaseModel):
	name: str | None = Field(default=None, min_length=1, max_length=255)


class CropRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	name: str
	created_at: datetime
	updated_at: datetime


class CropListRead(BaseModel):
	items: list[CropRead]


class HarvestCreate(BaseModel):
	name: str = Field(min_length=1, max_length=255)
	year: int = Field(ge=HARVEST_YEAR_MIN, le=HARVEST_YEAR_MAX)


class HarvestUpdate(BaseModel):
	name: str | None = Field(default=None, min_length=1, max_length=255)
	year: int | None = Field(default=None, ge=HARVEST_YEAR_MIN, le=HARVEST_YEAR_MAX)


class HarvestRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	name: str
	year: int
	created_at: datetime
	updated_at: datetime


class HarvestListRead(BaseModel):
	items: list[HarvestRead]


class PlantationCreate(BaseModel):
	farm_id: uuid.UUID
	crop_id: uuid.UUID
	harvest_id: uuid.UUID


class PlantationUpdate(BaseModel):
	farm_id: uuid.UUID | None = None
	crop_id: uuid.UUID | None = None
	harvest_id: uuid.UUID | None = None


class PlantationRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	farm_id: uuid.UUID
	crop_id: uuid.UUID
	harvest_id: uuid.UUID
	created_at: datetime
	updated_at: datetime


class PlantationListRead(BaseModel):
	items: list[PlantationRead]
