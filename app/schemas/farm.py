"""Pydantic request/response schemas for farm objects.

Shape only: areas must be finite and non-negative. The area conservation
rule spans several fields and, on update, the stored record, so it lives in
``FarmService``.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FarmCreate(BaseModel):
	farm_name: str = Field(min_length=1, max_length=255)
	total_area: float = Field(ge=0, allow_inf_nan=False)
	vegetation_area: float = Field(ge=0, allow_inf_nan=False)
	agricultural_area: float = Field(ge=0, allow_inf_nan=False)
	city_id: uuid.UUID
	producer_id: uuid.UUID


class FarmUpdate(BaseModel):
	farm_name: str | None = Field(default=None, min_length=1, max_length=255)
	total_area: float | None = Field(default=None, ge=0, allow_inf_nan=False)
	vegetation_area: float | None = Field(default=None, ge=0, allow_inf_nan=False)
	agricultural_area: float | None = Field(default=None, ge=0, allow_inf_nan=False)
	city_id: uuid.UUID | None = None
	producer_id: uuid.UUID | None = None


class FarmRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	farm_name: str
	total_area: float
	vegetation_area: float
	agricultural_area: float
	city_id: uuid.UUID
	producer_id: uuid.UUID
	created_at: datetime
	updated_at: datetime


class FarmListRead(BaseModel):
	items: list[FarmRead]
