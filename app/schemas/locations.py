"""Pydantic request/response schemas for states and cities."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

_ACRONYM_PATTERN = r"^[A-Z]{2}$"


class StateCreate(BaseModel):
	name: str = Field(min_length=1, max_length=255)
	acronym: str = Field(pattern=_ACRONYM_PATTERN)


class StateUpdate(BaseModel):
	name: str | None = Field(default=None, min_length=1, max_length=255)
	acronym: str | None = Field(default=None, pattern=_ACRONYM_PATTERN)


class StateRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	name: str
	acronym: str
	created_at: datetime
	updated_at: datetime


class StateListRead(BaseModel):
	items: list[StateRead]


class CityCreate(BaseModel):
	name: str = Field(min_length=1, max_length=255)
	state_id: uuid.UUID


class CityUpdate(BaseModel):
	name: str | None = Field(default=None, min_length=1, max_length=255)
	state_id: uuid.UUID | None = None


class CityRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	name: str
	state_id: uuid.UUID
	created_at: datetime
	updated_at: datetime


class CityListRead(BaseModel):
	items: list[CityRead]
