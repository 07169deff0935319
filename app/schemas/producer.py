"""Pydantic request/response schemas for producers.

``ProducerCreate`` rejects a document whose length does not match its type
up front; updates are checked against the merged record in ``ProducerService``.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.models.enums import DocumentTypeEnum
from app.services.producer_service import check_document_length


class ProducerCreate(BaseModel):
	document: str = Field(pattern=r"^\d{11}(\d{3})?$")
	document_type: DocumentTypeEnum
	name: str = Field(min_length=1, max_length=255)

	@model_validator(mode="after")
	def _document_matches_type(self) -> ProducerCreate:
		check_document_length(self.document, self.document_type)
		return self


class ProducerUpdate(BaseModel):
	document: str | None = Field(default=None, pattern=r"^\d{11}(\d{3})?$")
	document_type: DocumentTypeEnum | None = None
	name: str | None = Field(default=None, min_length=1, max_length=255)


class ProducerRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	document: str
	document_type: DocumentTypeEnum
	name: str
	created_at: datetime
	updated_at: datetime


class ProducerListRead(BaseModel):
	items: list[ProducerRead]
