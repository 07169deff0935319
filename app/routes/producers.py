"""Producer CRUD routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.routes.errors import map_service_error
from app.schemas.producer import ProducerCreate, ProducerListRead, ProducerRead, ProducerUpdate
from app.services.producer_service import ProducerService

router = APIRouter(prefix="/producers", tags=["producers"])


@router.post("", response_model=ProducerRead, status_code=status.HTTP_201_CREATED)
async def create_producer(payload: ProducerCreate, db: AsyncSession = Depends(get_db)) -> ProducerRead:
	service = ProducerService(db)
	try:
		record = await service.create(payload)
	except Exception as exc:
		raise map_service_error(exc, "producer") from exc
	return ProducerRead.model_validate(record)


@router.get("", response_model=ProducerListRead)
async def list_producers(db: AsyncSession = Depends(get_db)) -> ProducerListRead:
	service = ProducerService(db)
	try:
		records = await service.find_all()
	except Exception as exc:
		raise map_service_error(exc, "producer") from exc
	return ProducerListRead(items=[ProducerRead.model_validate(record) for record in records])


@router.get("/{producer_id}", response_model=ProducerRead)
async def get_producer(producer_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> ProducerRead:
	service = ProducerService(db)
	try:
		record = await service.find_one(producer_id)
	except Exception as exc:
		raise map_service_error(exc, "producer") from exc
	return ProducerRead.model_validate(record)


@router.patch("/{producer_id}", response_model=ProducerRead)
async def update_producer(
	producer_id: uuid.UUID,
	payload: ProducerUpdate,
	db: AsyncSession = Depends(get_db),
) -> ProducerRead:
	service = ProducerService(db)
	try:
		record = await service.update(producer_id, payload)
	except Exception as exc:
		raise map_service_error(exc, "producer") from exc
	return ProducerRead.model_validate(record)


@router.delete("/{producer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_producer(producer_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> Response:
	service = ProducerService(db)
	try:
		await service.remove(producer_id)
	except Exception as exc:
		raise map_service_error(exc, "producer") from exc
	return Response(status_code=status.HTTP_204_NO_CONTENT)
