"""Plantation (farm × crop × harvest) CRUD routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.routes.errors import map_service_error
from app.schemas.crops import (
	PlantationCreate,
	PlantationListRead,
	PlantationRead,
	PlantationUpdate,
)
from app.services.plantation_service import PlantationService

router = APIRouter(prefix="/plantations", tags=["plantations"])


@router.post("", response_model=PlantationRead, status_code=status.HTTP_201_CREATED)
async def create_plantation(payload: PlantationCreate, db: AsyncSession = Depends(get_db)) -> PlantationRead:
	service = PlantationService(db)
	try:
		record = await service.create(payload)
	except Exception as exc:
		raise map_service_error(exc, "plantation") from exc
	return PlantationRead.model_validate(record)


@router.get("", response_model=PlantationListRead)
async def list_plantations(db: AsyncSession = Depends(get_db)) -> PlantationListRead:
	service = PlantationService(db)
	try:
		records = await service.find_all()
	except Exception as exc:
		raise map_service_error(exc, "plantation") from exc
	return PlantationListRead(items=[PlantationRead.model_validate(record) for record in records])


@router.get("/{plantation_id}", response_model=PlantationRead)
async def get_plantation(plantation_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> PlantationRead:
	service = PlantationService(db)
	try:
		record = await service.find_one(plantation_id)
	except Exception as exc:
		raise map_service_error(exc, "plantation") from exc
	return PlantationRead.model_validate(record)


@router.patch("/{plantation_id}", response_model=PlantationRead)
async def update_plantation(
	plantation_id: uuid.UUID,
	payload: PlantationUpdate,
	db: AsyncSession = Depends(get_db),
) -> PlantationRead:
	service = PlantationService(db)
	try:
		record = await service.update(plantation_id, payload)
	except Exception as exc:
		raise map_service_error(exc, "plantation") from exc
	return PlantationRead.model_validate(record)


@router.delete("/{plantation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_plantation(plantation_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> Response:
	service = PlantationService(db)
	try:
		await service.remove(plantation_id)
	except Exception as exc:
		raise map_service_error(exc, "plantation") from exc
	return Response(status_code=status.HTTP_204_NO_CONTENT)
