"""Farm CRUD routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.routes.errors import map_service_error
from app.schemas.farm import FarmCreate, FarmListRead, FarmRead, FarmUpdate
from app.services.farm_service import FarmService

router = APIRouter(prefix="/farms", tags=["farms"])


@router.post("", response_model=FarmRead, status_code=status.HTTP_201_CREATED)
async def create_farm(payload: FarmCreate, db: AsyncSession = Depends(get_db)) -> FarmRead:
	service = FarmService(db)
	try:
		record = await service.create(payload)
	except Exception as exc:
		raise map_service_error(exc, "farm") from exc
	return FarmRead.model_validate(record)


@router.get("", response_model=FarmListRead)
async def list_farms(db: AsyncSession = Depends(get_db)) -> FarmListRead:
	service = FarmService(db)
	try:
		records = await service.find_all()
	except Exception as exc:
		raise map_service_error(exc, "farm") from exc
	return FarmListRead(items=[FarmRead.model_validate(record) for record in records])


@router.get("/{farm_id}", response_model=FarmRead)
async def get_farm(farm_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> FarmRead:
	service = FarmService(db)
	try:
		record = await service.find_one(farm_id)
	except Exception as exc:
		raise map_service_error(exc, "farm") from exc
	return FarmRead.model_validate(record)


@router.patch("/{farm_id}", response_model=FarmRead)
async def update_farm(
	farm_id: uuid.UUID,
	payload: FarmUpdate,
	db: AsyncSession = Depends(get_db),
) -> FarmRead:
	service = FarmService(db)
	try:
		record = await service.update(farm_id, payload)
	except Exception as exc:
		raise map_service_error(exc, "farm") from exc
	return FarmRead.model_validate(record)


@router.delete("/{farm_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_farm(farm_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> Response:
	service = FarmService(db)
	try:
		await service.remove(farm_id)
	except Exception as exc:
		raise map_service_error(exc, "farm") from exc
	return Response(status_code=status.HTTP_204_NO_CONTENT)
