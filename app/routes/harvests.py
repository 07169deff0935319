"""Harvest CRUD routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.routes.errors import map_service_error
from app.schemas.crops import HarvestCreate, HarvestListRead, HarvestRead, HarvestUpdate
from app.services.harvest_service import HarvestService

router = APIRouter(prefix="/harvests", tags=["harvests"])


@router.post("", response_model=HarvestRead, status_code=status.HTTP_201_CREATED)
async def create_harvest(payload: HarvestCreate, db: AsyncSession = Depends(get_db)) -> HarvestRead:
	service = HarvestService(db)
	try:
		record = await service.create(payload)
	except Exception as exc:
		raise map_service_error(exc, "harvest") from exc
	return HarvestRead.model_validate(record)


@router.get("", response_model=HarvestListRead)
async def list_harvests(db: AsyncSession = Depends(get_db)) -> HarvestListRead:
	service = HarvestService(db)
	try:
		records = await service.find_all()
	except Exception as exc:
		raise map_service_error(exc, "harvest") from exc
	return HarvestListRead(items=[HarvestRead.model_validate(record) for record in records])


@router.get("/{harvest_id}", response_model=HarvestRead)
async def get_harvest(harvest_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> HarvestRead:
	service = HarvestService(db)
	try:
		record = await service.find_one(harvest_id)
	except Exception as exc:
		raise map_service_error(exc, "harvest") from exc
	return HarvestRead.model_validate(record)


@router.patch("/{harvest_id}", response_model=HarvestRead)
async def update_harvest(
	harvest_id: uuid.UUID,
	payload: HarvestUpdate,
	db: AsyncSession = Depends(get_db),
) -> HarvestRead:
	service = HarvestService(db)
	try:
		record = await service.update(harvest_id, payload)
	except Exception as exc:
		raise map_service_error(exc, "harvest") from exc
	return HarvestRead.model_validate(record)


@router.delete("/{harvest_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_harvest(harvest_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> Response:
	service = HarvestService(db)
	try:
		await service.remove(harvest_id)
	except Exception as exc:
		raise map_service_error(exc, "harvest") from exc
	return Response(status_code=status.HTTP_204_NO_CONTENT)
