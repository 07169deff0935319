"""Crop CRUD routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.routes.errors import map_service_error
from app.schemas.crops import CropCreate, CropListRead, CropRead, CropUpdate
from app.services.crop_service import CropService

router = APIRouter(prefix="/crops", tags=["crops"])


@router.post("", response_model=CropRead, status_code=status.HTTP_201_CREATED)
async def create_crop(payload: CropCreate, db: AsyncSession = Depends(get_db)) -> CropRead:
	service = CropService(db)
	try:
		record = await service.create(payload)
	except Exception as exc:
		raise map_service_error(exc, "crop") from exc
	return CropRead.model_validate(record)


@router.get("", response_model=CropListRead)
async def list_crops(db: AsyncSession = Depends(get_db)) -> CropListRead:
	service = CropService(db)
	try:
		records = await service.find_all()
	except Exception as exc:
		raise map_service_error(exc, "crop") from exc
	return CropListRead(items=[CropRead.model_validate(record) for record in records])


@router.get("/{crop_id}", response_model=CropRead)
async def get_crop(crop_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> CropRead:
	service = CropService(db)
	try:
		record = await service.find_one(crop_id)
	except Exception as exc:
		raise map_service_error(exc, "crop") from exc
	return CropRead.model_validate(record)


@router.patch("/{crop_id}", response_model=CropRead)
async def update_crop(
	crop_id: uuid.UUID,
	payload: CropUpdate,
	db: AsyncSession = Depends(get_db),
) -> CropRead:
	service = CropService(db)
	try:
		record = await service.update(crop_id, payload)
	except Exception as exc:
		raise map_service_error(exc, "crop") from exc
	return CropRead.model_validate(record)


@router.delete("/{crop_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_crop(crop_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> Response:
	service = CropService(db)
	try:
		await service.remove(crop_id)
	except Exception as exc:
		raise map_service_error(exc, "crop") from exc
	return Response(status_code=status.HTTP_204_NO_CONTENT)
