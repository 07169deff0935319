"""City CRUD routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.routes.errors import map_service_error
from app.schemas.locations import CityCreate, CityListRead, CityRead, CityUpdate
from app.services.city_service import CityService

router = APIRouter(prefix="/cities", tags=["cities"])


@router.post("", response_model=CityRead, status_code=status.HTTP_201_CREATED)
async def create_city(payload: CityCreate, db: AsyncSession = Depends(get_db)) -> CityRead:
	service = CityService(db)
	try:
		record = await service.create(payload)
	except Exception as exc:
		raise map_service_error(exc, "city") from exc
	return CityRead.model_validate(record)


@router.get("", response_model=CityListRead)
async def list_cities(db: AsyncSession = Depends(get_db)) -> CityListRead:
	service = CityService(db)
	try:
		records = await service.find_all()
	except Exception as exc:
		raise map_service_error(exc, "city") from exc
	return CityListRead(items=[CityRead.model_validate(record) for record in records])


@router.get("/{city_id}", response_model=CityRead)
async def get_city(city_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> CityRead:
	service = CityService(db)
	try:
		record = await service.find_one(city_id)
	except Exception as exc:
		raise map_service_error(exc, "city") from exc
	return CityRead.model_validate(record)


@router.patch("/{city_id}", response_model=CityRead)
async def update_city(
	city_id: uuid.UUID,
	payload: CityUpdate,
	db: AsyncSession = Depends(get_db),
) -> CityRead:
	service = CityService(db)
	try:
		record = await service.update(city_id, payload)
	except Exception as exc:
		raise map_service_error(exc, "city") from exc
	return CityRead.model_validate(record)


@router.delete("/{city_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_city(city_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> Response:
	service = CityService(db)
	try:
		await service.remove(city_id)
	except Exception as exc:
		raise map_service_error(exc, "city") from exc
	return Response(status_code=status.HTTP_204_NO_CONTENT)
