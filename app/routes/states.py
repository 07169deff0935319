"""State CRUD routes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.routes.errors import map_service_error
from app.schemas.locations import StateCreate, StateListRead, StateRead, StateUpdate
from app.services.state_service import StateService

router = APIRouter(prefix="/states", tags=["states"])


@router.post("", response_model=StateRead, status_code=status.HTTP_201_CREATED)
async def create_state(payload: StateCreate, db: AsyncSession = Depends(get_db)) -> StateRead:
	service = StateService(db)
	try:
		record = await service.create(payload)
	except Exception as exc:
		raise map_service_error(exc, "state") from exc
	return StateRead.model_validate(record)


@router.get("", response_model=StateListRead)
async def list_states(db: AsyncSession = Depends(get_db)) -> StateListRead:
	service = StateService(db)
	try:
		records = await service.find_all()
	except Exception as exc:
		raise map_service_error(exc, "state") from exc
	return StateListRead(items=[StateRead.model_validate(record) for record in records])


@router.get("/{state_id}", response_model=StateRead)
async def get_state(state_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> StateRead:
	service = StateService(db)
	try:
		record = await service.find_one(state_id)
	except Exception as exc:
		raise map_service_error(exc, "state") from exc
	return StateRead.model_validate(record)


@router.patch("/{state_id}", response_model=StateRead)
async def update_state(
	state_id: uuid.UUID,
	payload: StateUpdate,
	db: AsyncSession = Depends(get_db),
) -> StateRead:
	service = StateService(db)
	try:
		record = await service.update(state_id, payload)
	except Exception as exc:
		raise map_service_error(exc, "state") from exc
	return StateRead.model_validate(record)


@router.delete("/{state_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_state(state_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> Response:
	service = StateService(db)
	try:
		await service.remove(state_id)
	except Exception as exc:
		raise map_service_error(exc, "state") from exc
	return Response(status_code=status.HTTP_204_NO_CONTENT)
