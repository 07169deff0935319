from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from httpx import AsyncClient

from app.schemas.locations import CityCreate, CityUpdate
from app.services.city_service import CityService
from app.services.errors import ConflictError, NotFoundError
from app.services.repositories import RepositorySet


def _service(repositories: RepositorySet) -> CityService:
	return CityService(AsyncMock(), repositories=repositories)


@pytest.mark.asyncio
async def test_same_name_in_different_states_is_allowed(repositories: RepositorySet, seed: Any) -> None:
	sp = await seed.state("São Paulo", "SP")
	mg = await seed.state("Minas Gerais", "MG")
	service = _service(repositories)

	await service.create(CityCreate(name="Santa Rita", state_id=sp.id))
	await service.create(CityCreate(name="Santa Rita", state_id=mg.id))

	assert len(repositories.cities.records) == 2


@pytest.mark.asyncio
async def test_same_name_and_state_conflicts(repositories: RepositorySet, seed: Any) -> None:
	sp = await seed.state()
	service = _service(repositories)
	await service.create(CityCreate(name="Campinas", state_id=sp.id))

	with pytest.raises(ConflictError) as excinfo:
		await service.create(CityCreate(name="Campinas", state_id=sp.id))

	assert excinfo.value.fields == ("name", "state_id")


@pytest.mark.asyncio
async def test_missing_state_is_reported_before_conflict(repositories: RepositorySet, seed: Any) -> None:
	sp = await seed.state()
	city = await seed.city(sp.id, "Campinas")
	# Dangling state_id that also collides with an existing (name, state_id) pair.
	del repositories.states.records[sp.id]

	with pytest.raises(NotFoundError) as excinfo:
		await _service(repositories).create(CityCreate(name=city.name, state_id=sp.id))

	assert excinfo.value.resource == "State"


@pytest.mark.asyncio
async def test_update_to_missing_state_is_not_found(repositories: RepositorySet, seed: Any) -> None:
	sp = await seed.state()
	city = await seed.city(sp.id)

	with pytest.raises(NotFoundError):
		await _service(repositories).update(city.id, CityUpdate(state_id=uuid4()))

	assert repositories.cities.records[city.id].state_id == sp.id


@pytest.mark.asyncio
async def test_rename_checks_pair_against_current_state(repositories: RepositorySet, seed: Any) -> None:
	sp = await seed.state()
	campinas = await seed.city(sp.id, "Campinas")
	await seed.city(sp.id, "Santos")

	with pytest.raises(ConflictError):
		await _service(repositories).update(campinas.id, CityUpdate(name="Santos"))


@pytest.mark.asyncio
async def test_rename_does_not_recheck_unchanged_state(repositories: RepositorySet, seed: Any) -> None:
	sp = await seed.state()
	city = await seed.city(sp.id, "Campinas")
	del repositories.states.records[sp.id]

	updated = await _service(repositories).update(city.id, CityUpdate(name="Valinhos"))

	assert updated.name == "Valinhos"


@pytest.mark.asyncio
async def test_cities_api_status_codes(client: AsyncClient, seed: Any) -> None:
	sp = await seed.state()
	payload = {"name": "Campinas", "state_id": str(sp.id)}

	created = await client.post("/api/v1/cities", json=payload)
	assert created.status_code == 201
	assert created.json()["state_id"] == str(sp.id)

	duplicate = await client.post("/api/v1/cities", json=payload)
	assert duplicate.status_code == 409

	dangling = await client.post("/api/v1/cities", json={"name": "Campinas", "state_id": str(uuid4())})
	assert dangling.status_code == 404
	assert dangling.json()["detail"].startswith("State ")

	missing = await client.patch(f"/api/v1/cities/{uuid4()}", json={"name": "Updated"})
	assert missing.status_code == 404
