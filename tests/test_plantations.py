from __future__ import annotations

from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from httpx import AsyncClient

from app.schemas.crops import PlantationCreate, PlantationUpdate
from app.services.errors import ConflictError, NotFoundError
from app.services.plantation_service import PlantationService
from app.services.repositories import RepositorySet


@pytest.fixture
async def refs(seed: Any) -> SimpleNamespace:
	state = await seed.state()
	city = await seed.city(state.id)
	producer = await seed.producer()
	farm = await seed.farm(city.id, producer.id)
	return SimpleNamespace(
		farm_id=farm.id,
		soy_id=(await seed.crop("Soja")).id,
		corn_id=(await seed.crop("Milho")).id,
		harvest_id=(await seed.harvest()).id,
	)


def _service(repositories: RepositorySet) -> PlantationService:
	return PlantationService(AsyncMock(), repositories=repositories)


@pytest.mark.asyncio
async def test_triple_is_unique(repositories: RepositorySet, refs: SimpleNamespace) -> None:
	service = _service(repositories)
	payload = PlantationCreate(farm_id=refs.farm_id, crop_id=refs.soy_id, harvest_id=refs.harvest_id)
	await service.create(payload)

	with pytest.raises(ConflictError) as excinfo:
		await service.create(payload)

	assert excinfo.value.fields == ("farm_id", "crop_id", "harvest_id")
	assert len(repositories.plantations.records) == 1


@pytest.mark.asyncio
async def test_update_crop_to_free_triple(repositories: RepositorySet, refs: SimpleNamespace) -> None:
	service = _service(repositories)
	plantation = await service.create(
		PlantationCreate(farm_id=refs.farm_id, crop_id=refs.soy_id, harvest_id=refs.harvest_id)
	)

	updated = await service.update(plantation.id, PlantationUpdate(crop_id=refs.corn_id))

	assert updated.crop_id == refs.corn_id
	assert updated.farm_id == refs.farm_id


@pytest.mark.asyncio
async def test_update_to_own_triple_is_a_noop_success(repositories: RepositorySet, refs: SimpleNamespace) -> None:
	service = _service(repositories)
	plantation = await service.create(
		PlantationCreate(farm_id=refs.farm_id, crop_id=refs.soy_id, harvest_id=refs.harvest_id)
	)

	updated = await service.update(
		plantation.id,
		PlantationUpdate(farm_id=refs.farm_id, crop_id=refs.soy_id, harvest_id=refs.harvest_id),
	)

	assert updated.id == plantation.id


@pytest.mark.asyncio
async def test_update_into_taken_triple_uses_merged_key(
	repositories: RepositorySet,
	refs: SimpleNamespace,
	monkeypatch: pytest.MonkeyPatch,
) -> None:
	service = _service(repositories)
	soy = await service.create(
		PlantationCreate(farm_id=refs.farm_id, crop_id=refs.soy_id, harvest_id=refs.harvest_id)
	)
	await service.create(
		PlantationCreate(farm_id=refs.farm_id, crop_id=refs.corn_id, harvest_id=refs.harvest_id)
	)
	lookup = AsyncMock(wraps=repositories.plantations.find_by_unique_keys)
	monkeypatch.setattr(repositories.plantations, "find_by_unique_keys", lookup)

	with pytest.raises(ConflictError):
		await service.update(soy.id, PlantationUpdate(crop_id=refs.corn_id))

	lookup.assert_awaited_once_with(refs.farm_id, refs.corn_id, refs.harvest_id)
	assert repositories.plantations.records[soy.id].crop_id == refs.soy_id


@pytest.mark.asyncio
@pytest.mark.parametrize(
	("field", "resource"),
	[("farm_id", "Farm"), ("crop_id", "Crop"), ("harvest_id", "Harvest")],
)
async def test_each_reference_is_checked(
	repositories: RepositorySet,
	refs: SimpleNamespace,
	field: str,
	resource: str,
) -> None:
	fields = {"farm_id": refs.farm_id, "crop_id": refs.soy_id, "harvest_id": refs.harvest_id}
	fields[field] = uuid4()

	with pytest.raises(NotFoundError) as excinfo:
		await _service(repositories).create(PlantationCreate(**fields))

	assert excinfo.value.resource == resource
	assert excinfo.value.record_id == fields[field]


@pytest.mark.asyncio
async def test_first_missing_reference_wins(repositories: RepositorySet, refs: SimpleNamespace) -> None:
	missing_farm = uuid4()

	with pytest.raises(NotFoundError) as excinfo:
		await _service(repositories).create(
			PlantationCreate(farm_id=missing_farm, crop_id=uuid4(), harvest_id=refs.harvest_id)
		)

	assert excinfo.value.resource == "Farm"
	assert excinfo.value.record_id == missing_farm


@pytest.mark.asyncio
async def test_dangling_reference_beats_colliding_triple(
	repositories: RepositorySet,
	refs: SimpleNamespace,
) -> None:
	service = _service(repositories)
	payload = PlantationCreate(farm_id=refs.farm_id, crop_id=refs.soy_id, harvest_id=refs.harvest_id)
	await service.create(payload)
	del repositories.crops.records[refs.soy_id]

	with pytest.raises(NotFoundError):
		await service.create(payload)


@pytest.mark.asyncio
async def test_plantations_api_scenario(client: AsyncClient, refs: SimpleNamespace) -> None:
	payload = {
		"farm_id": str(refs.farm_id),
		"crop_id": str(refs.soy_id),
		"harvest_id": str(refs.harvest_id),
	}
	created = await client.post("/api/v1/plantations", json=payload)
	assert created.status_code == 201
	plantation_id = created.json()["id"]

	duplicate = await client.post("/api/v1/plantations", json=payload)
	assert duplicate.status_code == 409

	moved = await client.patch(
		f"/api/v1/plantations/{plantation_id}",
		json={"crop_id": str(refs.corn_id)},
	)
	assert moved.status_code == 200
	assert moved.json()["crop_id"] == str(refs.corn_id)

	listed = await client.get("/api/v1/plantations")
	assert len(listed.json()["items"]) == 1

	assert (await client.delete(f"/api/v1/plantations/{plantation_id}")).status_code == 204
	assert (await client.delete(f"/api/v1/plantations/{plantation_id}")).status_code == 404
