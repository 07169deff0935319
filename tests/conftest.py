"""Shared pytest fixtures: in-memory repositories, async test client, seed helpers."""

from __future__ import annotations

import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Any
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.database import get_db
from app.main import app
from app.models.enums import DocumentTypeEnum
from app.services.errors import NotFoundError
from app.services.repositories import (
	CityRepository,
	CropRepository,
	FarmRepository,
	HarvestRepository,
	PlantationRepository,
	ProducerRepository,
	RepositorySet,
	StateRepository,
)


class FakeAsyncSession:
	def __init__(self) -> None:
		self.commit = AsyncMock()
		self.rollback = AsyncMock()
		self.close = AsyncMock()
		self.execute = AsyncMock()
		self.flush = AsyncMock()
		self.refresh = AsyncMock()
		self.delete = AsyncMock()
		self.added: list[Any] = []

	def add(self, record: Any) -> None:
		self.added.append(record)


class InMemoryStore:
	"""Replaces the SQL primitives of a repository with a dict keyed by id.

	Mixed in *before* a real repository class so the dedicated natural-key
	lookups (``find_by_name`` etc.) run unchanged on top of ``_find_one_by``.
	"""

	def __init__(self) -> None:
		self.db = None
		self.records: dict[uuid.UUID, Any] = {}
		self.writes: list[tuple[str, uuid.UUID]] = []

	async def create(self, fields: dict[str, Any]) -> Any:
		now = datetime.now(UTC)
		record = self.model(**fields)
		record.id = uuid.uuid4()
		record.created_at = now
		record.updated_at = now
		self.records[record.id] = record
		self.writes.append(("create", record.id))
		return record

	async def find_by_id(self, record_id: uuid.UUID) -> Any | None:
		return self.records.get(record_id)

	async def find_all(self) -> list[Any]:
		return list(self.records.values())

	async def update(self, record_id: uuid.UUID, fields: dict[str, Any]) -> Any:
		record = self.records.get(record_id)
		if record is None:
			raise NotFoundError(self.resource_name, record_id)
		for name, value in fields.items():
			setattr(record, name, value)
		record.updated_at = datetime.now(UTC)
		self.writes.append(("update", record_id))
		return record

	async def remove(self, record_id: uuid.UUID) -> None:
		if self.records.pop(record_id, None) is None:
			raise NotFoundError(self.resource_name, record_id)
		self.writes.append(("remove", record_id))

	async def _find_one_by(self, **criteria: Any) -> Any | None:
		for record in self.records.values():
			if all(getattr(record, name) == value for name, value in criteria.items()):
				return record
		return None


class FakeStateRepository(InMemoryStore, StateRepository):
	pass


class FakeCityRepository(InMemoryStore, CityRepository):
	pass


class FakeProducerRepository(InMemoryStore, ProducerRepository):
	pass


class FakeFarmRepository(InMemoryStore, FarmRepository):
	pass


class FakeCropRepository(InMemoryStore, CropRepository):
	pass


class FakeHarvestRepository(InMemoryStore, HarvestRepository):
	pass


class FakePlantationRepository(InMemoryStore, PlantationRepository):
	pass


@pytest.fixture
def repositories() -> RepositorySet:
	"""A fresh in-memory store per test, one fake repository per collection."""
	return RepositorySet(
		states=FakeStateRepository(),
		cities=FakeCityRepository(),
		producers=FakeProducerRepository(),
		farms=FakeFarmRepository(),
		crops=FakeCropRepository(),
		harvests=FakeHarvestRepository(),
		plantations=FakePlantationRepository(),
	)


@pytest.fixture
def fake_db_session() -> FakeAsyncSession:
	"""A lightweight async-session stub for dependency overrides in API tests."""
	return FakeAsyncSession()


@pytest.fixture
async def client(
	fake_db_session: FakeAsyncSession,
	repositories: RepositorySet,
	monkeypatch: pytest.MonkeyPatch,
) -> AsyncGenerator[AsyncClient, None]:
	"""HTTPX async client with lifespan disabled and storage served from memory."""

	async def override_get_db() -> AsyncGenerator[Any, None]:
		yield fake_db_session

	monkeypatch.setattr(
		RepositorySet,
		"from_session",
		classmethod(lambda cls, _db: repositories),
	)
	app.dependency_overrides[get_db] = override_get_db
	original_lifespan = app.router.lifespan_context

	@asynccontextmanager
	async def noop_lifespan(_: Any) -> AsyncGenerator[None, None]:
		yield

	app.router.lifespan_context = noop_lifespan

	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://test") as test_client:
		yield test_client

	app.router.lifespan_context = original_lifespan
	app.dependency_overrides.clear()


@pytest.fixture
def seed(repositories: RepositorySet) -> Any:
	"""Helpers that insert reference rows directly, bypassing the guards."""

	class _Seed:
		async def state(self, name: str = "São Paulo", acronym: str = "SP") -> Any:
			return await repositories.states.create({"name": name, "acronym": acronym})

		async def city(self, state_id: uuid.UUID, name: str = "Campinas") -> Any:
			return await repositories.cities.create({"name": name, "state_id": state_id})

		async def producer(self, document: str = "12345678900") -> Any:
			return await repositories.producers.create(
				{
					"document": document,
					"document_type": DocumentTypeEnum.CPF,
					"name": "João da Silva",
				}
			)

		async def farm(self, city_id: uuid.UUID, producer_id: uuid.UUID, **overrides: Any) -> Any:
			fields = {
				"farm_name": "Fazenda Boa Vista",
				"total_area": 100.0,
				"vegetation_area": 20.0,
				"agricultural_area": 30.0,
				"city_id": city_id,
				"producer_id": producer_id,
			}
			fields.update(overrides)
			return await repositories.farms.create(fields)

		async def crop(self, name: str = "Soja") -> Any:
			return await repositories.crops.create({"name": name})

		async def harvest(self, name: str = "Safra 2024", year: int = 2024) -> Any:
			return await repositories.harvests.create({"name": name, "year": year})

	return _Seed()
