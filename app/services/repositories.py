"""Async SQLAlchemy repositories: the storage contract behind each service.

Every repository offers ``create``, ``find_by_id``, ``find_all``, ``update``
and ``remove`` plus one dedicated lookup per natural-key scope, so each
uniqueness query hits the matching unique index.

Guards in the service layer read before they write, which leaves a window
where two requests can pass the same uniqueness check.  The database unique
constraints close that window; ``_flush`` turns their violation into the
same ``ConflictError`` a guard would have raised.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import City, Crop, Farm, Harvest, Plantation, Producer, State
from app.services.errors import ConflictError, NotFoundError

UNIQUE_VIOLATION_SQLSTATE = "23505"

ModelT = TypeVar("ModelT")

_logger = structlog.get_logger("agroregistry.repositories")


def is_unique_violation(exc: IntegrityError) -> bool:
	orig = exc.orig
	for candidate in (orig, getattr(orig, "__cause__", None)):
		code = getattr(candidate, "sqlstate", None) or getattr(candidate, "pgcode", None)
		if code == UNIQUE_VIOLATION_SQLSTATE:
			return True
	return False


class SqlRepository(Generic[ModelT]):
	"""Generic CRUD over one mapped table."""

	model: ClassVar[type[Any]]
	# constraint name -> fields it covers, used to name the colliding fields
	unique_constraints: ClassVar[dict[str, tuple[str, ...]]] = {}

	def __init__(self, db: AsyncSession):
		self.db = db

	@property
	def resource_name(self) -> str:
		return self.model.__name__

	async def create(self, fields: dict[str, Any]) -> ModelT:
		record = self.model(**fields)
		self.db.add(record)
		await self._flush()
		await self.db.refresh(record)
		return record

	async def find_by_id(self, record_id: uuid.UUID) -> ModelT | None:
		row = await self.db.execute(select(self.model).where(self.model.id == record_id))
		return row.scalar_one_or_none()

	async def find_all(self) -> list[ModelT]:
		"""Oldest first.

		``created_at`` is the transaction start time, so rows written in one
		transaction share it; ``id`` only makes their relative order stable.
		"""
		stmt = select(self.model).order_by(self.model.created_at.asc(), self.model.id.asc())
		rows = await self.db.execute(stmt)
		return list(rows.scalars().all())

	async def update(self, record_id: uuid.UUID, fields: dict[str, Any]) -> ModelT:
		record = await self._require(record_id)
		for name, value in fields.items():
			setattr(record, name, value)
		await self._flush()
		await self.db.refresh(record)
		return record

	async def remove(self, record_id: uuid.UUID) -> None:
		record = await self._require(record_id)
		await self.db.delete(record)
		await self.db.flush()

	async def _require(self, record_id: uuid.UUID) -> ModelT:
		record = await self.find_by_id(record_id)
		if record is None:
			raise NotFoundError(self.resource_name, record_id)
		return record

	async def _find_one_by(self, **criteria: Any) -> ModelT | None:
		stmt = select(self.model).where(
			*(getattr(self.model, name) == value for name, value in criteria.items())
		)
		rows = await self.db.execute(stmt)
		return rows.scalars().first()

	async def _flush(self) -> None:
		try:
			await self.db.flush()
		except IntegrityError as exc:
			if not is_unique_violation(exc):
				raise
			raise self._translate_unique_violation(exc) from exc

	def _translate_unique_violation(self, exc: IntegrityError) -> ConflictError:
		detail = str(exc.orig)
		for constraint, fields in self.unique_constraints.items():
			if constraint in detail:
				_logger.warning(
					"unique_violation_translated",
					resource=self.resource_name,
					constraint=constraint,
				)
				return ConflictError(self.resource_name, fields)

		_logger.warning("unique_violation_translated", resource=self.resource_name, constraint=None)
		return ConflictError(
			self.resource_name,
			(),
			message=f"{self.resource_name} violates a uniqueness constraint",
		)


class StateRepository(SqlRepository[State]):
	model = State
	unique_constraints = {
		"uq_states_name": ("name",),
		"uq_states_acronym": ("acronym",),
	}

	async def find_by_name(self, name: str) -> State | None:
		return await self._find_one_by(name=name)

	async def find_by_acronym(self, acronym: str) -> State | None:
		return await self._find_one_by(acronym=acronym)


class CityRepository(SqlRepository[City]):
	model = City
	unique_constraints = {"uq_cities_name_state_id": ("name", "state_id")}

	async def find_by_name_and_state(self, name: str, state_id: uuid.UUID) -> City | None:
		return await self._find_one_by(name=name, state_id=state_id)


class ProducerRepository(SqlRepository[Producer]):
	model = Producer
	unique_constraints = {"uq_producers_document": ("document",)}

	async def find_by_document(self, document: str) -> Producer | None:
		return await self._find_one_by(document=document)


class FarmRepository(SqlRepository[Farm]):
	model = Farm


class CropRepository(SqlRepository[Crop]):
	model = Crop
	unique_constraints = {"uq_crops_name": ("name",)}

	async def find_by_name(self, name: str) -> Crop | None:
		return await self._find_one_by(name=name)


class HarvestRepository(SqlRepository[Harvest]):
	model = Harvest


class PlantationRepository(SqlRepository[Plantation]):
	model = Plantation
	unique_constraints = {
		"uq_plantations_farm_crop_harvest": ("farm_id", "crop_id", "harvest_id"),
	}

	async def find_by_unique_keys(
		self,
		farm_id: uuid.UUID,
		crop_id: uuid.UUID,
		harvest_id: uuid.UUID,
	) -> Plantation | None:
		return await self._find_one_by(farm_id=farm_id, crop_id=crop_id, harvest_id=harvest_id)


@dataclass(slots=True)
class RepositorySet:
	"""One repository per collection, all bound to the same session."""

	states: StateRepository
	cities: CityRepository
	producers: ProducerRepository
	farms: FarmRepository
	crops: CropRepository
	harvests: HarvestRepository
	plantations: PlantationRepository

	@classmethod
	def from_session(cls, db: AsyncSession) -> RepositorySet:
		return cls(
			states=StateRepository(db),
			cities=CityRepository(db),
			producers=ProducerRepository(db),
			farms=FarmRepository(db),
			crops=CropRepository(db),
			harvests=HarvestRepository(db),
			plantations=PlantationRepository(db),
		)
