"""Async SQLAlchemy engine, session factory and the FastAPI session dependency."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.config import get_settings

_settings = get_settings()
_logger = structlog.get_logger("agroregistry.database")

engine = create_async_engine(
	_settings.database_url,
	echo=_settings.database_echo,
	pool_size=_settings.database_pool_size,
	max_overflow=_settings.database_max_overflow,
	pool_pre_ping=True,
)

async_session_factory = async_sessionmaker(
	engine,
	class_=AsyncSession,
	expire_on_commit=False,
	autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
	"""Yield a request-scoped session; commit on success, roll back on failure."""
	async with async_session_factory() as session:
		try:
			yield session
			await session.commit()
		except Exception as exc:
			await session.rollback()
			_logger.warning("db_session_rollback", error=str(exc))
			raise
