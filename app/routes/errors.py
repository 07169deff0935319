"""Translate service-layer errors into HTTP responses."""

from __future__ import annotations

import structlog
from fastapi import HTTPException, status

from app.services.errors import ConflictError

_logger = structlog.get_logger("agroregistry.routes")


def map_service_error(exc: Exception, resource: str) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ConflictError):
		return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	_logger.exception("service_failure", resource=resource, error=str(exc))
	return HTTPException(
		status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
		detail=f"Unexpected {resource} service failure",
	)
