"""
Health check endpoints.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.core.database import get_db

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def create_router() -> APIRouter:
    router = APIRouter(tags=["Health"])

    @router.get("/health", status_code=status.HTTP_200_OK)
    def health_check() -> Dict[str, str]:
        """
        Basic health check endpoint.

        Returns 200 OK if the service is running.
        """
        return {"status": "healthy", "timestamp": _now()}

    @router.get("/health/detailed", status_code=status.HTTP_200_OK)
    def detailed_health_check(db: Session = Depends(get_db)) -> Dict[str, Any]:
        """Health check including database connectivity."""
        health_status = {"status": "healthy", "timestamp": _now(), "checks": {}}

        try:
            db.execute(text("SELECT 1"))
            health_status["checks"]["database"] = {
                "status": "healthy",
                "message": "Database connection successful"
            }
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {e}")
            health_status["status"] = "unhealthy"
            health_status["checks"]["database"] = {
                "status": "unhealthy",
                "message": f"Database error: {str(e)}"
            }

        return health_status

    return router
