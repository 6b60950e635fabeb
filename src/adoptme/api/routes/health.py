"""
Liveness and health check API routes
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError

from adoptme.api.dependencies import get_store
from adoptme.utils.error_handling import ApiError

router = APIRouter()
logger = logging.getLogger(__name__)

LIVENESS_TEXT = "¡Servidor funcionando correctamente!"


@router.get("/", response_class=PlainTextResponse)
async def liveness():
    return LIVENESS_TEXT


@router.get("/health")
async def health_check(store=Depends(get_store)):
    """Health check - reports unhealthy only when the database cannot be reached"""
    try:
        connected = await store.ping()
    except PyMongoError as e:
        logger.warning(f"Health check failed: {e}")
        raise ApiError(503, error="Health check failed", details=str(e))

    if not connected:
        logger.warning("Health check failed: database not initialized")
        raise ApiError(503, error="Health check failed", details="Database not initialized")

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected",
    }
