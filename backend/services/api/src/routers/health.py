import time
from typing import Any, Dict

from fastapi import APIRouter
from sqlalchemy import text

from backend.shared.database.session import get_db_session
from backend.shared.config.logging_config import get_logger

router = APIRouter(tags=["health"])
logger = get_logger(__name__)

_started_at = time.time()


@router.get("/health", summary="Health check endpoint")
def health_check() -> Dict[str, Any]:
    """
    Check the health of the API service and its database.

    Returns:
        Health check information
    """
    start_time = time.time()
    health_info = {
        "success": True,
        "status": "ok",
        "timestamp": start_time,
        "uptime": start_time - _started_at,
        "dependencies": {
            "database": {"status": "unknown"},
        }
    }

    try:
        with get_db_session() as session:
            session.execute(text("SELECT 1"))
            health_info["dependencies"]["database"] = {
                "status": "ok",
                "response_time": time.time() - start_time
            }
    except Exception as e:
        logger.error(f"Database health check failed: {str(e)}", exc_info=True)
        health_info["dependencies"]["database"] = {"status": "error"}
        health_info["status"] = "degraded"

    return health_info


@router.get("/live", summary="Liveness check endpoint")
def liveness_check() -> Dict[str, Any]:
    """Check if the service is alive."""
    return {"success": True, "status": "alive"}
