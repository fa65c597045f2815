"""
Health check endpoints
"""
import os

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.core.logging_config import LoggingConfig
from app.services.json_lookup_service import resolve_base_directory
from app.utils.datetime_utils import utc_now_iso

logger = LoggingConfig.get_logger(__name__)
router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """
    Basic health check endpoint

    Returns:
        dict: Health status
    """
    return {
        "status": "healthy",
        "timestamp": utc_now_iso(),
        "service": get_settings().app_name
    }


@router.get("/health/detailed")
async def detailed_health_check():
    """
    Detailed health check with component status

    Returns:
        dict: Health status including the default metadata directory
    """
    settings = get_settings()
    health_status = {
        "status": "healthy",
        "timestamp": utc_now_iso(),
        "service": settings.app_name,
        "version": "0.1.0",
        "environment": settings.app_env,
        "components": {}
    }

    try:
        directory = resolve_base_directory(settings.metadata_path)
        if not directory.is_dir():
            health_status["status"] = "degraded"
            health_status["components"]["metadata_directory"] = {
                "status": "missing",
                "path": str(directory),
                "message": "Default metadata directory does not exist"
            }
        elif not os.access(directory, os.R_OK | os.X_OK):
            health_status["status"] = "degraded"
            health_status["components"]["metadata_directory"] = {
                "status": "unreadable",
                "path": str(directory),
                "message": "Default metadata directory is not readable"
            }
        else:
            json_count = sum(1 for entry in directory.glob("*.json") if entry.is_file())
            health_status["components"]["metadata_directory"] = {
                "status": "healthy",
                "path": str(directory),
                "json_files": json_count
            }
    except Exception as e:
        logger.error(f"Metadata directory check failed: {e}", exc_info=True)
        health_status["status"] = "unhealthy"
        health_status["components"]["metadata_directory"] = {
            "status": "error",
            "message": f"Metadata directory check failed: {str(e)}",
            "error": type(e).__name__
        }
        return JSONResponse(status_code=503, content=health_status)

    return health_status
