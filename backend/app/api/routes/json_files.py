"""
API routes for serving metadata JSON files from disk
"""
from typing import Optional

from fastapi import APIRouter, Header
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.core.logging_config import LoggingConfig
from app.services.json_lookup_service import (INTERNAL_ERROR_MESSAGE,
                                              JsonLookupService)

router = APIRouter(prefix="/api/json", tags=["json"])
logger = LoggingConfig.get_logger(__name__)


def _resolve_base_dir(x_metadata_path: Optional[str]) -> str:
    """Header value if present and non-empty, otherwise the configured default"""
    return x_metadata_path or get_settings().metadata_path


def _internal_error() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": INTERNAL_ERROR_MESSAGE}
    )


@router.get("")
def list_json_files(x_metadata_path: Optional[str] = Header(default=None)):
    """List the names that can be requested from /api/json/{name}, as a bare array"""
    try:
        base_dir = _resolve_base_dir(x_metadata_path)
        names = JsonLookupService(base_dir).list_names()
    except Exception as e:
        logger.error(f"Error listing JSON files: {e}", exc_info=True)
        return _internal_error()

    if names is None:
        return JSONResponse(
            status_code=404,
            content={"success": False, "error": "Metadata directory not found"}
        )
    return names


@router.get("/{name}")
def get_json_file(name: str, x_metadata_path: Optional[str] = Header(default=None)):
    """
    Return the contents of the first matching <name>.json variant

    Returns:
        200 with {success, data, fileName}, 404 when no variant matches,
        500 on unexpected errors
    """
    try:
        base_dir = _resolve_base_dir(x_metadata_path)
        result = JsonLookupService(base_dir).lookup(name)
        status_code, body = result.to_response()
        return JSONResponse(status_code=status_code, content=body)
    except Exception as e:
        logger.error(f"Error loading JSON: {e}", exc_info=True)
        return _internal_error()
