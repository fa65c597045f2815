"""
Lookup of metadata JSON files by name.

A requested name is expanded into a few filename variants (verbatim, then
progressively sanitized). Each variant is tried as ``<base_dir>/<variant>.json``
relative to the working directory, and the first file that reads and parses
wins.
"""
from __future__ import annotations

import json
import math
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field

from app.core.logging_config import LoggingConfig

logger = LoggingConfig.get_logger(__name__)

NOT_FOUND_MESSAGE = "JSON file not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"

_NOT_ALNUM_OR_SPACE = re.compile(r"[^a-zA-Z0-9\s]")
_WHITESPACE_RUN = re.compile(r"\s+")
_NOT_FILENAME_SAFE = re.compile(r"[^a-zA-Z0-9_-]")

_MISSING = object()


def _reject_constant(token: str):
    raise ValueError(f"Non-standard JSON constant: {token}")


def _parse_float(token: str):
    # Overflowing literals such as 1e400 are emitted as null
    value = float(token)
    return value if math.isfinite(value) else None


def resolve_base_directory(base_dir: str) -> Path:
    """Join base_dir under the working directory; an absolute base_dir is nested, not substituted"""
    return Path.cwd() / base_dir.lstrip("/")


def build_candidate_names(name: str) -> List[str]:
    """
    Build the ordered list of file names to try for ``name``.

    Order: verbatim, alphanumerics with whitespace runs as ``_``, the same
    with ``-``, and finally every unsafe character replaced by ``_``.
    Duplicates are dropped, keeping the first position.
    """
    stripped = _NOT_ALNUM_OR_SPACE.sub("", name)
    candidates = [
        name,
        _WHITESPACE_RUN.sub("_", stripped),
        _WHITESPACE_RUN.sub("-", stripped),
        _NOT_FILENAME_SAFE.sub("_", name),
    ]
    return list(dict.fromkeys(candidates))


class LookupResult(BaseModel):
    """Outcome of a single lookup"""
    status: Literal["found", "not_found", "error"]
    data: Any = None
    file_name: Optional[str] = Field(default=None, description="Candidate name that matched")

    @classmethod
    def found(cls, data: Any, file_name: str) -> "LookupResult":
        return cls(status="found", data=data, file_name=file_name)

    @classmethod
    def not_found(cls) -> "LookupResult":
        return cls(status="not_found")

    @classmethod
    def internal_error(cls) -> "LookupResult":
        return cls(status="error")

    def to_response(self) -> Tuple[int, Dict[str, Any]]:
        """Map the result to an HTTP status code and JSON body"""
        if self.status == "found":
            return 200, {"success": True, "data": self.data, "fileName": self.file_name}
        if self.status == "not_found":
            return 404, {"success": False, "error": NOT_FOUND_MESSAGE}
        return 500, {"success": False, "error": INTERNAL_ERROR_MESSAGE}


class JsonLookupService:
    """Resolves a name to the contents of a JSON file under a base directory"""

    def __init__(self, base_dir: str):
        self.base_dir = base_dir

    def _resolve_directory(self) -> Path:
        return resolve_base_directory(self.base_dir)

    def _load_candidate(self, directory: Path, candidate: str) -> Any:
        """Read and parse one candidate, returning _MISSING on any read or parse failure"""
        path = Path(os.path.normpath(directory / f"{candidate}.json"))
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
            return json.loads(content, parse_constant=_reject_constant, parse_float=_parse_float)
        except (OSError, ValueError) as e:
            # ValueError covers JSONDecodeError and NUL bytes in the path
            logger.debug(f"Candidate '{candidate}' skipped: {type(e).__name__}: {e}")
            return _MISSING

    def lookup(self, name: str) -> LookupResult:
        """
        Find the first candidate file for ``name`` that exists and holds valid JSON.

        Args:
            name: Requested name, used verbatim as the first candidate

        Returns:
            LookupResult: found, not_found, or error for unexpected failures
        """
        try:
            directory = self._resolve_directory()
            for candidate in build_candidate_names(name):
                value = self._load_candidate(directory, candidate)
                if value is not _MISSING:
                    logger.info(
                        "Metadata JSON resolved",
                        extra={"requested_name": name, "file_name": candidate}
                    )
                    return LookupResult.found(value, candidate)
        except Exception as e:
            logger.error(
                f"Error loading JSON for '{name}': {e}",
                exc_info=True,
                extra={"base_dir": self.base_dir}
            )
            return LookupResult.internal_error()

        logger.info(
            "Metadata JSON not found",
            extra={"requested_name": name, "base_dir": self.base_dir}
        )
        return LookupResult.not_found()

    def list_names(self) -> Optional[List[str]]:
        """
        List names of the JSON files in the base directory, without extension.

        Returns:
            Sorted names, or None if the directory does not exist
        """
        directory = self._resolve_directory()
        if not directory.is_dir():
            return None
        return sorted(
            entry.stem for entry in directory.iterdir()
            if entry.suffix == ".json" and entry.is_file()
        )
