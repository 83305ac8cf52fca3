"""
Static frontend serving with a single-page-app fallback.
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, FastAPI, status
from fastapi.responses import FileResponse, JSONResponse

logger = logging.getLogger(__name__)

ENTRY_DOCUMENT = "index.html"


def resolve_static_path(static_root: Path, requested: str) -> Optional[Path]:
    """Return the file for `requested` under static_root, or None.

    Anything that resolves outside static_root is treated as missing.
    """
    root = static_root.resolve()
    candidate = (root / requested.lstrip("/")).resolve()
    if not candidate.is_relative_to(root):
        return None
    if candidate.is_dir():
        candidate = candidate / ENTRY_DOCUMENT
    return candidate if candidate.is_file() else None


def build_static_router(static_dir: Path) -> APIRouter:
    router = APIRouter()

    @router.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str):
        asset = resolve_static_path(static_dir, full_path)
        if asset is not None:
            return FileResponse(asset)

        entry = static_dir / ENTRY_DOCUMENT
        if not entry.is_file():
            logger.error("Entry document not found: %s", entry)
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"status": False, "message": "Not found"})
        return FileResponse(entry)

    return router


def register_static(app: FastAPI, static_dir: Path) -> None:
    """Must be registered after every API router; the catch-all route matches everything."""
    app.include_router(build_static_router(static_dir))
