"""Interface web mínima: página inicial e arquivos estáticos."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"

router = APIRouter()


@router.get("/", include_in_schema=False)
async def index() -> FileResponse:
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")


def create_static_files() -> StaticFiles:
    """App ASGI servindo `api/static` (montado em /static)."""
    return StaticFiles(directory=STATIC_DIR)
