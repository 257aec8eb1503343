"""Prebuilt frontend bundle (production only).

Any GET outside `/api/` is answered with the matching file from the bundle
directory, or with `index.html` so client-side routes survive a reload.
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException
from starlette.responses import FileResponse


def build_router(static_dir: Path) -> APIRouter:
    router = APIRouter()
    root = static_dir.resolve()
    index = root / "index.html"

    @router.get("/{full_path:path}", include_in_schema=False)
    def spa_fallback(full_path: str):
        if full_path == "api" or full_path.startswith("api/"):
            raise HTTPException(status_code=404)

        candidate = (root / full_path).resolve()
        # Never serve anything outside the bundle directory
        if full_path and candidate.is_file() and candidate.is_relative_to(root):
            return FileResponse(candidate)
        if not index.is_file():
            raise HTTPException(status_code=404)
        return FileResponse(index)

    return router
