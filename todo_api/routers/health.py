"""Liveness endpoint for container orchestration.

Exposes:
- GET /health: answers without touching the database
"""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "healthy"}
