"""App factory and ASGI entrypoint for the Todo API.

- Configures CORS for the single frontend origin
- Registers routers for health and todo endpoints
- In production, serves the prebuilt frontend with an SPA fallback
- Connects to MongoDB on startup unless a store was injected

Settings are only read when `create_app()` is called, so importing this module
has no side effects. Serve with `python -m todo_api`, or
`uvicorn todo_api.main:create_app --factory`.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from pymongo import MongoClient

from .core.config import Settings, load_settings
from .core.models_io import ErrorResponse
from .db.store import TodoStore, connect
from .routers import frontend, health, todos

logger = logging.getLogger('todo_api.main')

NOT_FOUND_MESSAGE = "Page Not Found."


def create_app(settings: Optional[Settings] = None, store: Optional[TodoStore] = None) -> FastAPI:
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title="Todo API",
        version="1.0.0",
        description="List, create and delete to-do items",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.mongo_client = None

    # CORS settings (one trusted origin)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.CORS_ORIGIN],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
    )

    # Unmatched paths and methods share one not-found answer
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content=ErrorResponse(message=NOT_FOUND_MESSAGE).model_dump())
        return JSONResponse(status_code=exc.status_code, content=ErrorResponse(message=str(exc.detail)).model_dump())

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        message = "; ".join(str(err.get("msg", "")) for err in exc.errors()) or "Invalid request."
        return JSONResponse(status_code=400, content=ErrorResponse(message=message).model_dump())

    # Register routers
    app.include_router(health.router)
    app.include_router(todos.router)

    # Static UI, registered last so it never shadows the API
    if settings.is_production:
        app.include_router(frontend.build_router(settings.STATIC_DIR))

    return app


def connect_or_exit(settings: Settings) -> tuple[MongoClient, TodoStore]:
    """Open the database connection; the process cannot serve without it."""
    try:
        return connect(settings)
    except Exception:
        logger.exception(f'Could not connect to {settings.MONGO_URL}')
        raise SystemExit(1)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Connect at startup unless a store was injected
    if app.state.store is None:
        app.state.mongo_client, app.state.store = connect_or_exit(app.state.settings)
    yield
    if app.state.mongo_client is not None:
        app.state.mongo_client.close()
        app.state.mongo_client = None

