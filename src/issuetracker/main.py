"""FastAPI application for the issue tracker"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.auth import router as auth_router
from .api.comments import router as comments_router
from .api.issues import router as issues_router
from .api.labels import router as labels_router
from .api.users import router as users_router
from .config import Config
from .logging import setup_logging
from .storage.database import Database
from .storage.migrations import initialize_database

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTPException detail as ``{"message": ...}``"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed input is a 400, not FastAPI's default 422"""
    errors = exc.errors()
    if errors and all(error["loc"][0] in ("path", "query") for error in errors):
        message = "Invalid request parameters"
    else:
        message = "Invalid request body"
    return JSONResponse(
        status_code=400,
        content={"message": message, "errors": jsonable_encoder(errors)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(
    config: Optional[Config] = None,
    database: Optional[Database] = None,
    migrate_on_startup: bool = True,
) -> FastAPI:
    """Build the API application.

    ``database`` defaults to one built from ``config.database_url``; it is
    disposed when the application shuts down.
    """
    config = config or Config()
    setup_logging(config.log_level)
    if config.uses_default_secret:
        logger.warning("ISSUETRACKER_JWT_SECRET is not set; using the development secret")

    db = database or Database(config.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if migrate_on_startup:
            initialize_database(db.url)
        yield
        db.dispose()

    app = FastAPI(
        title="Issue Tracker API",
        description="Issues, labels and comments with token authentication",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.db = db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Include API routers
    app.include_router(auth_router, prefix="/auth", tags=["auth"])
    app.include_router(issues_router, prefix="/issues", tags=["issues"])
    app.include_router(labels_router, prefix="/labels", tags=["labels"])
    app.include_router(comments_router, tags=["comments"])
    app.include_router(users_router, prefix="/users", tags=["users"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "issuetracker-api"}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=app.state.config.host, port=app.state.config.port)
