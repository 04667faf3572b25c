from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel

from src.adapter.database import create_engine, create_session_factory
from src.app.services.notification_emitter import NotificationError
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_storage_error(request: Request, exc: SQLAlchemyError):
    error_dict = {"code": "STORAGE_ERROR", "message": "Internal server error"}
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_notification_error(request: Request, exc: NotificationError):
    error_dict = {"code": "NOTIFICATION_ERROR", "message": "Internal server error"}
    logger.error(f"Notification error: {exc.message} ({exc.reason})")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_engine(ApplicationConfig.DB_URI)
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        logger.info("Store opened")
        try:
            yield
        finally:
            await engine.dispose()
            logger.info("Store closed")

    app = FastAPI(title="Vault Collaboration API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import (
        admin,
        auth,
        health_check,
        invitation,
        notification,
        user,
        vault,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, prefix=prefix, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(user.router, prefix=prefix, tags=["User"])
    app.include_router(vault.router, prefix=prefix, tags=["Vaults"])
    app.include_router(invitation.router, prefix=prefix, tags=["Invitations"])
    app.include_router(notification.router, prefix=prefix, tags=["Notifications"])
    app.include_router(admin.router, prefix=prefix, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(SQLAlchemyError, handle_storage_error)
    app.add_exception_handler(NotificationError, handle_notification_error)

    return app
