import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error_dict},
        headers=exc.headers,
    )


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.AUTO_CREATE_SCHEMA:
            from src.depends import init_db

            await init_db()
            logger.info("Database schema ready")

        sweeper = None
        if ApplicationConfig.ENABLE_EXPIRY_SWEEP:
            from src.app.services.expiry_sweeper import InvitationExpirySweeper
            from src.depends import unit_of_work_scope

            sweeper = InvitationExpirySweeper(
                unit_of_work_scope,
                interval_seconds=ApplicationConfig.EXPIRY_SWEEP_INTERVAL_SECONDS,
            )
            sweeper.start()
            logger.info("Invitation expiry sweep started")
        yield
        if sweeper is not None:
            await sweeper.stop()

    app = FastAPI(title="Planeja+ API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import (
        admin,
        calendar,
        health_check,
        invitation,
        project,
        report,
        task,
        team,
    )

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(invitation.router, tags=["Invitations"])
    app.include_router(project.router, tags=["Projects"])
    app.include_router(task.router, tags=["Tasks"])
    app.include_router(team.router, tags=["Teams"])
    app.include_router(calendar.router, tags=["Calendar"])
    app.include_router(report.router, tags=["Reports"])
    app.include_router(admin.router, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
