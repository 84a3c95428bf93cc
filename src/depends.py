from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import verify_jwt
from src.app.services.rate_limiter import RateLimiter
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActingUser

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

async def init_db():
    """Create any missing tables"""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


security = HTTPBearer()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@asynccontextmanager
async def unit_of_work_scope():
    """Unit of work outside a request (background tasks)"""
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def build_rate_limiter(uow: UnitOfWork) -> RateLimiter:
    return RateLimiter(
        uow,
        max_attempts=ApplicationConfig.INVITE_RATE_LIMIT_MAX,
        window_seconds=ApplicationConfig.INVITE_RATE_LIMIT_WINDOW_SECONDS,
        block_seconds=ApplicationConfig.INVITE_RATE_LIMIT_BLOCK_SECONDS,
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> ActingUser:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        ActingUser built from the user_id, name and email claims

    Raises:
        HTTPException: 401 if token is invalid, expired or missing claims
    """
    token = credentials.credentials
    payload = verify_jwt(token)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    try:
        return ActingUser(
            id=UUID(payload["user_id"]),
            name=payload.get("name") or payload["email"],
            email=payload["email"],
        )
    except (KeyError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token claims",
        )
