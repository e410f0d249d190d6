from __future__ import annotations

from typing import TYPE_CHECKING, AsyncGenerator, Optional

from skipsave.services.schema import ServiceType

if TYPE_CHECKING:
    from sqlmodel.ext.asyncio.session import AsyncSession

    from skipsave.services.auth.service import AuthService
    from skipsave.services.base import Service
    from skipsave.services.database.service import DatabaseService
    from skipsave.services.factory import ServiceFactory
    from skipsave.services.rate_limit.service import RateLimitService
    from skipsave.services.scheduler.service import TransferSchedulerService
    from skipsave.services.settings.service import SettingsService


def get_service(service_type: ServiceType, default: Optional[ServiceFactory] = None) -> Service:
    from skipsave.services.manager import _default_factory, service_manager

    return service_manager.get(service_type, default or _default_factory(service_type))


def get_settings_service() -> SettingsService:
    return get_service(ServiceType.SETTINGS_SERVICE)  # type: ignore[return-value]


def get_db_service() -> DatabaseService:
    return get_service(ServiceType.DATABASE_SERVICE)  # type: ignore[return-value]


def get_auth_service() -> AuthService:
    return get_service(ServiceType.AUTH_SERVICE)  # type: ignore[return-value]


def get_rate_limit_service() -> RateLimitService:
    return get_service(ServiceType.RATE_LIMIT_SERVICE)  # type: ignore[return-value]


def get_scheduler_service() -> TransferSchedulerService:
    return get_service(ServiceType.SCHEDULER_SERVICE)  # type: ignore[return-value]


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with get_db_service().with_session() as session:
        yield session
