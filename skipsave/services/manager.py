from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from loguru import logger

from skipsave.services.schema import ServiceType

if TYPE_CHECKING:
    from skipsave.services.base import Service
    from skipsave.services.factory import ServiceFactory


TEARDOWN_ORDER = {
    ServiceType.SCHEDULER_SERVICE: 0,
    ServiceType.DATABASE_SERVICE: 2,
    ServiceType.SETTINGS_SERVICE: 3,
}


class ServiceManager:
    """Holds one instance per ServiceType, created lazily from its factory."""

    def __init__(self):
        self.services: dict[ServiceType, Service] = {}

    def get(self, service_type: ServiceType, default: Optional[ServiceFactory] = None) -> Service:
        if service_type not in self.services:
            if default is None:
                raise KeyError(f"No factory registered for {service_type.value}")
            self.services[service_type] = self._create(service_type, default)
        return self.services[service_type]

    def _create(self, service_type: ServiceType, factory: ServiceFactory) -> Service:
        logger.debug(f"Creating service {service_type.value}")
        dependencies = {}
        for dependency in getattr(factory, "dependencies", []):
            dependencies[dependency.value] = self.get(dependency, _default_factory(dependency))
        service = factory.create(**dependencies)
        service.set_ready()
        return service

    async def teardown(self) -> None:
        # background jobs stop before the database closes, settings go last
        ordered = sorted(self.services.items(), key=lambda item: TEARDOWN_ORDER.get(item[0], 1))
        for service_type, service in ordered:
            logger.debug(f"Tearing down {service_type.value}")
            try:
                await service.teardown()
            except Exception as exc:
                logger.exception(f"Error tearing down {service_type.value}: {exc}")
        self.services = {}


def _default_factory(service_type: ServiceType) -> ServiceFactory:
    if service_type == ServiceType.SETTINGS_SERVICE:
        from skipsave.services.settings.factory import SettingsServiceFactory

        return SettingsServiceFactory()
    if service_type == ServiceType.DATABASE_SERVICE:
        from skipsave.services.database.factory import DatabaseServiceFactory

        return DatabaseServiceFactory()
    if service_type == ServiceType.AUTH_SERVICE:
        from skipsave.services.auth.factory import AuthServiceFactory

        return AuthServiceFactory()
    if service_type == ServiceType.RATE_LIMIT_SERVICE:
        from skipsave.services.rate_limit.factory import RateLimitServiceFactory

        return RateLimitServiceFactory()
    if service_type == ServiceType.SCHEDULER_SERVICE:
        from skipsave.services.scheduler.factory import TransferSchedulerServiceFactory

        return TransferSchedulerServiceFactory()
    raise KeyError(f"Unknown service type {service_type}")


service_manager = ServiceManager()
