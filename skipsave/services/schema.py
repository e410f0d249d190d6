from enum import Enum


class ServiceType(str, Enum):
    """Names used to register and look up services in the service manager."""

    SETTINGS_SERVICE = "settings_service"
    DATABASE_SERVICE = "database_service"
    AUTH_SERVICE = "auth_service"
    RATE_LIMIT_SERVICE = "rate_limit_service"
    SCHEDULER_SERVICE = "scheduler_service"
