from skipsave.services.factory import ServiceFactory
from skipsave.services.rate_limit.service import RateLimitService
from skipsave.services.schema import ServiceType
from skipsave.services.settings.service import SettingsService


class RateLimitServiceFactory(ServiceFactory):
    dependencies = [ServiceType.SETTINGS_SERVICE]

    def __init__(self):
        super().__init__(RateLimitService)

    def create(self, settings_service: SettingsService) -> RateLimitService:
        return RateLimitService(settings_service)
