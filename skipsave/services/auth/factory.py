from skipsave.services.auth.service import AuthService
from skipsave.services.factory import ServiceFactory
from skipsave.services.schema import ServiceType
from skipsave.services.settings.service import SettingsService


class AuthServiceFactory(ServiceFactory):
    dependencies = [ServiceType.SETTINGS_SERVICE]

    def __init__(self):
        super().__init__(AuthService)

    def create(self, settings_service: SettingsService) -> AuthService:
        return AuthService(settings_service)
