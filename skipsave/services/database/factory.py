from skipsave.services.database.service import DatabaseService
from skipsave.services.factory import ServiceFactory
from skipsave.services.schema import ServiceType
from skipsave.services.settings.service import SettingsService


class DatabaseServiceFactory(ServiceFactory):
    dependencies = [ServiceType.SETTINGS_SERVICE]

    def __init__(self):
        super().__init__(DatabaseService)

    def create(self, settings_service: SettingsService) -> DatabaseService:
        return DatabaseService(settings_service)
