from skipsave.services.factory import ServiceFactory
from skipsave.services.settings.service import SettingsService


class SettingsServiceFactory(ServiceFactory):
    def __init__(self):
        super().__init__(SettingsService)

    def create(self) -> SettingsService:
        return SettingsService.initialize()
