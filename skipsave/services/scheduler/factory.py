from skipsave.services.factory import ServiceFactory
from skipsave.services.scheduler.service import TransferSchedulerService
from skipsave.services.schema import ServiceType
from skipsave.services.settings.service import SettingsService


class TransferSchedulerServiceFactory(ServiceFactory):
    dependencies = [ServiceType.SETTINGS_SERVICE]

    def __init__(self):
        super().__init__(TransferSchedulerService)

    def create(self, settings_service: SettingsService) -> TransferSchedulerService:
        return TransferSchedulerService(settings_service)
