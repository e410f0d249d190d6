from skipsave.services.base import Service
from skipsave.services.settings.base import Settings


class SettingsService(Service):
    name = "settings_service"

    def __init__(self, settings: Settings):
        self.settings = settings

    @classmethod
    def initialize(cls) -> "SettingsService":
        return cls(Settings())
