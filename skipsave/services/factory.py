from abc import ABC, abstractmethod

from skipsave.services.base import Service


class ServiceFactory(ABC):
    def __init__(self, service_class: type[Service]):
        self.service_class = service_class

    @abstractmethod
    def create(self, *args, **kwargs) -> Service:
        """Build the service from the dependencies the manager passes in."""
