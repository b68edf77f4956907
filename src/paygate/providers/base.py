"""Base class for service providers."""

from abc import ABC, abstractmethod

from ..container import Container


class ServiceProvider(ABC):
    """A boot-time unit that registers bindings into the container.

    ``register()`` runs for every provider before any ``boot()`` runs, so
    ``register()`` should only bind, never resolve.
    """

    def __init__(self, container: Container):
        self.container = container

    @abstractmethod
    def register(self) -> None:
        """Register bindings."""
        pass

    def boot(self) -> None:
        """Run after every provider has registered."""
        pass
