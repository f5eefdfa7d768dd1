import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from .config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Container:
    """Maps interface types to factories, optionally caching instances."""

    _factories: dict[type, Callable[[], Any]] = field(default_factory=dict)
    _instances: dict[type, Any] = field(default_factory=dict)
    _cached: set[type] = field(default_factory=set)

    def register(
        self, interface: type[T], factory: Callable[[], T], singleton: bool = False
    ) -> None:
        """Register factory for interface.

        Re-registering drops any cached instance.

        Args:
            interface: Interface type.
            factory: Factory function.
            singleton: Whether to cache instance.
        """
        self._factories[interface] = factory
        self._instances.pop(interface, None)
        if singleton:
            self._cached.add(interface)
        else:
            self._cached.discard(interface)

    def resolve(self, interface: type[T]) -> T:
        if interface in self._instances:
            return self._instances[interface]

        try:
            factory = self._factories[interface]
        except KeyError:
            raise KeyError(f"No factory registered for {interface}") from None

        instance = factory()
        if interface in self._cached:
            self._instances[interface] = instance
        return instance

    def reset(self) -> None:
        """Drop cached instances (for testing)."""
        self._instances.clear()


def configure_container(settings: Settings, target: Container) -> Container:
    """Wire extractor and services.

    Args:
        settings: Application settings.
        target: Container to fill.

    Returns:
        Configured container.
    """
    from .core.protocols.extractor import TextExtractorProtocol
    from .core.services.ingest_service import IngestService
    from .core.services.search_service import SearchService
    from .infrastructure.extractors.pdf_extractor import PDFTextExtractor

    target.register(
        TextExtractorProtocol,
        lambda: PDFTextExtractor(timeout=settings.extraction_timeout),
        singleton=True,
    )

    target.register(
        IngestService,
        lambda: IngestService(extractor=target.resolve(TextExtractorProtocol)),
        singleton=True,
    )

    target.register(SearchService, SearchService, singleton=True)

    logger.debug("Container configured")
    return target
