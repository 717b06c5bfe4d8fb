"""Dependency wiring for the HTTP application.

The container is built once at process start and handed explicitly to
``create_app``; there is no module-level default instance. Each port is
bound to a factory, and shared bindings are created lazily on first
resolution.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class _Binding:
    factory: Callable[[], Any]
    shared: bool
    instance: Optional[Any] = None


@dataclass
class Container:
    """Maps port types to the objects that serve them.

    Usage:
        container = Container.create_default()
        service = container.resolve(ItineraryReconstructorPort)

        # Tests swap a binding before building the app
        container.register(ItineraryReconstructorPort, lambda: stub)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _bindings: Dict[type[Any], _Binding] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, replacing any earlier binding.

        Args:
            port_type: The type (usually a Protocol) to bind.
            factory: A callable that creates instances of the type.
            singleton: If True, one instance is shared by every resolve.
        """
        with self._lock:
            self._bindings[port_type] = _Binding(factory=factory, shared=singleton)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the object bound to ``port_type``.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            binding = self._bindings.get(port_type)
            if binding is None:
                raise KeyError(f"Type not registered: {port_type}")

            if not binding.shared:
                return binding.factory()
            if binding.instance is None:
                binding.instance = binding.factory()
            return binding.instance

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with the production bindings."""
        from .ports.itinerary import ItineraryReconstructorPort
        from .services import ItineraryService

        container = cls(config=config or get_config())
        container.register(ItineraryReconstructorPort, ItineraryService)
        return container
