"""IMS module interface and the registry that drives module lifecycle."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ImsModule(ABC):
    """An IMS function that takes part in routing SIP requests.

    A module is its own route handler: the registry hands the same object
    to the SIP core for request processing and to start-up for init.
    """

    @abstractmethod
    def name(self) -> str:
        """Module name for logging and identification."""

    @abstractmethod
    def description(self) -> str:
        """Brief description of the module."""

    @abstractmethod
    async def init(self, config: Any, state: Any) -> None:
        """Set the module up once at start-up with configuration and shared state."""

    @abstractmethod
    async def handle_request(self, request: Any, context: Any) -> Any:
        """Process a request and return the routing decision."""


class ModuleRegistry:
    """Holds registered IMS modules in registration order."""

    def __init__(self) -> None:
        self._modules: list[ImsModule] = []

    def __len__(self) -> int:
        return len(self._modules)

    def register_module(self, module: ImsModule) -> None:
        """Add a module; it is initialised and consulted after earlier ones."""
        self._modules.append(module)

    def route_handlers(self) -> list[ImsModule]:
        """The route handlers of all modules, in registration order."""
        return list(self._modules)

    async def initialize_modules(self, config: Any, state: Any) -> None:
        """Initialise every module in order, stopping at the first failure."""
        for module in self._modules:
            await module.init(config, state)