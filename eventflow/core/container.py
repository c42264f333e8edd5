from typing import Any, Callable, Dict

from loguru import logger


class ServiceContainer:
    """Builds each registered service on first `get` and keeps that one instance."""

    def __init__(self):
        self._factories: Dict[str, Callable[[], Any]] = {}
        self._instances: Dict[str, Any] = {}

    def register(self, name: str, factory: Callable[[], Any]) -> None:
        self._factories[name] = factory
        logger.debug(f"[Container] Registered service: {name}")

    def get(self, name: str) -> Any:
        if name not in self._instances:
            if name not in self._factories:
                raise KeyError(f"Service '{name}' not registered. Available: {sorted(self._factories)}")
            self._instances[name] = self._factories[name]()
            logger.debug(f"[Container] Instantiated service: {name}")
        return self._instances[name]

    def override(self, name: str, instance: Any) -> None:
        """Use `instance` for `name` instead of the factory (tests swap in mocks here)."""
        self._instances[name] = instance
        logger.debug(f"[Container] Overrode service: {name}")


class Services:
    CONSOLE = "console"
    PROMPTER = "prompter"
    GITHUB = "github"
    GEOCODER = "geocoder"
    CALENDAR_FORM = "calendar_form"
    SCRIPT_RUNNER = "script_runner"
    SITE_DATA = "site_data"
