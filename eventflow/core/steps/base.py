from abc import ABC, abstractmethod
from typing import Any

from eventflow.config import Settings
from eventflow.core.container import ServiceContainer, Services
from eventflow.core.context import PipelineContext


class PipelineStep(ABC):
    """Abstract base class for all pipeline steps."""

    # Unique name used in Settings.PIPELINE_STEPS (e.g. 'mentor_issue')
    name: str = ""

    def __init__(self, settings: Settings, container: ServiceContainer):
        self.settings = settings
        self.container = container

    @property
    def console(self):
        return self.container.get(Services.CONSOLE)

    def service(self, name: str) -> Any:
        return self.container.get(name)

    @abstractmethod
    async def execute(self, ctx: PipelineContext):
        """
        Execute the step logic, adding this step's fields to `ctx`.
        Raise to fail the pipeline.
        """
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
