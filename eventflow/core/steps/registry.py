from typing import Dict, List, Type
from loguru import logger
from eventflow.core.steps.base import PipelineStep


class StepRegistry:
    _steps: Dict[str, Type[PipelineStep]] = {}

    @classmethod
    def register(cls, step_cls: Type[PipelineStep]) -> Type[PipelineStep]:
        """Class decorator registering a step under its `name`."""
        if not step_cls.name:
            raise ValueError(f"{step_cls.__name__} has no step name")
        if step_cls.name in cls._steps:
            logger.warning(f"Overwriting existing step: {step_cls.name}")
        cls._steps[step_cls.name] = step_cls
        logger.debug(f"Registered pipeline step: {step_cls.name}")
        return step_cls

    @classmethod
    def get(cls, name: str) -> Type[PipelineStep]:
        """Retrieve a step class by name."""
        step_cls = cls._steps.get(name)
        if not step_cls:
            raise ValueError(f"Unknown pipeline step: '{name}'")
        return step_cls

    @classmethod
    def list_steps(cls) -> List[str]:
        return list(cls._steps.keys())
