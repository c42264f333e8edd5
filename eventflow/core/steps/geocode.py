import asyncio
from loguru import logger

from eventflow.core.steps.base import PipelineStep
from eventflow.core.steps.registry import StepRegistry
from eventflow.core.context import PipelineContext
from eventflow.core.container import Services
from eventflow.core.progress import progress_indicator


@StepRegistry.register
class GeocodeStep(PipelineStep):
    name = "geocode"

    async def execute(self, ctx: PipelineContext):
        (location,) = ctx.require(self.name, "event_location")
        geocoder = self.service(Services.GEOCODER)

        with progress_indicator(self.console, "Getting event location latitude and longitude"):
            loop = asyncio.get_running_loop()
            coords = await loop.run_in_executor(None, lambda: geocoder.geocode(location))

        ctx.set("event_location_coordinates", coords)
        logger.success(f"Step Geocode finished. {location} -> ({coords.lat}, {coords.lng})")
