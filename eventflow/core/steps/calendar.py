from loguru import logger

from eventflow.core.steps.base import PipelineStep
from eventflow.core.steps.registry import StepRegistry
from eventflow.core.context import PipelineContext
from eventflow.core.container import Services
from eventflow.core.progress import progress_indicator
from eventflow.models.schemas import CalendarEntry


@StepRegistry.register
class CalendarStep(PipelineStep):
    """Adds the event to the NodeSchool calendar. Needs the geocode step first."""
    name = "calendar"

    async def execute(self, ctx: PipelineContext):
        coords, event_date = ctx.require(self.name, "event_location_coordinates", "event_date")
        entry = CalendarEntry(
            name=self.settings.CHAPTER_NAME,
            location=self.settings.CHAPTER_LOCATION,
            coordinates=coords,
            start_date=event_date,
            website=self.settings.CHAPTER_URL,
        )
        form = self.service(Services.CALENDAR_FORM)

        with progress_indicator(self.console, "Adding event to NodeSchool calendar"):
            edit_url = await form.submit(entry)

        self.console.print(f"Google Forms edit link: {edit_url}")
        ctx.set("calendar_edit_url", edit_url)
        logger.success(f"Step Calendar finished. Edit link: {edit_url}")
