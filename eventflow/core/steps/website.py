from abc import abstractmethod

from loguru import logger

from eventflow.core.steps.base import PipelineStep
from eventflow.core.steps.registry import StepRegistry
from eventflow.core.context import PipelineContext
from eventflow.core.container import Services
from eventflow.core.progress import progress_indicator
from eventflow.services.site_data import build_site_data


@StepRegistry.register
class GenerateWebsiteStep(PipelineStep):
    name = "website"

    async def execute(self, ctx: PipelineContext):
        event_date, event_time, location_name, location, tickets_url, mentors_url = ctx.require(
            self.name,
            "event_date",
            "event_time",
            "event_location_name",
            "event_location",
            "event_registration_url",
            "mentor_registration_url",
        )
        writer = self.service(Services.SITE_DATA)
        runner = self.service(Services.SCRIPT_RUNNER)

        # npm writes to the same terminal, so no spinner
        with progress_indicator(self.console, "Generating website", spinner=False):
            site_data = build_site_data(
                event_date=event_date,
                event_time=event_time,
                event_location_name=location_name,
                event_location=location,
                mentors_url=mentors_url,
                tickets_url=tickets_url,
            )
            path = writer.write(site_data)
            await runner.run(self.settings.SITE_BUILD_COMMAND)

        ctx.set("site_data", site_data.to_json_dict())
        ctx.set("site_data_path", path)
        logger.success(f"Step Website finished. Data: {path}")


class _ScriptStep(PipelineStep):
    """A step that only runs one configured command."""
    title: str = ""

    @abstractmethod
    def command(self):
        """The argv to run."""

    async def execute(self, ctx: PipelineContext):
        runner = self.service(Services.SCRIPT_RUNNER)
        with progress_indicator(self.console, self.title, spinner=False):
            await runner.run(self.command())
        logger.success(f"Step {self.name} finished.")


@StepRegistry.register
class GenerateSocialImageStep(_ScriptStep):
    name = "social_image"
    title = "Generating social image"

    def command(self):
        return self.settings.SOCIAL_IMAGE_COMMAND


@StepRegistry.register
class PublishWebsiteStep(_ScriptStep):
    name = "publish"
    title = "Publishing website"

    def command(self):
        return self.settings.PUBLISH_COMMAND
