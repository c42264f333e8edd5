import asyncio
from loguru import logger

from eventflow.core.steps.base import PipelineStep
from eventflow.core.steps.registry import StepRegistry
from eventflow.core.context import PipelineContext
from eventflow.core.container import Services
from eventflow.core.progress import progress_indicator
from eventflow.templates.mentor_issue import get_mentor_issue_body, get_mentor_issue_title
from eventflow.utils.formatting import format_long_date, is_tbd


@StepRegistry.register
class MentorIssueStep(PipelineStep):
    """Opens the mentor sign-up issue and works out the registration URLs."""
    name = "mentor_issue"

    def ticket_url(self, event_id: str) -> str:
        event_id = (event_id or "").strip()
        if event_id:
            return self.settings.EVENTBRITE_EVENT_URL + event_id
        return self.settings.EVENTBRITE_ORGANIZER_URL

    async def execute(self, ctx: PipelineContext):
        event_name, location_name, location, event_date, event_time = ctx.require(
            self.name, "event_name", "event_location_name", "event_location", "event_date", "event_time"
        )

        with progress_indicator(self.console, "Creating Mentor Registration GitHub Issue"):
            if is_tbd(event_name) or is_tbd(location):
                # No venue yet: point mentors at the chapter page instead
                mentor_url = self.settings.CHAPTER_URL
                logger.info("Event or location is TBD, skipping GitHub issue")
            else:
                github = self.service(Services.GITHUB)
                title = get_mentor_issue_title(event_name, location_name)
                body = get_mentor_issue_body(
                    location_name=location_name,
                    date=format_long_date(event_date),
                    time=event_time,
                )
                loop = asyncio.get_running_loop()
                mentor_url = await loop.run_in_executor(None, lambda: github.create_issue(title, body))

        ctx.set("mentor_registration_url", mentor_url)
        ctx.set("event_registration_url", self.ticket_url(ctx.get("event_id", "")))
        logger.success(f"Step MentorIssue finished. Mentors: {mentor_url}")
