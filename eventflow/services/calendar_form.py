from abc import ABC, abstractmethod

from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from eventflow.config import Settings
from eventflow.core.errors import ExternalServiceError
from eventflow.models.schemas import CalendarEntry
from eventflow.utils.formatting import format_form_date


class CalendarFormSubmitter(ABC):
    """Submits an event to the shared NodeSchool calendar."""

    @abstractmethod
    async def submit(self, entry: CalendarEntry) -> str:
        """Submit `entry` and return the link for editing the response."""
        pass


# Selectors for the Google Form; tied to its current DOM
FIELD_SELECTORS = {
    "name": 'input[aria-label="Name"]',
    "location": 'input[aria-label="Location"]',
    "lat": 'input[aria-label="Latitude"]',
    "lng": 'input[aria-label="Longitude"]',
    "start_date": '*[aria-label="Start Date"] input',
    "website": 'input[aria-label="Website"]',
}
RESPONSE_LINKS_SELECTOR = ".freebirdFormviewerViewResponseLinksContainer"
EDIT_LINK_SELECTOR = "a:has-text('Edit your response')"


class PlaywrightCalendarForm(CalendarFormSubmitter):
    def __init__(self, settings: Settings):
        self.settings = settings

    def _field_values(self, entry: CalendarEntry) -> dict:
        return {
            "name": entry.name,
            "location": entry.location,
            "lat": str(entry.coordinates.lat),
            "lng": str(entry.coordinates.lng),
            "start_date": format_form_date(entry.start_date),
            "website": entry.website,
        }

    async def submit(self, entry: CalendarEntry) -> str:
        timeout = self.settings.BROWSER_TIMEOUT_MS
        logger.info(f"[CalendarForm] Opening {self.settings.CALENDAR_FORM_URL}")
        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=self.settings.BROWSER_HEADLESS)
                try:
                    page = await browser.new_page()
                    await page.goto(self.settings.CALENDAR_FORM_URL, timeout=timeout)

                    for key, value in self._field_values(entry).items():
                        # type() sends key presses, which the date widget needs
                        await page.type(FIELD_SELECTORS[key], value, timeout=timeout)

                    await page.evaluate("() => document.querySelector('form').submit()")
                    await page.wait_for_selector(RESPONSE_LINKS_SELECTOR, timeout=timeout)

                    edit_url = await page.get_attribute(EDIT_LINK_SELECTOR, "href", timeout=timeout)
                finally:
                    await browser.close()
        except PlaywrightError as e:
            raise ExternalServiceError("calendar", f"Form submission failed: {e}") from e

        if not edit_url:
            raise ExternalServiceError("calendar", "Form submitted but no edit link was found")
        logger.info(f"[CalendarForm] Google Forms edit link: {edit_url}")
        return edit_url
