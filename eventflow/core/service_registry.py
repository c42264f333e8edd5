"""
Service Registration - single place to import and register all services.

Each run builds its own container from one Settings instance.
"""

from rich.console import Console

from eventflow.config import Settings
from eventflow.core.container import ServiceContainer, Services


def register_all_services(container: ServiceContainer, settings: Settings) -> ServiceContainer:
    """Import and register every service in the DI container."""

    # ── Terminal ─────────────────────────────────────────────
    from eventflow.services.prompter import EventPrompter

    container.register(Services.CONSOLE, Console)
    container.register(Services.PROMPTER, lambda: EventPrompter(settings))

    # ── External APIs ────────────────────────────────────────
    from eventflow.services.github import GitHubIssueService
    from eventflow.services.geocoder import GeocoderService

    container.register(Services.GITHUB, lambda: GitHubIssueService(settings))
    container.register(Services.GEOCODER, lambda: GeocoderService(settings))

    # ── Browser ──────────────────────────────────────────────
    from eventflow.services.calendar_form import PlaywrightCalendarForm

    container.register(Services.CALENDAR_FORM, lambda: PlaywrightCalendarForm(settings))

    # ── Site ─────────────────────────────────────────────────
    from eventflow.services.script_runner import ScriptRunner
    from eventflow.services.site_data import SiteDataWriter

    container.register(Services.SCRIPT_RUNNER, lambda: ScriptRunner(cwd=settings.SITE_ROOT))
    container.register(Services.SITE_DATA, lambda: SiteDataWriter(settings.site_data_path))

    return container


def build_container(settings: Settings) -> ServiceContainer:
    return register_all_services(ServiceContainer(), settings)
