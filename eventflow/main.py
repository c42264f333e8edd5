import asyncio
import sys
from pathlib import Path
from typing import List, Optional

import click
from loguru import logger
from rich.console import Console
from rich.markup import escape

from eventflow.config import Settings
from eventflow.core.container import ServiceContainer, Services
from eventflow.core.pipeline import PipelineResult, PipelineRunner, build_steps
from eventflow.core.service_registry import build_container


def setup_logging(settings: Settings):
    """Quiet console sink plus a rotating debug log file."""
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL.upper())

    settings.init_dirs()
    log_file = settings.LOG_DIR / "eventflow.log"
    logger.add(
        log_file,
        rotation="10 MB",
        retention="7 days",
        level="DEBUG",
        encoding="utf-8",
        backtrace=True,
        diagnose=False,
    )
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Log file configured at {log_file}")


def resolve_step_names(settings: Settings, with_calendar: bool = False, publish: bool = False) -> List[str]:
    names = list(settings.PIPELINE_STEPS)
    if with_calendar and "calendar" not in names:
        extra = [n for n in ("geocode", "calendar") if n not in names]
        at = names.index("mentor_issue") + 1 if "mentor_issue" in names else len(names)
        names[at:at] = extra
    if publish and "publish" not in names:
        names.append("publish")
    return names


def report_result(console: Console, result: PipelineResult):
    if result.success:
        console.print("[green]Event created successfully! 😃[/green]")
    else:
        console.print("[red]There was an error creating the event ☹️[/red]")
        console.print(f"  {escape(type(result.error).__name__)}: {escape(str(result.error))}")


async def create_event(
    settings: Settings,
    container: ServiceContainer,
    step_names: Optional[List[str]] = None,
) -> PipelineResult:
    steps = build_steps(step_names or settings.PIPELINE_STEPS, settings, container)
    console = container.get(Services.CONSOLE)
    runner = PipelineRunner(steps)
    return await runner.run(on_complete=lambda result: report_result(console, result))


@click.command()
@click.option("--with-calendar", is_flag=True, help="Geocode the venue and add the event to the NodeSchool calendar.")
@click.option("--publish", is_flag=True, help="Publish the website after building it.")
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=".env",
    show_default=True,
    help="Settings file to read in addition to the environment.",
)
@click.pass_context
def cli(click_ctx: click.Context, with_calendar: bool, publish: bool, env_file: Path):
    """Create a new chapter event interactively."""
    settings = Settings(_env_file=env_file)
    setup_logging(settings)

    container = build_container(settings)
    step_names = resolve_step_names(settings, with_calendar=with_calendar, publish=publish)

    result = asyncio.run(create_event(settings, container, step_names))
    if not result.success:
        click_ctx.exit(1)


def main():
    cli()


if __name__ == "__main__":
    main()
