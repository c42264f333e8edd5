import asyncio
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from eventflow.core.errors import SubprocessFailedError


class ScriptRunner:
    """Runs site build commands as child processes sharing our stdio."""

    def __init__(self, cwd: Optional[Path] = None):
        self.cwd = cwd

    async def run(self, command: Sequence[str]) -> int:
        if not command:
            raise ValueError("ScriptRunner.run requires a non-empty command")

        logger.info(f"Running: {' '.join(command)} (cwd={self.cwd})")
        try:
            # stdin/stdout/stderr left as None: the child inherits them
            process = await asyncio.create_subprocess_exec(
                *command,
                cwd=str(self.cwd) if self.cwd else None,
            )
        except OSError as e:
            raise SubprocessFailedError(command, reason=f"could not be started: {e}") from e

        returncode = await process.wait()
        if returncode != 0:
            raise SubprocessFailedError(command, returncode=returncode)

        logger.debug(f"Command finished: {' '.join(command)}")
        return returncode
