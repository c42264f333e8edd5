import sys

import pytest

from eventflow.core.errors import SubprocessFailedError
from eventflow.services.script_runner import ScriptRunner


@pytest.mark.asyncio
async def test_zero_exit_is_success(tmp_path):
    runner = ScriptRunner(cwd=tmp_path)
    code = await runner.run([sys.executable, "-c", "open('built.txt', 'w').write('ok')"])

    assert code == 0
    assert (tmp_path / "built.txt").read_text() == "ok"


@pytest.mark.asyncio
async def test_non_zero_exit_fails():
    with pytest.raises(SubprocessFailedError) as exc_info:
        await ScriptRunner().run([sys.executable, "-c", "import sys; sys.exit(3)"])
    assert exc_info.value.returncode == 3


@pytest.mark.asyncio
async def test_spawn_error_fails(tmp_path):
    missing = str(tmp_path / "no-such-binary")
    with pytest.raises(SubprocessFailedError, match="could not be started"):
        await ScriptRunner().run([missing])


@pytest.mark.asyncio
async def test_empty_command_rejected():
    with pytest.raises(ValueError):
        await ScriptRunner().run([])
