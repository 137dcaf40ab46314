"""CommandRunner: runs external tools with the terminal's streams inherited.

Provides an injectable interface for npm, npx and git invocations, enabling
FakeCommandRunner in tests without unittest.mock.patch.
"""

import subprocess
from dataclasses import dataclass
from typing import List

from react_quickstart.errors import CommandFailedError


@dataclass
class CommandResult:
    """Exit status of an external command."""
    returncode: int


class CommandRunner:
    """Runs a command to completion, letting the user see its output live."""

    def run(self, cmd: List[str], cwd: str) -> CommandResult:
        """Run cmd in cwd, inheriting stdin, stdout and stderr.

        There is no timeout; a hung tool hangs the caller.

        Raises:
            FileNotFoundError: If the executable is not on PATH.
        """
        result = subprocess.run(cmd, cwd=cwd)
        return CommandResult(returncode=result.returncode)


def run_command(runner, cmd: List[str], cwd: str) -> CommandResult:
    """Run cmd with runner and raise CommandFailedError on a non-zero exit."""
    result = runner.run(cmd, cwd=cwd)
    if result.returncode != 0:
        raise CommandFailedError(cmd, result.returncode)
    return result
