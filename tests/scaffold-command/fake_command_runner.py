"""FakeCommandRunner: test double for CommandRunner.

Separated into its own module so tests can import it unambiguously
regardless of pytest's conftest resolution order.
"""

import os

from react_quickstart.command_runner import CommandResult

GENERATED_APP_JS = "// generated by create-react-app\n"
GENERATED_TAILWIND_CONFIG = "module.exports = {}\n"


class FakeCommandRunner:
    """Test double for CommandRunner that records calls and returns canned exit codes.

    By default it imitates the external tools' effects on disk:
    `create-react-app NAME` creates a skeleton project in cwd/NAME and
    `tailwindcss init` writes a stub tailwind.config.js.

    Usage:
        fake = FakeCommandRunner()
        fake.fail_on_call(2)
        fake.run(["npm", "install"], cwd="/app")
        assert fake.calls == [(["npm", "install"], "/app")]
    """

    def __init__(self, simulate_tools=True):
        self._simulate_tools = simulate_tools
        self._returncodes = {}
        self.calls = []

    def fail_on_call(self, index, returncode=1):
        """Make the call at 0-based index exit with returncode."""
        self._returncodes[index] = returncode

    @property
    def commands(self):
        return [cmd for cmd, _ in self.calls]

    def run(self, cmd, cwd):
        self.calls.append((list(cmd), cwd))
        returncode = self._returncodes.get(len(self.calls) - 1, 0)
        if returncode == 0 and self._simulate_tools:
            _simulate(cmd, cwd)
        return CommandResult(returncode=returncode)


def _simulate(cmd, cwd):
    if "create-react-app" in cmd:
        root = os.path.join(cwd, cmd[-1])
        os.makedirs(os.path.join(root, "src"))
        os.makedirs(os.path.join(root, "public"))
        with open(os.path.join(root, "package.json"), "w") as f:
            f.write('{"name": "%s"}\n' % cmd[-1])
        with open(os.path.join(root, "src", "App.js"), "w") as f:
            f.write(GENERATED_APP_JS)
    elif cmd[-2:] == ["tailwindcss", "init"]:
        with open(os.path.join(cwd, "tailwind.config.js"), "w") as f:
            f.write(GENERATED_TAILWIND_CONFIG)
