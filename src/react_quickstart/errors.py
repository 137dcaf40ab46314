"""Exceptions raised while scaffolding a project."""


class ScaffoldError(Exception):
    """Base class for scaffolding failures."""


class CommandFailedError(ScaffoldError):
    """An external command exited with a non-zero status."""

    def __init__(self, cmd, returncode):
        self.cmd = list(cmd)
        self.returncode = returncode
        super().__init__(
            f"Command failed: {' '.join(self.cmd)} (exit status {returncode})"
        )


class ProjectDirectoryError(ScaffoldError):
    """The project directory is missing or already in use."""


class RepositoryError(ScaffoldError):
    """A Git operation on the new project failed."""


class StepFailedError(ScaffoldError):
    """A pipeline step failed; later steps were not run.

    Args:
        step: The Step that failed.
        index: 1-based position of the step in the pipeline.
        cause: The underlying exception.
    """

    def __init__(self, step, index, cause):
        self.step = step
        self.index = index
        self.cause = cause
        super().__init__(f"Step {index} failed: {step.description}: {cause}")
