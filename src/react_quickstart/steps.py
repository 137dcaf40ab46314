"""Step descriptors and the fail-fast runner that executes them in order."""

from dataclasses import dataclass
from typing import Callable, List

from react_quickstart.errors import ScaffoldError, StepFailedError


@dataclass(frozen=True)
class Step:
    """One unit of the pipeline.

    Attributes:
        description: Progress message printed before the action runs.
        action: Zero-argument callable doing the work.
        error_message: Printed when the action fails.
    """
    description: str
    action: Callable[[], object]
    error_message: str


class StepRunner:
    """Runs steps in order and stops at the first failure.

    Completed steps are never rolled back.
    """

    def run(self, steps: List[Step]) -> None:
        """Run every step.

        Raises:
            StepFailedError: Wrapping the ScaffoldError or OSError raised by
                the first failing step. No later step has run.
        """
        for index, step in enumerate(steps, start=1):
            print(step.description, flush=True)
            try:
                step.action()
            except (ScaffoldError, OSError) as e:
                raise StepFailedError(step, index, e) from e

    def describe(self, steps: List[Step]) -> None:
        """Print the numbered plan without running anything."""
        width = len(str(len(steps)))
        for index, step in enumerate(steps, start=1):
            print(f"{index:>{width}}. {step.description}")
