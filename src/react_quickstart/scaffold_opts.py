"""Options dataclass for the scaffold command."""

import os
from dataclasses import dataclass

from react_quickstart.variants import DEFAULT_VARIANT, get_variant

MAIN_BRANCH = "main"
REMOTE_NAME = "origin"


@dataclass
class ScaffoldOpts:
    """All options for one scaffolding run."""

    project_name: str
    repo_url: str | None = None
    variant_name: str = DEFAULT_VARIANT
    parent_directory: str = "."
    dry_run: bool = False

    @property
    def project_root(self):
        """Directory the generator creates; every later step runs inside it."""
        return os.path.join(self.parent_directory, self.project_name)

    @property
    def variant(self):
        return get_variant(self.variant_name)

    @property
    def push(self):
        return bool(self.repo_url)

    @property
    def commit_message(self):
        return f"Initial commit: Set up {self.project_name} with react-quickstart"
