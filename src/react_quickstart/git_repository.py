"""ProjectRepository: wraps GitPython Repo for the new project's first commit.

Provides an injectable interface for Git operations, enabling
FakeProjectRepository in tests without unittest.mock.patch.

GitPython looks for a git executable when it is imported, so the import is
deferred to the Git steps; a missing git fails those steps, not the CLI.
"""

from react_quickstart.errors import RepositoryError


def _gitpython():
    """Import GitPython, reporting a missing git executable as RepositoryError."""
    try:
        import git
    except ImportError as e:
        raise RepositoryError(f"Git is not available: {e}") from e
    return git


class ProjectRepository:
    """Wraps a GitPython Repo with the operations needed to publish a project.

    Args:
        repo: A GitPython Repo instance.
    """

    def __init__(self, repo):
        self._repo = repo

    @classmethod
    def init(cls, path):
        """Create (or reinitialize) a repository at path."""
        git = _gitpython()
        try:
            return cls(git.Repo.init(path))
        except git.exc.CommandError as e:
            raise RepositoryError(_describe(e)) from e

    @property
    def working_tree_dir(self):
        return self._repo.working_tree_dir

    @property
    def head_sha(self):
        return self._repo.head.commit.hexsha

    @property
    def active_branch(self):
        return self._repo.active_branch.name

    def commit_count(self):
        return int(self._repo.git.rev_list("--count", "HEAD"))

    def remote_url(self, name):
        """Return the URL of the named remote, or None if it is not registered."""
        if name not in [r.name for r in self._repo.remotes]:
            return None
        return self._repo.remotes[name].url

    def stage_all(self):
        self._git("add", "--all")

    def commit(self, message):
        """Commit the index via `git commit`, so hooks and identity checks apply."""
        self._git("commit", "-m", message)

    def add_remote(self, name, url):
        git = _gitpython()
        try:
            self._repo.create_remote(name, url)
        except git.exc.CommandError as e:
            raise RepositoryError(_describe(e)) from e

    def rename_branch(self, branch_name):
        """Rename the current branch, replacing any existing branch of that name."""
        self._git("branch", "-M", branch_name)

    def _git(self, subcommand, *args):
        git = _gitpython()
        try:
            return getattr(self._repo.git, subcommand)(*args)
        except git.exc.CommandError as e:
            raise RepositoryError(_describe(e)) from e


def _describe(error):
    stderr = (error.stderr or "").strip()
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip()
    return stderr.strip("'").strip() or str(error)
