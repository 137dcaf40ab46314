"""ScaffoldCommand encapsulates the scaffold workflow logic."""

import os

from react_quickstart.command_runner import run_command
from react_quickstart.errors import ProjectDirectoryError
from react_quickstart.git_repository import ProjectRepository
from react_quickstart.project_files import PROJECT_FILES, create_folders, write_project_file
from react_quickstart.scaffold_opts import MAIN_BRANCH, REMOTE_NAME
from react_quickstart.steps import Step, StepRunner


class ScaffoldCommand:
    """Builds the ordered step list for one project and runs it.

    Args:
        opts: ScaffoldOpts for this run.
        command_runner: Runs npm/npx/git commands (CommandRunner or a fake).
        repo_factory: Callable(path) -> ProjectRepository, called by the
            Git init step.
        step_runner: Executes the steps. Defaults to StepRunner().
    """

    def __init__(self, opts, command_runner, repo_factory=ProjectRepository.init, step_runner=None):
        self.opts = opts
        self.command_runner = command_runner
        self.repo_factory = repo_factory
        self.step_runner = step_runner or StepRunner()
        self.repo = None

    def execute(self):
        """Run every step, or only list them when opts.dry_run is set.

        Raises:
            StepFailedError: On the first failing step.
        """
        steps = self.build_steps()
        if self.opts.dry_run:
            print(f"Dry run: {len(steps)} steps would create {self.opts.project_root}")
            self.step_runner.describe(steps)
            return
        self.step_runner.run(steps)
        print(self.completion_message())

    def build_steps(self):
        opts = self.opts
        variant = opts.variant
        steps = [
            Step(
                f"Creating a new React app: {opts.project_name}",
                self._create_app,
                f"Failed to create React app: {opts.project_name}. "
                "Please check your internet connection or npx installation.",
            ),
            Step(
                f"Entering {opts.project_root}...",
                self._check_project_root,
                f"Project directory {opts.project_root} was not created.",
            ),
            Step(
                "Installing additional dependencies...",
                self._command(["npm", "install", *variant.dependencies]),
                f"Failed to install {' and '.join(variant.dependencies)}. "
                "Please check your internet connection.",
            ),
            Step(
                "Installing Tailwind CSS...",
                self._command(["npm", "install", "-D", *variant.dev_dependencies]),
                "Failed to install Tailwind CSS. Please check your internet connection.",
            ),
            Step(
                "Initializing Tailwind CSS configuration...",
                self._command(variant.css_init_command),
                "Failed to initialize Tailwind CSS configuration. Please check your installation.",
            ),
            Step(
                "Creating additional folders...",
                lambda: create_folders(opts.project_root),
                "Failed to create project folders.",
            ),
        ]
        steps += [self._file_step(*entry) for entry in PROJECT_FILES]
        steps += self._git_steps()
        if opts.push:
            steps += self._remote_steps()
        steps += [
            Step(description, self._command(cmd), error_message)
            for description, cmd, error_message in variant.final_commands
        ]
        return steps

    def completion_message(self):
        name = self.opts.project_name
        follow_up = f"Navigate to the {name} directory and run 'npm start' to begin."
        if self.opts.push:
            return f"React app setup complete and pushed to {self.opts.repo_url}! {follow_up}"
        return f"React app setup complete without pushing to GitHub. {follow_up}"

    def _git_steps(self):
        return [
            Step("Initializing Git repository...", self._init_repo,
                 "Failed to initialize Git repository."),
            Step("Staging files...", lambda: self.repo.stage_all(),
                 "Failed to stage files for commit."),
            Step("Creating initial commit...", lambda: self.repo.commit(self.opts.commit_message),
                 "Failed to commit changes."),
        ]

    def _remote_steps(self):
        url = self.opts.repo_url
        return [
            Step(
                f"Adding remote repository: {url}",
                lambda: self.repo.add_remote(REMOTE_NAME, url),
                "Failed to add GitHub repository as remote. Please check the URL and try again.",
            ),
            Step(
                f"Renaming branch to {MAIN_BRANCH}...",
                lambda: self.repo.rename_branch(MAIN_BRANCH),
                f"Failed to rename branch to {MAIN_BRANCH}.",
            ),
            Step(
                "Pushing to GitHub...",
                self._command(["git", "push", "-u", REMOTE_NAME, MAIN_BRANCH]),
                "Failed to push to GitHub. Repo not found or access denied. "
                "Please check the repository URL or your permissions.",
            ),
        ]

    def _file_step(self, relative_path, template_name, description):
        return Step(
            description,
            lambda: write_project_file(
                self.opts.project_root, relative_path, template_name, self.opts.variant,
            ),
            f"Failed to write {relative_path}.",
        )

    def _command(self, cmd):
        return lambda: run_command(self.command_runner, cmd, cwd=self.opts.project_root)

    def _create_app(self):
        root = self.opts.project_root
        if os.path.isdir(root) and os.listdir(root):
            raise ProjectDirectoryError(f"Directory {root} already exists and is not empty.")
        run_command(
            self.command_runner,
            ["npx", "create-react-app", self.opts.project_name],
            cwd=self.opts.parent_directory,
        )

    def _check_project_root(self):
        if not os.path.isdir(self.opts.project_root):
            raise ProjectDirectoryError(f"{self.opts.project_root} is not a directory.")

    def _init_repo(self):
        self.repo = self.repo_factory(self.opts.project_root)
