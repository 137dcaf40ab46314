"""Click command for the react-quickstart CLI."""

import sys

import click

from react_quickstart.command_runner import CommandRunner
from react_quickstart.errors import StepFailedError
from react_quickstart.scaffold_command import ScaffoldCommand
from react_quickstart.scaffold_opts import ScaffoldOpts
from react_quickstart.variants import DEFAULT_VARIANT, VARIANTS


def _variant_help():
    choices = "; ".join(f"{v.name}: {v.description}" for v in VARIANTS.values())
    return f"Dependency and template set ({choices})."


@click.command("react-quickstart")
@click.argument("project_name", required=False)
@click.argument("repo_url", required=False)
@click.option("--variant", "variant_name", type=click.Choice(list(VARIANTS)),
              default=DEFAULT_VARIANT, show_default=True, help=_variant_help())
@click.option("--directory", "parent_directory", default=".",
              type=click.Path(exists=True, file_okay=False),
              help="Directory in which the project directory is created.")
@click.option("--dry-run", is_flag=True, help="List the steps without running them.")
@click.pass_context
def main(ctx, project_name, repo_url, variant_name, parent_directory, dry_run):
    """Bootstrap a React project: create-react-app, React Router, Tailwind CSS,
    a standard src/ layout and an initial Git commit, optionally pushed to
    REPO_URL."""
    project_name = (project_name or "").strip()
    if not project_name:
        click.echo("Please provide a project name.", err=True)
        click.echo(f"Usage: {ctx.command_path} <project-name> [github-repo-url]")
        sys.exit(1)

    opts = ScaffoldOpts(
        project_name=project_name,
        repo_url=repo_url or None,
        variant_name=variant_name,
        parent_directory=parent_directory,
        dry_run=dry_run,
    )
    command = ScaffoldCommand(opts, CommandRunner())
    try:
        command.execute()
    except StepFailedError as e:
        click.echo(e.step.error_message, err=True)
        click.echo(str(e.cause), err=True)
        sys.exit(1)
