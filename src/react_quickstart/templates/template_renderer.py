"""Load and render the Jinja2 templates bundled with react-quickstart."""

import importlib.resources

import jinja2


def render_template(template_name: str, *, package: str = __package__, **kwargs) -> str:
    """Load a Jinja2 template by name and render it with the given arguments.

    Args:
        template_name: Template filename (e.g. "home.jsx.j2")
        package: Package the template is loaded from. Defaults to this one.
        **kwargs: Template variables.

    Returns:
        The rendered template string, ending in a single newline.

    Raises:
        FileNotFoundError: If the template does not exist.
    """
    source = importlib.resources.files(package).joinpath(template_name).read_text(encoding="utf-8")
    rendered = jinja2.Template(
        source, undefined=jinja2.StrictUndefined, trim_blocks=True, lstrip_blocks=True,
    ).render(**kwargs)
    return rendered.rstrip("\n") + "\n"
