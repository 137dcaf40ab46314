"""Variant: the package and template choices for one flavour of project."""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

DEFAULT_VARIANT = "helmet"

_FULL_FONT_QUERY = (
    "family=Montserrat:ital,wght@0,100..900;1,100..900"
    "&family=Poppins:ital,wght@0,100;0,200;0,300;0,400;0,500;0,600;0,700;0,800;0,900;"
    "1,100;1,200;1,300;1,400;1,500;1,600;1,700;1,800;1,900"
    "&display=swap"
)

_VARIABLE_FONT_QUERY = (
    "family=Montserrat:wght@100..900"
    "&family=Poppins:wght@300;400;500;600;700"
    "&display=swap"
)


@dataclass(frozen=True)
class Variant:
    """A named set of dependency and template choices.

    Attributes:
        name: Value accepted by --variant.
        description: One-line summary shown in --help.
        dependencies: Runtime packages passed to `npm install`.
        dev_dependencies: Packages passed to `npm install -D`.
        css_init_command: Command that writes the CSS framework's config.
        metadata_package: Module Home.jsx imports Helmet from.
        uses_helmet_provider: Wrap the router in HelmetProvider in App.js.
        font_query: Google Fonts css2 query string used by index.css.
        final_commands: (description, command, error message) run last.
    """

    name: str
    description: str
    dependencies: List[str]
    dev_dependencies: List[str]
    metadata_package: str
    font_query: str
    uses_helmet_provider: bool = False
    css_init_command: List[str] = field(
        default_factory=lambda: ["npx", "tailwindcss", "init"]
    )
    final_commands: List[Tuple[str, List[str], str]] = field(default_factory=list)

    @property
    def font_url(self):
        return f"https://fonts.googleapis.com/css2?{self.font_query}"


VARIANTS: Dict[str, Variant] = {
    "helmet": Variant(
        name="helmet",
        description="react-router-dom and react-helmet",
        dependencies=["react-router-dom", "react-helmet"],
        dev_dependencies=["tailwindcss@3"],
        metadata_package="react-helmet",
        font_query=_FULL_FONT_QUERY,
    ),
    "helmet-async": Variant(
        name="helmet-async",
        description="react-router-dom, react-helmet-async and axios; opens VS Code",
        dependencies=["react-router-dom", "react-helmet-async", "axios"],
        dev_dependencies=["tailwindcss@3"],
        metadata_package="react-helmet-async",
        font_query=_VARIABLE_FONT_QUERY,
        uses_helmet_provider=True,
        final_commands=[
            (
                "Opening the project in VS Code...",
                ["code", "."],
                "Failed to open VS Code. Make sure the 'code' command is on your PATH.",
            ),
        ],
    ),
}


def get_variant(name):
    """Return the registered Variant called name.

    Raises:
        KeyError: If no such variant exists.
    """
    try:
        return VARIANTS[name]
    except KeyError:
        raise KeyError(
            f"Unknown variant: {name} (choose from {', '.join(sorted(VARIANTS))})"
        ) from None
