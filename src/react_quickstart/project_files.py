"""Folders and template files added on top of the generator's output."""

import os

from react_quickstart.templates.template_renderer import render_template

PROJECT_FOLDERS = [
    "src/assets",
    "src/components",
    "src/context",
    "src/data",
    "src/hooks",
    "src/pages",
    "src/services",
    "src/store",
    "src/styles",
    "src/utils",
]

# (relative path, template, progress message)
PROJECT_FILES = [
    ("src/pages/Home.jsx", "home.jsx.j2", "Creating Home.jsx..."),
    ("src/index.css", "index.css.j2", "Updating index.css..."),
    ("tailwind.config.js", "tailwind.config.js.j2", "Updating tailwind.config.js..."),
    ("src/App.js", "app.js.j2", "Creating App.js..."),
]


def create_folders(project_root, folders=PROJECT_FOLDERS):
    """Create each folder under project_root; existing folders are left alone."""
    for folder in folders:
        os.makedirs(os.path.join(project_root, *folder.split("/")), exist_ok=True)


def write_project_file(project_root, relative_path, template_name, variant):
    """Render template_name for variant and write it, replacing any existing file.

    Returns:
        The absolute path written.
    """
    path = os.path.join(project_root, *relative_path.split("/"))
    content = render_template(template_name, variant=variant)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return path
