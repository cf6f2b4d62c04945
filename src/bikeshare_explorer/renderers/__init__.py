"""Pure rendering functions: view models -> terminal text.

All renderers follow the same pattern:
  - Input: a view from ``analysis/views.py``
  - Output: str (plain text, ready to print)
  - No side effects, no I/O, no Prefect decorators

Used by cli.py, which prints whatever the flows return.

Public API:
  - directory: build_directory_text, build_countries_text
  - stations: build_stations_text, build_country_stations_text

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function::

       from bikeshare_explorer.renderers import render_template

       def build_mywidget_text(view: MyView) -> str:
           return render_template("mywidget.txt.j2", view=view)

2. Create a Jinja2 template in ``templates/{name}.txt.j2``.

3. Add tests: call your build function with a view and assert the
   returned text contains the expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=jinja2.select_autoescape(enabled_extensions=("html",)),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
