"""Jinja2 environment for admin pages and partials."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_partial(name: str, **context: Any) -> str:
    """Render a template fragment to a string (sidebar, child views)."""
    return templates.get_template(name).render(**context)
