"""HTML pages and client assets shipped with the package."""

from functools import lru_cache
from html import escape
from pathlib import Path
from string import Template

WEB_DIR = Path(__file__).parent
TEMPLATES_DIR = WEB_DIR / "templates"
STATIC_DIR = WEB_DIR / "static"


@lru_cache
def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def read_asset(name: str) -> str:
    """Return the contents of a static asset such as ``app.js``."""
    return _read(STATIC_DIR / name)


def render_landing_page() -> str:
    return _read(TEMPLATES_DIR / "landing.html")


def render_home_page(user_id: str) -> str:
    """Render the app shell for a user."""
    template = Template(_read(TEMPLATES_DIR / "home.html"))
    return template.safe_substitute(user_id=escape(user_id, quote=True))
