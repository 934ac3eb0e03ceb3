"""Theme definitions for rendered surfaces."""

from prismal.themes.dark import DARK_THEME
from prismal.themes.light import LIGHT_THEME

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}

__all__ = ["THEMES", "DARK_THEME", "LIGHT_THEME"]
