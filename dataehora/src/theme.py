"""Light/dark theme selection."""

from datetime import datetime
from typing import Literal

Theme = Literal["light", "dark"]
PREFERENCES = ("default", "auto", "light", "dark")


def resolve_theme(preference: str, now: datetime, prefers_dark: bool = False) -> Theme:
    """Pick the theme for a saved preference.

    "auto" is dark between 18:00 and 06:00 local time; "default" (or an
    unknown value) follows the system color scheme.
    """
    if preference in ("light", "dark"):
        return preference
    if preference == "auto":
        return "dark" if now.hour < 6 or now.hour >= 18 else "light"
    return "dark" if prefers_dark else "light"
