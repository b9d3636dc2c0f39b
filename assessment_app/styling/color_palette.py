"""Color palette for AssessQt supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#1F2933", dark="#F5F5F5")
    TEXT_SECONDARY = ThemeColors(light="#616E7C", dark="#AAAAAA")
    TEXT_DISABLED = ThemeColors(light="#B8C2CC", dark="#555555")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#F5F7FA", dark="#2D2D2D")
    SIDEBAR_BG = ThemeColors(light="#1F2A44", dark="#141B2D")
    SIDEBAR_TEXT = ThemeColors(light="#F5F7FA", dark="#E4E7EB")

    ACCENT_PRIMARY = ThemeColors(light="#0078D4", dark="#4A9EFF")

    # Score tiers: >= 4 high, >= 3 medium, otherwise low
    SCORE_HIGH = ThemeColors(light="#107C10", dark="#6FCF6F")
    SCORE_MEDIUM = ThemeColors(light="#C27C0E", dark="#FFC83D")
    SCORE_LOW = ThemeColors(light="#D13438", dark="#FF6B6B")

    BORDER_PRIMARY = ThemeColors(light="#D1D1D1", dark="#555555")

    BUTTON_PRIMARY_BG = ThemeColors(light="#0078D4", dark="#4A9EFF")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")
    BUTTON_SECONDARY_BG = ThemeColors(light="#F5F5F5", dark="#3A3A3A")
    BUTTON_HOVER_BG = ThemeColors(light="#E8E8E8", dark="#505050")
