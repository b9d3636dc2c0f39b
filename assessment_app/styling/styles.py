"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_DISABLED.get(theme)};
            }}
            QGroupBox {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_sidebar_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QTreeWidget {{
                background-color: {ColorPalette.SIDEBAR_BG.get(theme)};
                color: {ColorPalette.SIDEBAR_TEXT.get(theme)};
                border: none;
            }}
            QTreeWidget::item:disabled {{
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QTreeWidget::item:selected {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_tier_color(tier: str | None, theme: Theme = Theme.LIGHT) -> str:
        colors = {
            "high": ColorPalette.SCORE_HIGH,
            "medium": ColorPalette.SCORE_MEDIUM,
            "low": ColorPalette.SCORE_LOW,
        }
        palette_entry = colors.get(tier or "")
        if palette_entry is None:
            return ColorPalette.TEXT_SECONDARY.get(theme)
        return palette_entry.get(theme)

    @staticmethod
    def get_score_label_style(tier: str | None, theme: Theme = Theme.LIGHT) -> str:
        return f"font-size: 28pt; font-weight: bold; color: {Styles.get_tier_color(tier, theme)};"

    @staticmethod
    def get_priority_style(priority: str, theme: Theme = Theme.LIGHT) -> str:
        tier = "low" if priority == "high" else "medium"
        return f"font-weight: bold; color: {Styles.get_tier_color(tier, theme)};"
