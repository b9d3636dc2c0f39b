"""Qt UI components for the assessment application."""

from .assessment_main_window import AssessmentMainWindow
from .dialog_helpers import (
    confirm_reset_subcategory,
    show_error,
    show_info,
    show_warning,
)

__all__ = [
    "AssessmentMainWindow",
    "confirm_reset_subcategory",
    "show_error",
    "show_info",
    "show_warning",
]
