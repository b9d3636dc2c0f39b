"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "AssessQt Self-Assessment"
SIDEBAR_GREETING: str = "Hello User"
SIDEBAR_LOADING: str = "Loading categories..."
SIDEBAR_EMPTY: str = "No categories available"
SIDEBAR_NO_SUBCATEGORIES: str = "No subcategories"
SIDEBAR_MIN_WIDTH: int = 280

MODE_BUTTON_DASHBOARD: str = "Dashboard"
MODE_BUTTON_RELOAD: str = "Reload Configuration"
MODE_BUTTON_ABOUT: str = "About AssessQt"
MODE_BUTTON_HELP: str = "Help"
MODE_BUTTON_SETTINGS: str = "Settings"

QUESTIONS_LOADING: str = "Loading questions..."
QUESTIONS_EMPTY: str = "No questions available."
DEFINITION_HEADING: str = "Definition"
LEGEND_HEADING: str = "Legend"
BACK_TO_DASHBOARD: str = "Back to Dashboard"
RESET_SUBCATEGORY_BUTTON: str = "Reset Answers"
LIVE_AVERAGE_TEMPLATE: str = "Average score: {average}"
LIVE_AVERAGE_EMPTY: str = "Average score: not yet answered"
ANSWERED_TEMPLATE: str = "{answered} of {total} answered"
COMPLETED_BANNER: str = "Completed! Moving on to the next subcategory..."
COMPLETED_LAST_BANNER: str = "Completed! This was the last subcategory."

DASHBOARD_TITLE: str = "Overall Score"
DASHBOARD_CATEGORY_HEADING: str = "Category Scores"
DASHBOARD_ACTIONS_HEADING: str = "Recommended Actions"
DASHBOARD_WEAKEST_HEADING: str = "Weakest Subcategories"
DASHBOARD_WEAKEST_LIMIT: int = 3
DASHBOARD_COMPLETION_TEMPLATE: str = (
    "Assessment completion: {completed} of {total} subcategories ({percentage}%)"
)
DASHBOARD_NO_SCORE: str = "-"
DASHBOARD_VIEW_ASSESSMENT: str = "View assessment"

LOCKED_DIALOG_TITLE: str = "Subcategory locked"
RESET_CONFIRM_TITLE: str = "Reset answers"
RESET_CONFIRM_TEMPLATE: str = "Delete all answers for {subcategory}? Its score will need to be submitted again."

LOCKED_MARKER: str = "\U0001F512"
COMPLETED_MARKER: str = "✓"
DEFAULT_ICON_GLYPH: str = "•"
# Configuration icons are Font Awesome style tokens; the sidebar shows a glyph stand-in.
ICON_GLYPHS: dict[str, str] = {
    "fa-star": "★",
    "fa-check": "✓",
    "fa-shield": "\U0001F6E1",
    "fa-lock": "\U0001F512",
    "fa-database": "\U0001F5C4",
    "fa-users": "\U0001F465",
    "fa-chart-bar": "\U0001F4CA",
    "fa-cog": "⚙",
    "fa-book": "\U0001F4D6",
}
