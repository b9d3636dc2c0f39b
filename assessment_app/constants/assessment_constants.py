"""Assessment-related constants shared across UI and core layers."""

CONFIG_RESOURCE_NAME: str = "Heading.csv"
QUESTION_RESOURCE_SUFFIX: str = ".csv"
NONE_SUBCATEGORY_MARKER: str = "none"
OPTIONS_DELIMITER: str = ","

# Durable storage keys
ANSWERS_STORAGE_KEY: str = "assessmentAnswers"
SUBMITTED_SCORES_STORAGE_KEY: str = "dataQualityAssessmentSubmitted"
COMPLETED_STORAGE_KEY: str = "completedSubcategories"
QUESTION_COUNTS_STORAGE_KEY: str = "questionCounts"

AUTO_ADVANCE_DELAY_MS: int = 1200

MAX_SCORE: float = 5.0
SCORE_DECIMALS: int = 1

# Recommended action thresholds
MEDIUM_PRIORITY_THRESHOLD: float = 3.0
HIGH_PRIORITY_THRESHOLD: float = 2.0
MIN_RECOMMENDED_ACTIONS: int = 2
MAX_RECOMMENDED_ACTIONS: int = 5

# Score tiers
HIGH_TIER_THRESHOLD: float = 4.0
MEDIUM_TIER_THRESHOLD: float = 3.0

GRADE_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (4.5, "A+"),
    (4.0, "A"),
    (3.5, "B+"),
    (3.0, "B"),
    (2.5, "C+"),
    (2.0, "C"),
)
LOWEST_GRADE: str = "D"
