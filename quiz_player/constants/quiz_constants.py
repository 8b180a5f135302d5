"""Quiz-related constants shared across UI and core layers."""

DEFAULT_TIME_LIMIT_SECONDS: int = 30
MIN_TIME_LIMIT_SECONDS: int = 5
MAX_TIME_LIMIT_SECONDS: int = 300
MIN_OPTION_COUNT: int = 2
NO_SELECTION: int = -1
DEFAULT_PERFORMANCE_MESSAGE: str = "Quiz completed!"
TIMER_TICK_INTERVAL_SECONDS: float = 1.0
TIMER_JOIN_TIMEOUT_SECONDS: float = 1.0
TIME_LIMIT_WARNING_WINDOW_SECONDS: int = 5

STATUS_LABELS: dict[str, str] = {
    "correct": "Correct",
    "incorrect": "Incorrect",
    "skipped": "Skipped",
    "timeExpired": "Time Expired",
}
NO_EXPLANATION_TEXT: str = "No explanation provided for this question."
RESULTS_FILENAME_TEMPLATE: str = "Result - {title}.html"
QUIZ_FILENAME_TEMPLATE: str = "{title}.html"
