"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Quiz Player"
DISPLAY_REFRESH_INTERVAL_MS: int = 100
DEFAULT_GAME_FONT_SIZE: int = 14

TOOLBAR_BUTTON_OPEN: str = "Open Quiz"
TOOLBAR_BUTTON_ABOUT: str = "About"
TOOLBAR_BUTTON_HELP: str = "Help"
TOOLBAR_BUTTON_SETTINGS: str = "Settings"

COVER_START_BUTTON: str = "Start Quiz"
COVER_DOWNLOAD_BUTTON: str = "Download Quiz"
COVER_QUESTION_COUNT_TEMPLATE: str = "{count} question(s)"
COVER_EMPTY_STATE: str = "Open a quiz file to begin."

QUESTION_PROGRESS_TEMPLATE: str = "Question {current} of {total}"
SUBMIT_BUTTON: str = "Submit Answer"
NEXT_QUESTION_BUTTON: str = "Next Question"
VIEW_RESULTS_BUTTON: str = "View Results"
SKIP_QUESTION_BUTTON: str = "Skip Question"
SKIP_TO_RESULTS_BUTTON: str = "Skip to Results"
TIME_REMAINING_TEMPLATE: str = "{seconds}s"
TIME_UP_TEXT: str = "Time's up!"
EXPLANATION_HEADING: str = "Explanation"

RESULTS_DOWNLOAD_BUTTON: str = "Download Results"
RESULTS_RESTART_BUTTON: str = "Play Again"
RESULTS_CORRECT_TEMPLATE: str = "{correct} of {total} correct"

IMPORT_DIALOG_TITLE: str = "Open quiz file"
IMPORT_FILE_FILTER: str = "Quiz files (*.json);;All files (*.*)"
RESULTS_DIALOG_TITLE: str = "Save results"
RESULTS_FILE_FILTER: str = "HTML files (*.html);;All files (*.*)"
QUIZ_EXPORT_DIALOG_TITLE: str = "Download quiz"
QUIZ_EXPORT_FILE_FILTER: str = "Playable quiz (*.html);;Quiz files (*.json)"
