"""Static metadata describing Quiz Player."""

APP_NAME = "Quiz Player"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Quiz Player runs a finished multiple-choice quiz for a single participant: "
    "timed questions, instant explanations, and a results report you can save "
    "and open offline."
)

HELP_TEXT = (
    "Open a quiz saved as JSON. Each question needs text, at least two options "
    "and the zero-based index of the correct option:\n\n"
    "{\n"
    '  "title": "Capitals",\n'
    '  "randomizeQuestions": false,\n'
    '  "performanceMessages": {"0": "Keep practising", "80": "Great job!"},\n'
    '  "questions": [\n'
    '    {"text": "Capital of France?", "options": ["Berlin", "Paris"],\n'
    '     "correctAnswer": 1, "timeLimit": 30,\n'
    '     "explanation": "Paris has been the capital since 508."}\n'
    "  ]\n"
    "}\n\n"
    "timeLimit is optional (5-300 seconds, default 30). Question text and "
    "explanations support Markdown.\n\n"
    "Download Quiz on the cover page saves a playable HTML copy that runs "
    "offline in a browser, or the JSON document when the file name ends in .json."
)
