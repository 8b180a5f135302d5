"""Application entry point for the quiz player."""

from __future__ import annotations

from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from quiz_player.constants.about import APP_NAME
from quiz_player.ui.player_window import PlayerMainWindow
from quiz_player.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and launch the Qt player, optionally with a quiz file."""
    logger = configure_logging()
    logger.info("Starting %s", APP_NAME)

    app = QApplication(sys.argv)
    quiz_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    window = PlayerMainWindow(quiz_path=quiz_path)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
