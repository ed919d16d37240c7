"""Allow running Countdown as a module: python -m countdown."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .settings import load_settings, resolve_log_level
from .app import CountdownApp


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=resolve_log_level(settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Countdown")
    app.setOrganizationName("Countdown")

    window = CountdownApp(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
