"""Desktop entry point for the rhythm trainer."""

from __future__ import annotations

import logging
import os
import sys

from rhythm_trainer.trainer.settings import TrainerSettings

UI_INSTALL_HINT = "PySide6 is not installed. Run `pip install -e .[ui]`."


def main() -> int:
    logging.basicConfig(level=os.getenv("RHYTHM_TRAINER_LOG_LEVEL", "INFO").upper())
    try:
        from PySide6.QtWidgets import QApplication
    except ImportError:
        print(UI_INSTALL_HINT)
        return 1

    from rhythm_trainer.ui.window import TrainerWindow

    app = QApplication(sys.argv)
    window = TrainerWindow(
        settings=TrainerSettings.from_env(),
        image_dir=os.getenv("RHYTHM_TRAINER_IMAGE_DIR") or None,
    )
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
