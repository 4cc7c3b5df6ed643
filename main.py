"""
main.py

Einstiegspunkt: Kontext aufbauen und Hauptfenster starten.
"""
from __future__ import annotations

import logging

from core.common.bootstrap import build_context
from framework.gui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> None:
    ctx = build_context()
    logger.info("Starting LinguaOps")
    app = MainWindow(ctx)
    app.mainloop()
    logger.info("LinguaOps stopped")


if __name__ == "__main__":
    main()
