"""Entry point for the ring focus window switcher."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from .config import load_config, configure_logging
from .gui import WindowSwitcher


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load settings, then run the PySide6 event loop with the switcher window."""
    parser = argparse.ArgumentParser(prog="ringfocus", description="Cycle focus around a ring of windows.")
    parser.add_argument("--config", help="JSON settings file (defaults to $RINGFOCUS_CONFIG)")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    configure_logging(config.log_level)

    app = QApplication(sys.argv[:1])
    window = WindowSwitcher(config)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
