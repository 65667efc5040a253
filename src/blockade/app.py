"""Application entry point."""

from __future__ import annotations

import sys

from blockade.ui.bootstrap import configure_logging, run_application
from blockade.ui.settings import settings_from_args


def main(argv: list[str] | None = None) -> None:
    """Launch the Blockade application."""
    settings = settings_from_args(argv)
    configure_logging(settings.log_level)
    sys.exit(run_application(settings))


if __name__ == "__main__":
    main()
