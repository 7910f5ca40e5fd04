# tasklists/app/main.py
from __future__ import annotations

import argparse
import logging

from ..adapters.render_memory import MemoryRenderer, MemoryRoot
from ..utils import logging as logging_utils
from .application import Application
from .controller import DETAIL_REGION, SIDEBAR_REGION
from .settings import AppSettings


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the task-lists desktop UI.")
    parser.add_argument(
        "--smoke-test",
        action="store_true",
        help="Load the initial list headless, print both panes and exit.",
    )
    return parser.parse_args()


def _smoke_test(settings: AppSettings) -> None:
    root = MemoryRoot(root_id=settings.root_id)
    Application(root, MemoryRenderer(), settings=settings).load()
    print(root.region(SIDEBAR_REGION).text)
    print()
    print(root.region(DETAIL_REGION).text)


def main() -> None:
    logging_utils.configure_root()
    args = _parse_args()
    settings = AppSettings.from_env()
    if args.smoke_test:
        _smoke_test(settings)
        return

    # Tk is only imported for the interactive runtime.
    from .views.main_window import MainWindowView
    from .views.theme import apply_theme
    from .views.tk_render import TkRenderer

    win = MainWindowView(title=settings.title, root_id=settings.root_id)
    apply_theme(win)
    app = Application(win.root, TkRenderer(), settings=settings)
    app.load()
    logging.getLogger(__name__).info("desktop UI ready")
    win.mainloop()


if __name__ == "__main__":
    main()
