"""NiceGUI entrypoint for the task-lists web runtime."""

from __future__ import annotations

import argparse
import logging

from nicegui import app as nicegui_app
from nicegui import ui

from tasklists.adapters.render_memory import MemoryRenderer, MemoryRoot
from tasklists.app.application import Application, build_repository
from tasklists.app.controller import SIDEBAR_REGION
from tasklists.app.settings import AppSettings
from tasklists.utils import logging as logging_utils
from tasklists.web_ui.render import NiceGuiRenderer, NiceGuiRoot

LOGGER = logging.getLogger(__name__)


def _install_theme() -> None:
    """Install global CSS tokens for the web runtime."""
    ui.add_head_html(
        """
<style>
:root {
  --tl-card: #ffffff;
  --tl-border: #d9dfeb;
  --tl-accent: #2457ff;
}
body { background: #f3f5f9; }
.tl-root { max-width: 960px; margin: 0 auto; padding: 14px; }
.tl-card { background: var(--tl-card); border: 1px solid var(--tl-border); border-radius: 12px; }
.tl-aside { min-width: 220px; }
.tl-count { color: var(--tl-accent); min-width: 1.5em; text-align: right; }
</style>
        """
    )


def _log_exception(exc: Exception) -> None:
    """Outermost boundary: errors from UI handlers end up in the log."""
    LOGGER.error("Unhandled error in UI handler", exc_info=exc)


def _build_ui(settings: AppSettings) -> None:
    """Register the page; all visitors share one repository (single user)."""
    repo = build_repository(settings)

    @ui.page("/")
    def index() -> None:
        root = NiceGuiRoot.create(settings.root_id)
        Application(root, NiceGuiRenderer(), repo=repo, settings=settings).load()


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the task-lists NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    logging_utils.configure_root()
    args = _parse_args()
    settings = AppSettings.from_env()
    if args.smoke_test:
        root = MemoryRoot(root_id=settings.root_id)
        Application(root, MemoryRenderer(), settings=settings).load()
        print("web-smoke-ok", root.region(SIDEBAR_REGION).text.splitlines()[1:])
        return
    _install_theme()
    nicegui_app.on_exception(_log_exception)
    _build_ui(settings)
    ui.run(
        host=args.host,
        port=args.port,
        title=settings.title,
        reload=args.reload,
        show=False,
    )


if __name__ == "__main__":
    main()
