"""Command-line entry point.

Resolves the translations directory, primary language and ignore-list from
the command line, then serves the editor and opens it in a browser.

    sheet-editor --dir ./locales --main en --ignore generated.json
"""

import argparse
import sys
import threading
import webbrowser
from pathlib import Path
from typing import List, Optional

import uvicorn

from infrastructure.configuration import EditorSettings, ServerSettings, Settings
from infrastructure.logging import configure_logging, get_module_logger
from server.server import create_app

logger = get_module_logger()

BROWSER_DELAY_SECONDS = 1.0


def build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the editor CLI."""
    parser = argparse.ArgumentParser(
        prog="sheet-editor",
        description="Edit per-language translation files as one sheet.",
    )
    parser.add_argument(
        "-d",
        "--dir",
        required=True,
        help="Path to the translations directory",
    )
    parser.add_argument(
        "-m",
        "--main",
        default=None,
        help="Primary language to show first (default: en)",
    )
    parser.add_argument(
        "--ignore",
        default=None,
        help="Comma-separated list of translation files that must not be written",
    )
    parser.add_argument("--host", default=None, help="Interface to bind")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on")
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open the editor in a browser",
    )
    parser.add_argument(
        "--legacy-collisions",
        action="store_true",
        help="Silently replace values when a key collides with a section",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Build Settings where explicit CLI flags override the environment."""
    editor = {"TRANSLATIONS_DIR": str(Path(args.dir).expanduser().resolve())}
    if args.main:
        editor["MAIN_LANGUAGE"] = args.main
    if args.ignore is not None:
        editor["IGNORE_FILES"] = args.ignore
    if args.legacy_collisions:
        editor["LEGACY_PATH_COLLISIONS"] = True

    server = {}
    if args.host:
        server["HOST"] = args.host
    if args.port:
        server["PORT"] = args.port
    if args.no_browser:
        server["OPEN_BROWSER"] = False

    return Settings(editor=EditorSettings(**editor), server=ServerSettings(**server))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    translations_dir = Path(args.dir).expanduser().resolve()
    if not translations_dir.is_dir():
        print(f"Error: directory not found: {translations_dir}", file=sys.stderr)
        return 1

    settings = settings_from_args(args)
    configure_logging(settings=settings)

    app = create_app(settings)
    url = settings.server.url
    logger.info(
        "starting_server",
        url=url,
        translations_dir=settings.editor.TRANSLATIONS_DIR,
        main_language=settings.editor.MAIN_LANGUAGE,
        ignored_files=list(settings.editor.ignore_list),
    )

    if settings.server.OPEN_BROWSER:
        timer = threading.Timer(BROWSER_DELAY_SECONDS, webbrowser.open, args=(url,))
        timer.daemon = True
        timer.start()

    uvicorn.run(
        app,
        host=settings.server.HOST,
        port=settings.server.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
