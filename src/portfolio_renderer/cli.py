from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from portfolio_renderer.app import PortfolioApp
from portfolio_renderer.config import SiteConfig
from portfolio_renderer.errors import PortfolioError
from portfolio_renderer.messages import Message, Navigate, OpenModal, SelectFilter, ToggleTheme
from portfolio_renderer.page import Page

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio-render",
        description="Render portfolio JSON content into a static HTML page.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Load all content and write the rendered page")
    build.add_argument("--data-dir", help="Directory or base URL holding the JSON documents")
    build.add_argument("--pdf-path", help="Path or URL of the downloadable CV")
    build.add_argument("--shell", type=Path, help="HTML shell to render into")
    build.add_argument("--output", type=Path, default=Path("index.html"), help="Output file")
    build.add_argument("--page", help="Panel to show (about, resume, portfolio, blog, contact)")
    build.add_argument("--filter", dest="filter_key", help="Project category to filter by")
    build.add_argument(
        "--open",
        dest="open_modal",
        metavar="KIND:ID",
        help="Open a detail view, e.g. project:p1 or blog:b2",
    )
    build.add_argument("--toggle-theme", action="store_true", help="Flip the stored theme")
    return parser


def _config_from_args(args: argparse.Namespace) -> SiteConfig:
    config = SiteConfig.from_data_dir(args.data_dir) if args.data_dir else SiteConfig.from_env()
    if args.pdf_path:
        config = config.model_copy(update={"pdf_path": args.pdf_path})
    return config


def _messages_from_args(args: argparse.Namespace) -> list[Message]:
    messages: list[Message] = []
    if args.toggle_theme:
        messages.append(ToggleTheme())
    if args.page:
        messages.append(Navigate(args.page))
    if args.filter_key:
        messages.append(SelectFilter(args.filter_key))
    if args.open_modal:
        kind, sep, entity_id = args.open_modal.partition(":")
        if not sep or not entity_id:
            raise ValueError(f"--open expects KIND:ID, got {args.open_modal!r}")
        messages.append(OpenModal(kind, entity_id))
    return messages


def run_build(args: argparse.Namespace) -> int:
    """Load content, replay the requested interactions and write the page.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    config = _config_from_args(args)
    if args.shell:
        try:
            page = Page(args.shell.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error: cannot read shell {args.shell}: {exc}")
            return 1
    else:
        page = Page.from_shell()
    app = PortfolioApp(config=config, page=page, animate=False)

    loaded = asyncio.run(app.start())
    exit_code = 0 if loaded else 1

    if loaded:
        try:
            messages = _messages_from_args(args)
            logger.debug("Replaying %d interactions", len(messages))
            for message in messages:
                app.update(message)
        except (PortfolioError, ValueError) as exc:
            print(f"Error: {exc}")
            exit_code = 1

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(app.render(), encoding="utf-8")

    if loaded:
        print(f"Wrote {args.output}")
    else:
        print(f"Content failed to load; wrote error page to {args.output}")
    return exit_code


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=_LOG_FORMAT,
    )

    if args.command == "build":
        return run_build(args)

    parser.error(f"Unknown command {args.command!r}")
    return 2
