"""Command-line entry point: ``showdeck serve|build|archive``."""
import argparse
import logging
import os
import sys
from pathlib import Path

from .archive import archive_filename, write_archive
from .config import DeckConfig, parse_port
from .errors import DeckError
from .generator import DeckGenerator
from .paths import validate_slides_root
from .theme_loader import list_available_themes, validate_theme

logger = logging.getLogger(__name__)


def _port_arg(value: str) -> int:
    try:
        return parse_port(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="showdeck", description="Render a directory of markdown into an HTML slide deck.")
    p.add_argument("--slides-root", type=Path, help="Directory holding showoff.json (default: $SHOWDECK_SLIDES_ROOT or .)")
    p.add_argument("--theme", "-t", help=f"CSS theme to use ({', '.join(list_available_themes())})")
    p.add_argument("--debug", action="store_true", help="Enable verbose logging")
    sub = p.add_subparsers(dest="command", metavar="COMMAND")

    serve = sub.add_parser("serve", help="Serve the deck, presenter view and archive over HTTP")
    serve.add_argument("--host", help="Interface to bind (default: 127.0.0.1)")
    serve.add_argument("--port", "-p", type=_port_arg, help="Port for the built in webserver (default: 8080)")
    serve.add_argument("--shjs-dir", type=Path, help="Directory of shjs assets to serve under /shjs/")

    build = sub.add_parser("build", help="Write the rendered deck to a single HTML file")
    build.add_argument("--output", "-o", type=Path, default=Path("index.html"), help="Destination HTML path")

    archive = sub.add_parser("archive", help="Write the deck and its images to a zip file")
    archive.add_argument("--output", "-o", type=Path, help="Destination zip path (default: <deck name>.zip)")
    return p


def _run(args, config: DeckConfig) -> None:
    if args.command == "serve":
        from .server import serve

        serve(config)
    elif args.command == "build":
        DeckGenerator(config).write_html(args.output)
    elif args.command == "archive":
        generator = DeckGenerator(config)
        deck = generator.load()
        output = write_archive(generator, deck, args.output or Path(archive_filename(deck)))
        logger.info("✅ Archive written to %s", output)


def main(argv=None) -> int:
    """Command-line entry point for showdeck."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    level = "DEBUG" if args.debug else os.getenv("SHOWDECK_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        logging.basicConfig(level=logging.INFO, format="%(levelname)s  %(message)s")
        logger.error(f"Invalid SHOWDECK_LOG_LEVEL {level!r}")
        return 2
    logging.basicConfig(level=level, format="%(levelname)s  %(message)s")

    if not args.command:
        parser.print_usage(sys.stderr)
        logger.error("Missing a subcommand. Valid subcommands are: serve, build, archive")
        return 2

    try:
        config = DeckConfig.from_env().override(
            slides_root=args.slides_root,
            theme=args.theme,
            host=getattr(args, "host", None),
            port=getattr(args, "port", None),
            shjs_dir=getattr(args, "shjs_dir", None),
            debug=args.debug or None,
        )
    except ValueError as exc:
        logger.error(f"Invalid configuration: {exc}")
        return 2

    if not validate_theme(config.theme):
        logger.error(f"Unknown theme {config.theme!r}. Available themes: {list_available_themes()}")
        return 2

    try:
        config = config.override(slides_root=validate_slides_root(config.slides_root))
        logger.info(f"Loading slides from {config.slides_root}")
        _run(args, config)
    except DeckError as exc:
        logger.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
