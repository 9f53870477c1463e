from typing import List, Optional
import argparse
import asyncio
import logging
import sys

from mautrix.util.logging import ColorFormatter, TraceLogger

from .errors import EmojiSheetError
from .generator import CheatSheetGenerator, Config

log: TraceLogger = logging.getLogger("emojisheet")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="emojisheet",
                                     description="Generate a Markdown cheat sheet of GitHub "
                                                 "emoji shortcodes grouped by Unicode category.")
    parser.add_argument("-c", "--config", metavar="PATH",
                        help="YAML config file to merge over the built-in defaults")
    parser.add_argument("-o", "--output", metavar="PATH", help="file to write the cheat sheet to")
    parser.add_argument("-t", "--title", help="document title (default: project name from the "
                                              "manifest)")
    parser.add_argument("--manifest", metavar="PATH",
                        help="TOML manifest to read the project name from")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def setup_logging(level) -> None:
    handler = logging.StreamHandler()
    fmt = "[%(asctime)s] [%(levelname)s@%(name)s] %(message)s"
    handler.setFormatter(ColorFormatter(fmt) if sys.stderr.isatty() else logging.Formatter(fmt))
    logging.basicConfig(level=level, handlers=[handler])


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = Config(args.config)
    try:
        config.load_and_update()
    except EmojiSheetError as e:
        setup_logging(logging.INFO)
        log.error(str(e))
        return 1
    for key, value in (("document.output", args.output), ("document.title", args.title),
                       ("document.manifest", args.manifest)):
        if value is not None:
            config[key] = value

    setup_logging(logging.DEBUG if args.verbose else config["logging.level"])

    try:
        asyncio.run(CheatSheetGenerator(config, log).run())
    except EmojiSheetError as e:
        log.error(f"Failed to generate cheat sheet: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
