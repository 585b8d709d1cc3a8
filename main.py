"""textlog demo — append messages as formatted entries to a text log file."""

import argparse
import logging
import sys

from textlog.config import load_config, load_yaml_config
from textlog.errors import TextLogError
from textlog.models import LogEntry, RequestContext
from textlog.priorities import parse_priority
from textlog.writer import FormattedTextWriter

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [textlog] %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textlog",
        description="Append messages to a formatted text log file.",
    )
    parser.add_argument("messages", nargs="*",
                        help="Messages to log (read from stdin when omitted)")
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument("--file-name", help="Log file name (default: error.php)")
    parser.add_argument("--file-path", help="Directory holding the log file")
    parser.add_argument("--format", dest="entry_format",
                        help="Entry template, e.g. '{DATETIME} {PRIORITY} {MESSAGE}'")
    parser.add_argument("--no-guard", action="store_true",
                        help="Omit the guard lines from a new file's header")
    parser.add_argument("--priority", default="INFO", help="Entry priority (default: INFO)")
    parser.add_argument("--category", default="", help="Entry category")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    options = {
        "file_name": args.file_name,
        "file_path": args.file_path,
        "entry_format": args.entry_format,
    }
    if args.no_guard:
        options["suppress_guard_header"] = True

    try:
        priority = parse_priority(args.priority)
    except ValueError as e:
        logger.error("%s", e)
        return 2

    config = load_config(options, load_yaml_config(args.config))
    messages = args.messages or (line.rstrip("\n") for line in sys.stdin)
    context = RequestContext(remote_addr="127.0.0.1")

    written = 0
    try:
        with FormattedTextWriter(config) as writer:
            for message in messages:
                if not message:
                    continue
                writer.add_entry(LogEntry(message, priority, args.category), context)
                written += 1
    except TextLogError as e:
        logger.error("%s", e)
        return 1

    logger.info("Wrote %d entries to %s", written, config.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
