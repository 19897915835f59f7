import sys
import os
import curses
import logging

import config_paths
from debug_log import setup_logging
from default_records import DefaultRecordsInitializer
from record_source import RecordSource

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator

try:
    from _version import __version__
except ImportError:
    __version__ = "0.0.0"

USAGE = (
    "revealgrid - progressive-reveal table editor\n\nUsage:\n"
    "  revealgrid [path]   (.json, .jsonl, .csv, .parquet, .xlsx)\n"
    "  revealgrid -v\n"
)


def parse_args(args):
    """Returns (action, path) where action is one of run, version, help."""
    if "-v" in args or "-V" in args:
        return "version", None
    if "-h" in args or "--help" in args:
        return "help", None
    if len(args) > 1:
        return "help", None
    return "run", (args[0] if args else None)


def main():
    action, path = parse_args(sys.argv[1:])

    if action == "version":
        print(__version__)
        return

    if action == "help":
        print(USAGE)
        return

    setup_logging()
    log = logging.getLogger("revealgrid")

    source = RecordSource(path) if path else None

    def load_records():
        if source:
            return source.load()
        return DefaultRecordsInitializer().create()

    try:
        records = load_records()
    except Exception as e:
        print(f"Load failed: {e}", file=sys.stderr)
        sys.exit(1)
    log.debug("loaded %d records from %s", len(records), path or "sample")

    config = config_paths.load_config()

    def curses_main(stdscr):
        Orchestrator(
            stdscr,
            records,
            config,
            source=path,
            reload_records=load_records,
        ).run()

    curses.wrapper(curses_main)


if __name__ == "__main__":
    main()
