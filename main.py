import logging
import os
import sys
import curses

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

from app_state import AppState
from config_paths import load_config
from item_store import ItemStore, StoreError
from log_setup import configure_logging
from orchestrator import Orchestrator
from theme import Theme


__version__ = "0.1.0"

USAGE = (
    "checkit - terminal checklist editor\n\n"
    "Usage:\n"
    "  checkit <file.json>\n"
    "  checkit -file <file.json>\n"
    "  checkit -file <file.json> -new <first item>\n"
    "  checkit -v\n"
)

logger = logging.getLogger(__name__)


class UsageError(Exception):
    pass


def _split_option(arg):
    """'--file=x' -> ('file', 'x'); '-file' -> ('file', None); 'x' -> (None, None)."""
    if not arg.startswith("-") or arg == "-":
        return None, None
    name = arg.lstrip("-")
    if "=" in name:
        name, value = name.split("=", 1)
        return name, value
    return name, None


def parse_args(args):
    opts = {"file": None, "new": None, "help": False, "version": False}
    positional = []

    i = 0
    while i < len(args):
        arg = args[i]
        name, value = _split_option(arg)
        i += 1

        if name is None:
            positional.append(arg)
            continue

        if name in ("h", "help"):
            opts["help"] = True
            continue
        if name in ("v", "V", "version"):
            opts["version"] = True
            continue

        if name in ("f", "file", "new"):
            if value is None:
                if i >= len(args):
                    raise UsageError(f"Option -{name} needs a value")
                value = args[i]
                i += 1
            key = "new" if name == "new" else "file"
            opts[key] = value
            continue

        raise UsageError(f"Unknown option: {arg}")

    if opts["help"] or opts["version"]:
        return opts

    if len(positional) > 1:
        raise UsageError("Only one file path may be given")

    # an explicit -file wins over a positional path
    if not opts["file"]:
        opts["file"] = positional[0] if positional else None
    if not opts["file"]:
        raise UsageError("Missing file argument")

    return opts


def create_list(path, seed_name):
    try:
        ItemStore(path).create(seed_name)
    except StoreError as e:
        logger.error("Create failed: %s", e)
        print(f"Create failed: {e}", file=sys.stderr)
        return 1
    print(f"Created {path}")
    return 0


def run_interactive(path, cfg):
    store = ItemStore(path)
    try:
        items = store.load()
    except StoreError as e:
        logger.error("Load failed: %s", e)
        print(f"Load failed: {e}", file=sys.stderr)
        return 1

    theme = Theme.from_config(cfg)
    state = AppState(items, path, store, seed_item=cfg["SEED_ITEM"])

    def curses_main(stdscr):
        Orchestrator(stdscr, state, theme).run()

    curses.wrapper(curses_main)
    return 0


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        opts = parse_args(args)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    if opts["version"]:
        print(__version__)
        return 0

    if opts["help"]:
        print(USAGE)
        return 0

    configure_logging()
    cfg = load_config()
    path = opts["file"]

    seed = (opts["new"] or "").strip()
    if seed:
        return create_list(path, seed)

    return run_interactive(path, cfg)


if __name__ == "__main__":
    sys.exit(main())
