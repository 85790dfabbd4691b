import logging
import os

import config_paths

LOG_LEVEL_ENV = "CHECKIT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_path=None, level=None):
    """
    Send log records to a file; curses owns the terminal while the UI runs.
    Falls back to a NullHandler when the log file cannot be opened.
    """
    root = logging.getLogger()
    # drop handlers from an earlier call only
    for handler in list(root.handlers):
        if getattr(handler, "_checkit_handler", False):
            root.removeHandler(handler)
            handler.close()

    level_name = level or os.environ.get(LOG_LEVEL_ENV, "INFO")
    level_value = getattr(logging, str(level_name).upper(), None)
    root.setLevel(level_value if isinstance(level_value, int) else logging.INFO)

    path = log_path or config_paths.LOG_PATH
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        path_used = path
    except OSError:
        handler = logging.NullHandler()
        path_used = None

    handler._checkit_handler = True
    root.addHandler(handler)
    return path_used
