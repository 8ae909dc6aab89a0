import logging

from .utils import get_env

_CONFIGURED = False


def get_logger(name: str = "app") -> logging.Logger:
    global _CONFIGURED
    root = logging.getLogger("zureo")
    if not _CONFIGURED:
        level = get_env("LOG_LEVEL", "INFO").upper()
        root.setLevel(getattr(logging, level, logging.INFO))

        fmt = logging.Formatter("%(asctime)s | %(levelname)-7s | %(name)s | %(message)s")
        sh = logging.StreamHandler()
        sh.setFormatter(fmt)
        root.addHandler(sh)

        _CONFIGURED = True
    return root.getChild(name)
