"""Logging utilities for segsweep.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All segsweep code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')
_HANDLER_NAME = 'segsweep-stderr'


def _ensure_package_root() -> logging.Logger:
    """Ensure the 'segsweep' logger owns one stderr handler and is isolated
    from the process root logger. Returns the 'segsweep' logger.
    """
    pkg_root = logging.getLogger('segsweep')
    # Drop the NullHandler added by the package __init__
    for h in list(pkg_root.handlers):
        if isinstance(h, logging.NullHandler):
            pkg_root.removeHandler(h)
    ours = [h for h in pkg_root.handlers if h.get_name() == _HANDLER_NAME]
    if ours:
        # follow sys.stderr if it was swapped since the handler was created
        ours[0].setStream(sys.stderr)
    else:
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(_FORMAT)
        pkg_root.addHandler(handler)
    pkg_root.propagate = False
    return pkg_root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    lvl = logging.getLevelName(str(level).upper())
    return lvl if isinstance(lvl, int) else default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Configure the 'segsweep' logger family level and optional external noise suppression.

    This does NOT modify the process root logger. Records go to stderr so that
    the YES/NO answer on stdout stays machine readable.
    """
    pkg_root = _ensure_package_root()
    lvl = _to_level(level)
    pkg_root.setLevel(lvl)
    # matplotlib is chatty at DEBUG (font cache scans)
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('matplotlib', 'matplotlib.font_manager', 'PIL'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'segsweep' namespace.

    If a level is provided, it sets the logger's level; otherwise the logger
    is set to NOTSET so it inherits from the 'segsweep' parent configured via
    configure_logging().
    """
    if name != 'segsweep' and not name.startswith('segsweep.'):
        name = 'segsweep.' + name
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    else:
        log.setLevel(logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
