# config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .errors import InvalidArgument

LOGGER_NAME = "bitsequence"
_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in _TRUTHY


def _env_int(name: str, default: str) -> int:
    raw = os.environ.get(name, default)
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgument(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Defaults:
    word_length: int = 8        # codeword width in bits
    pad_codewords: bool = True  # right-pad a short final codeword
    hex_prefix: bool = False    # render hex with "0x"


def load_defaults() -> Defaults:
    """Read converter defaults from the environment."""
    return Defaults(
        word_length=_env_int("BITSEQUENCE_WORD_LENGTH", "8"),
        pad_codewords=_env_flag("BITSEQUENCE_PAD_CODEWORDS", "1"),
        hex_prefix=_env_flag("BITSEQUENCE_HEX_PREFIX", "0"),
    )


# ---------------------------------------------------------------------------
# logging
# ---------------------------------------------------------------------------
_root = logging.getLogger(LOGGER_NAME)
if _env_flag("BITSEQUENCE_DEBUG", "0"):
    if not _root.handlers:
        _h = logging.StreamHandler()
        _h.setFormatter(logging.Formatter(_FORMAT))
        _root.addHandler(_h)
    _root.setLevel(logging.DEBUG)
else:
    _root.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package logger."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(enabled: bool = True, verbosity: int = 1) -> None:
    """
    Turn debug logging for the package on or off at runtime.

    A stream handler is attached the first time logging is enabled;
    ``verbosity`` 0 keeps the logger at INFO even when enabled.
    """
    level = logging.DEBUG if enabled and verbosity > 0 else logging.INFO
    if enabled and not any(isinstance(h, logging.StreamHandler) for h in _root.handlers):
        _h = logging.StreamHandler()
        _h.setFormatter(logging.Formatter(_FORMAT))
        _root.addHandler(_h)
    _root.setLevel(level)
    _root.debug(f"[configure_logging] enabled={enabled}, verbosity={verbosity}")
