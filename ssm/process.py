from __future__ import annotations

import logging
import os
import sys
from typing import NoReturn, Sequence

logger = logging.getLogger(__name__)


class ExecError(Exception):
    """Raised when the current process could not be replaced."""


def replace_process(executable: str, argv: Sequence[str]) -> NoReturn:
    """Replace the running program with ``executable``; never returns on success."""
    args = list(argv)
    logger.debug("Replacing process with %s %s", executable, args[1:])
    # execv discards Python's buffers.
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        os.execv(executable, args)
    except OSError as exc:
        raise ExecError(f"{executable}: {exc}") from exc


__all__ = ["ExecError", "replace_process"]
