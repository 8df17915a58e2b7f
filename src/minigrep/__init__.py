"""minigrep: print the lines of a file that contain a query string."""

from __future__ import annotations

import logging

# Silent unless the app configures handlers; stderr is reserved for errors.
logging.getLogger(__name__).addHandler(logging.NullHandler())


class MinigrepError(Exception):
    """Base class for errors surfaced to the command-line user."""
