"""Core configuration dataclass.

SearchConfig.build turns positional arguments and an environment mapping into
the config the runner expects. Callers pass the environment in explicitly, so
the matcher itself never reads process state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from minigrep import MinigrepError

# Presence alone switches on case-insensitive matching; the value is ignored.
IGNORE_CASE_ENV = "IGNORE_CASE"


class ConfigurationError(MinigrepError):
    """Raised when the command line does not describe a search."""


@dataclass(frozen=True)
class SearchConfig:
    """Everything a single search run needs."""

    query: str
    file_path: str
    ignore_case: bool = False

    @classmethod
    def build(
        cls,
        args: Sequence[Optional[str]],
        environ: Mapping[str, str],
    ) -> "SearchConfig":
        """Build a config from positional arguments and an environment mapping.

        ``args`` excludes the program name. Missing positionals may be given
        as ``None`` (argparse leaves them that way for optional nargs).
        """

        if len(args) < 2 or args[0] is None or args[1] is None:
            raise ConfigurationError("not enough arguments")

        return cls(
            query=args[0],
            file_path=args[1],
            ignore_case=IGNORE_CASE_ENV in environ,
        )
