"""Rich console setup shared by the CLI commands.

ConsoleManager hands out one Console per command invocation. Colour is turned
off when ``--no-rich`` was passed or REELSORT_NO_RICH is set in the
environment, which keeps piped output and test captures free of escape codes.
"""

from __future__ import annotations

import os
from contextlib import AbstractContextManager
from typing import Any

from rich.console import Console
from rich.traceback import install as install_rich_traceback

__all__ = ["ENV_DISABLE_RICH", "ConsoleManager", "rich_enabled"]

ENV_DISABLE_RICH = "REELSORT_NO_RICH"
_TRUTHY = {"1", "true", "yes"}


def rich_enabled() -> bool:
    """Return False when REELSORT_NO_RICH asks for plain output."""
    return os.getenv(ENV_DISABLE_RICH, "0").lower() not in _TRUTHY


class ConsoleManager(AbstractContextManager):
    """Yield a Console configured for the current output mode.

    Args:
        record: Keep a record of everything printed (``console.export_text``).
        force_use: Override the environment and force colour on or off.
        **console_kwargs: Passed through to :class:`rich.console.Console`.
    """

    def __init__(
        self,
        *,
        record: bool = False,
        force_use: bool | None = None,
        **console_kwargs: Any,
    ) -> None:
        self.record = record
        self.use_rich = rich_enabled() if force_use is None else force_use
        self.console_kwargs = console_kwargs
        self.console: Console | None = None

    def _build_console(self) -> Console:
        if self.use_rich:
            return Console(record=self.record, **self.console_kwargs)
        return Console(
            record=self.record,
            color_system=None,
            force_terminal=False,
            **self.console_kwargs,
        )

    def __enter__(self) -> Console:
        self.console = self._build_console()
        install_rich_traceback(console=self.console)
        return self.console

    def __exit__(self, exc_type, exc_val, exc_tb):  # type: ignore[override]
        if self.console is not None:
            self.console.file.flush()
        return False
