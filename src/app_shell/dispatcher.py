"""
Line dispatcher for colors configuration files.

Splits each line into a keyword and parameters and routes it to the handler
registered for that keyword.
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Iterable
from dataclasses import dataclass

from src.components.colors import ColorConfigError, DirectiveHandlerPort, UnknownCommandError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectiveFailure:
    """A directive line that could not be applied."""

    source: str
    line_no: int
    line: str
    message: str

    def __str__(self) -> str:
        return f"{self.source}:{self.line_no}: {self.message}"


class DirectiveDispatcher:
    """Routes tokenized directives to registered handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, DirectiveHandlerPort] = {}

    def register_handler(self, action: str, handler: DirectiveHandlerPort) -> None:
        self._handlers[action] = handler

    def dispatch(self, action: str, params: list[str]) -> None:
        handler = self._handlers.get(action)
        if handler is None:
            raise UnknownCommandError(action)
        handler.handle_action(action, params)

    def dispatch_line(self, line: str) -> bool:
        """
        Dispatch one configuration line.

        Returns False for blank and comment lines, True otherwise.

        Raises:
            ColorConfigError: If the handler rejects the directive or the
                line cannot be tokenized.
        """
        try:
            tokens = shlex.split(line, comments=True)
        except ValueError as e:
            raise ColorConfigError(f"cannot parse line: {e}") from e
        if not tokens:
            return False
        self.dispatch(tokens[0], tokens[1:])
        return True

    def dispatch_lines(
        self,
        lines: Iterable[str],
        source: str = "<config>",
    ) -> list[DirectiveFailure]:
        """Dispatch every line, collecting failures instead of stopping."""
        failures: list[DirectiveFailure] = []
        for line_no, line in enumerate(lines, start=1):
            try:
                self.dispatch_line(line)
            except ColorConfigError as e:
                logger.debug("%s:%d rejected: %s", source, line_no, e.message)
                failures.append(
                    DirectiveFailure(
                        source=source,
                        line_no=line_no,
                        line=line.rstrip("\n"),
                        message=e.message,
                    )
                )
        return failures
