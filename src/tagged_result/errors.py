"""Exception raised by tagged_result itself.

Domain errors travel inside ``Failure`` payloads and are never raised here.
``ResultError`` signals a programming mistake: extracting the payload of the
wrong variant.
"""

from __future__ import annotations

from typing import ClassVar


class ResultError(Exception):
    """An extraction was attempted on the wrong Result variant."""

    #: Stable discriminator, distinct from any domain error's name.
    name: ClassVar[str] = "ResultError"

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        """Return the message, followed by the hint when one is set."""
        return f"{self.message}. {self.hint}" if self.hint else self.message
