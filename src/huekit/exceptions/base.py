"""Root of the huekit exception hierarchy.

Every huekit error carries two messages: ``user_message`` is what the CLI
prints, ``technical_message`` is what goes to the debug log. An optional
``recovery_hint`` tells the user what to change.
"""

from typing import Optional


class HueKitError(Exception):
    """
    Base exception for all huekit errors.

    Attributes:
        user_message: Short message for display
        technical_message: Detailed message for logs (defaults to user_message)
        recovery_hint: Suggestion for how to fix the issue, if any
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message
