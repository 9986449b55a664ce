"""Root of the argbcolor exception hierarchy.

Every error argbcolor raises on purpose derives from ArgbColorError and
carries two messages: a short `user_message` printed by the CLI and a
`technical_message` written to the log.

`recoverable` separates bad input from failures of the environment. A
recoverable error (an unparseable color, a bad config value) is fixed by
following its `recovery_hint`. Anything else (the config file cannot be
written, for instance) also sends the user to the log file.
"""

from typing import Optional


class ArgbColorError(Exception):
    """
    Base exception for all argbcolor errors.

    Attributes:
        user_message: One-line message for the terminal
        technical_message: Message for the log (defaults to user_message)
        recoverable: True when fixing the input is enough to succeed
        recovery_hint: What the user should change, if known
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
