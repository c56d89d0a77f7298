"""
Root of the Savant Sample exception hierarchy.
"""

from typing import Any, Dict, Optional


class SavantError(Exception):
    """Base exception for all Savant Sample errors.

    Attributes:
        message: The error message
        help_text: Optional guidance on how to fix the problem
        error_code: Stable code for programmatic handling
        user_action: Suggested command or change that resolves the issue
        context: Extra key/value details, rendered by ``to_dict``
    """

    def __init__(
        self,
        message: str,
        help_text: Optional[str] = None,
        error_code: Optional[str] = None,
        user_action: Optional[str] = None,
        **context: Any,
    ):
        self.message = message
        self.help_text = help_text
        self.error_code = error_code
        self.user_action = user_action
        self.context: Dict[str, Any] = context
        super().__init__(message)

    def __str__(self) -> str:
        lines = [self.message]
        if self.help_text:
            lines.append(f"Help: {self.help_text}")
        if self.user_action:
            lines.append(f"Action: {self.user_action}")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "error_code": self.error_code,
            "help_text": self.help_text,
            "user_action": self.user_action,
            "context": dict(self.context),
        }

    def add_context(self, **kwargs) -> "SavantError":
        self.context.update(kwargs)
        return self
