"""
Exception hierarchy for MindNotes.

Store operations are total and never raise; these types surface only at the
command boundary, in configuration and in explicit consistency checks.
"""


class MindNotesError(Exception):
    """
    Base exception for all MindNotes errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize MindNotes error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ConfigurationError(MindNotesError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass


class CommandError(MindNotesError):
    """
    Command dispatch errors.
    Raised when a command cannot be interpreted by the dispatcher.
    """

    pass


class UnknownCommandError(CommandError):
    """Raised when a command name is not part of the command table."""

    pass


class InvariantDriftError(MindNotesError):
    """
    Consistency errors.
    Raised by explicit checks when category counters no longer match note
    membership, or the selection references notes that no longer exist.
    """

    pass
