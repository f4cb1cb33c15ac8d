"""Utility modules for MindNotes."""

from mindnotes.utils.clock import Clock, TickingClock, system_clock
from mindnotes.utils.exceptions import (
    CommandError,
    ConfigurationError,
    InvariantDriftError,
    MindNotesError,
    UnknownCommandError,
)
from mindnotes.utils.id_generator import generate_category_id, generate_note_id
from mindnotes.utils.logger import get_logger, setup_logging

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # ID Generators
    "generate_note_id",
    "generate_category_id",
    # Clocks
    "Clock",
    "TickingClock",
    "system_clock",
    # Exceptions
    "MindNotesError",
    "ConfigurationError",
    "CommandError",
    "UnknownCommandError",
    "InvariantDriftError",
]
