"""
ID generation utilities for MindNotes.

Provides consistent ID generation for all entity types:
- Notes: note_xxx
- Categories: cat_xxx
"""

from uuid import uuid4


def generate_note_id() -> str:
    """
    Generate unique Note ID.

    Returns:
        ID in format "note_xxx" where xxx is 12 hex characters
    """
    return f"note_{uuid4().hex[:12]}"


def generate_category_id() -> str:
    """
    Generate unique Category ID.

    Returns:
        ID in format "cat_xxx" where xxx is 12 hex characters
    """
    return f"cat_{uuid4().hex[:12]}"
