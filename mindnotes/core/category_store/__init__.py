"""Category collection store."""

from mindnotes.core.category_store.category_store import CategoryStore

__all__ = ["CategoryStore"]
