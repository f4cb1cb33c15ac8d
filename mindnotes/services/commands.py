"""
Command dispatcher - the store's boundary towards a presentation layer.

Each command is a named intent with a payload. Names follow the command
table used by the UI (camelCase); payload keys are accepted in camelCase
and translated to model field names.
"""

from collections.abc import Callable
from typing import Any

from mindnotes.models.category import DEFAULT_SWATCH
from mindnotes.models.note import Note
from mindnotes.models.view import FilterBy, SortBy, SortOrder, ViewMode, ViewSettings
from mindnotes.services.coordinator import NotebookCoordinator
from mindnotes.services.view_projector import project_view
from mindnotes.utils.exceptions import CommandError, UnknownCommandError
from mindnotes.utils.logger import get_logger

logger = get_logger(__name__)

# UI field names -> model field names
FIELD_ALIASES = {
    "isPinned": "is_pinned",
    "textColor": "text_color",
    "borderColor": "border_color",
    "noteCount": "note_count",
    "updatedAt": "updated_at",
    "createdAt": "created_at",
}


def normalize_updates(updates: dict[str, Any] | None) -> dict[str, Any]:
    """Translate camelCase payload keys to model field names."""
    return {FIELD_ALIASES.get(key, key): value for key, value in (updates or {}).items()}


class CommandDispatcher:
    """
    Applies named commands to a coordinator and tracks view settings.

    The visible note list is never cached: ``visible_notes`` projects the
    current state on every call.
    """

    def __init__(self, coordinator: NotebookCoordinator, settings: ViewSettings | None = None):
        self.coordinator = coordinator
        self.settings = settings or ViewSettings()
        self._handlers: dict[str, Callable[[Any], Any]] = {
            # Notes
            "addNote": lambda _: self.coordinator.create_note(),
            "updateNote": self._update_note,
            "deleteNote": self.coordinator.delete_note,
            "deleteSelectedNotes": lambda _: self.coordinator.delete_selected_notes(),
            "togglePin": self.coordinator.toggle_pin,
            # Selection
            "toggleSelectMode": lambda _: self.coordinator.selection.toggle_select_mode(),
            "toggleNoteSelection": self.coordinator.selection.toggle_selection,
            "selectAllNotes": lambda _: self.coordinator.select_all(),
            "deselectAllNotes": lambda _: self.coordinator.selection.deselect_all(),
            # Categories
            "addCategory": self._add_category,
            "updateCategory": self._update_category,
            "deleteCategory": self.coordinator.delete_category,
            "incrementNoteCount": self._increment,
            "decrementNoteCount": self._decrement,
            "moveNoteBetweenCategories": self._move,
            "reconcileCounts": lambda _: self.coordinator.reconcile_counts(),
            # View settings
            "setSearchQuery": lambda text: self._set(search_query=text or ""),
            "setSelectedCategory": lambda category_id: self._set(selected_category=category_id),
            "setViewMode": lambda value: self._set(view_mode=ViewMode(value)),
            "setSortBy": lambda value: self._set(sort_by=SortBy(FIELD_ALIASES.get(value, value))),
            "setSortOrder": lambda value: self._set(sort_order=SortOrder(value)),
            "setFilterBy": lambda value: self._set(filter_by=FilterBy(value)),
        }

    @property
    def commands(self) -> list[str]:
        return sorted(self._handlers)

    def dispatch(self, name: str, payload: Any = None) -> Any:
        """
        Apply one command.

        Args:
            name: Command name from the command table
            payload: Command payload (id, text, or mapping)

        Returns:
            Whatever the underlying operation returns

        Raises:
            UnknownCommandError: If name is not a known command
            CommandError: If the payload is missing keys or holds an unknown value
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownCommandError(f"Unknown command: {name}", context={"command": name})
        logger.debug(f"Dispatching {name}")
        try:
            return handler(payload)
        except (KeyError, TypeError, ValueError) as e:
            raise CommandError(f"Invalid payload for {name}: {e}", context={"command": name}) from e

    def visible_notes(self) -> list[Note]:
        """Project the current store state through the current view settings."""
        return project_view(
            self.coordinator.notes.notes,
            self.coordinator.categories.categories,
            self.settings,
        )

    # ═══════════════════════════════════════════════════════════
    # PAYLOAD ADAPTERS
    # ═══════════════════════════════════════════════════════════

    def _set(self, **changes: Any) -> ViewSettings:
        self.settings = self.settings.model_copy(update=changes)
        return self.settings

    def _update_note(self, payload: dict[str, Any]):
        return self.coordinator.update_note(payload["id"], normalize_updates(payload.get("updates")))

    def _add_category(self, payload: dict[str, Any]):
        return self.coordinator.add_category(
            payload["name"], payload.get("color", DEFAULT_SWATCH)
        )

    def _update_category(self, payload: dict[str, Any]):
        return self.coordinator.update_category(
            payload["id"], normalize_updates(payload.get("updates"))
        )

    def _increment(self, payload: dict[str, Any]) -> None:
        self.coordinator.increment_note_count(payload["categoryId"], payload.get("amount", 1))

    def _decrement(self, payload: dict[str, Any]) -> None:
        self.coordinator.decrement_note_count(payload["categoryId"], payload.get("amount", 1))

    def _move(self, payload: dict[str, Any]) -> None:
        self.coordinator.move_note_between_categories(
            payload.get("fromId"), payload.get("toId"), payload.get("amount", 1)
        )
