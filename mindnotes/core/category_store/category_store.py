"""
Category store - owner of the Category collection and its counters.

Counters are maintained incrementally. The store exposes the primitives
(increment, decrement, move, bulk overwrite); deciding when to call them
belongs to the coordinator.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from mindnotes.models.category import DEFAULT_SWATCH, EDITABLE_FIELDS, Category
from mindnotes.utils.id_generator import generate_category_id
from mindnotes.utils.logger import get_logger

logger = get_logger(__name__)


class CategoryStore:
    """In-memory Category collection in insertion order."""

    def __init__(self, id_factory: Callable[[], str] = generate_category_id):
        self.id_factory = id_factory
        self._categories: tuple[Category, ...] = ()

    @property
    def categories(self) -> tuple[Category, ...]:
        """Current snapshot of every category."""
        return self._categories

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, category_id: object) -> bool:
        return any(category.id == category_id for category in self._categories)

    def get_category(self, category_id: str | None) -> Category | None:
        for category in self._categories:
            if category.id == category_id:
                return category
        return None

    def ids(self) -> list[str]:
        return [category.id for category in self._categories]

    def load(self, categories: Iterable[Category]) -> None:
        """Replace the whole collection, dropping duplicate IDs."""
        seen: set[str] = set()
        unique: list[Category] = []
        for category in categories:
            if category.id in seen:
                logger.warning(f"Dropping duplicate category id on load: {category.id}")
                continue
            seen.add(category.id)
            unique.append(category)
        self._categories = tuple(unique)

    # ═══════════════════════════════════════════════════════════
    # CRUD
    # ═══════════════════════════════════════════════════════════

    def add_category(self, name: str, color: str = DEFAULT_SWATCH) -> Category:
        """
        Create a category with a fresh id and note_count 0.

        Name and color are trusted as given; validation happens upstream.
        """
        category_id = self.id_factory()
        while category_id in self:
            category_id = self.id_factory()
        category = Category(id=category_id, name=name, color=color, note_count=0)
        self._categories = (*self._categories, category)
        logger.debug(f"Category added: {category.id} ({name})")
        return category

    def update_category(self, category_id: str, updates: Mapping[str, Any]) -> Category | None:
        """Merge name/color into a category. None if not found."""
        changes = {key: value for key, value in updates.items() if key in EDITABLE_FIELDS}
        return self._replace(category_id, lambda category: category.model_copy(update=changes))

    def delete_category(self, category_id: str) -> Category | None:
        """Remove a category. Notes referencing it are left untouched."""
        removed = self.get_category(category_id)
        if removed is None:
            return None
        self._categories = tuple(c for c in self._categories if c.id != category_id)
        logger.debug(f"Category deleted: {category_id}")
        return removed

    # ═══════════════════════════════════════════════════════════
    # COUNTER MAINTENANCE
    # ═══════════════════════════════════════════════════════════

    def increment_note_count(self, category_id: str | None, amount: int = 1) -> None:
        self._adjust(category_id, amount)

    def decrement_note_count(self, category_id: str | None, amount: int = 1) -> None:
        """Decrease a counter, clamping at zero."""
        self._adjust(category_id, -amount)

    def move_note_between_categories(
        self, from_id: str | None, to_id: str | None, amount: int = 1
    ) -> None:
        """
        Shift ``amount`` from one counter to another.

        Either side may be None or unknown, in which case that half is
        skipped. The source counter clamps at zero.
        """
        if from_id:
            self._adjust(from_id, -amount)
        if to_id:
            self._adjust(to_id, amount)

    def recompute_all_counts(self, counts_by_category_id: Mapping[str, int]) -> None:
        """
        Overwrite counters in bulk.

        Only categories present in the mapping are touched; unknown ids are
        ignored and negative values clamp to zero.
        """
        self._categories = tuple(
            category.model_copy(update={"note_count": max(0, counts_by_category_id[category.id])})
            if category.id in counts_by_category_id
            else category
            for category in self._categories
        )
        logger.debug(f"Recomputed counts for {len(counts_by_category_id)} categories")

    def _adjust(self, category_id: str | None, delta: int) -> None:
        if not category_id:
            return
        updated = self._replace(
            category_id,
            lambda category: category.model_copy(
                update={"note_count": max(0, category.note_count + delta)}
            ),
        )
        if updated is None:
            logger.debug(f"Counter adjust skipped, category not found: {category_id}")

    def _replace(
        self, category_id: str, change: Callable[[Category], Category]
    ) -> Category | None:
        for index, category in enumerate(self._categories):
            if category.id == category_id:
                updated = change(category)
                self._categories = (
                    self._categories[:index] + (updated,) + self._categories[index + 1 :]
                )
                return updated
        return None
