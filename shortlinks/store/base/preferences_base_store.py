"""Abstract base class for view preference stores.

Preferences (search query, sort key, sort order) are non-sensitive and
long-lived. They are kept apart from credentials and survive logout.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from shortlinks.links.collection import SortKey, SortOrder


@dataclass(frozen=True)
class ViewPreferences:
    search_query: str = ''
    sort_by: SortKey = SortKey.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'ViewPreferences':
        """Build preferences from stored values, falling back to defaults for anything invalid."""
        defaults = cls()
        query = data.get('searchQuery', defaults.search_query)
        try:
            sort_by = SortKey(data.get('sortBy', defaults.sort_by))
        except ValueError:
            sort_by = defaults.sort_by
        try:
            sort_order = SortOrder(data.get('sortOrder', defaults.sort_order))
        except ValueError:
            sort_order = defaults.sort_order
        return cls(
            search_query=query if isinstance(query, str) else defaults.search_query,
            sort_by=sort_by,
            sort_order=sort_order,
        )

    def to_dict(self) -> dict[str, str]:
        return {
            'searchQuery': self.search_query,
            'sortBy': str(self.sort_by),
            'sortOrder': str(self.sort_order),
        }


class PreferencesBaseStore(ABC):
    """Interface for view preference stores.

    Methods:
        load() -> ViewPreferences:
            Return stored preferences, or defaults if nothing usable is stored.

        save(preferences: ViewPreferences) -> None:
            Persist preferences, replacing previous ones.

        reset() -> None:
            Drop stored preferences so the next load() returns defaults.
    """

    @abstractmethod
    def load(self) -> ViewPreferences:
        pass

    @abstractmethod
    def save(self, preferences: ViewPreferences) -> None:
        pass

    @abstractmethod
    def reset(self) -> None:
        pass
