"""Replacement text for absent or empty feed fields."""

from enum import Enum
from typing import Dict, Optional, Tuple

from .locator import RSSTag


class FieldState(str, Enum):
    """Why a field has no usable text."""

    MISSING = "missing"
    EMPTY = "empty"


class Scope(str, Enum):
    CHANNEL = "channel"
    ITEM = "item"


NO_TITLE_AVAILABLE = "No Title Available"
NO_DESCRIPTION = "No description"
NO_DATE_AVAILABLE = "No date available"
NO_SOURCE_AVAILABLE = "No source available"
NO_ITEM_TITLE_AVAILABLE = "No title available"

# Channel link is absent on purpose; the header renders the title unlinked.
FALLBACKS: Dict[Tuple[Scope, RSSTag, FieldState], str] = {
    (Scope.CHANNEL, RSSTag.TITLE, FieldState.MISSING): NO_TITLE_AVAILABLE,
    (Scope.CHANNEL, RSSTag.TITLE, FieldState.EMPTY): NO_TITLE_AVAILABLE,
    (Scope.CHANNEL, RSSTag.DESCRIPTION, FieldState.MISSING): NO_DESCRIPTION,
    (Scope.CHANNEL, RSSTag.DESCRIPTION, FieldState.EMPTY): NO_DESCRIPTION,
    (Scope.ITEM, RSSTag.PUB_DATE, FieldState.MISSING): NO_DATE_AVAILABLE,
    (Scope.ITEM, RSSTag.SOURCE, FieldState.MISSING): NO_SOURCE_AVAILABLE,
    (Scope.ITEM, RSSTag.TITLE, FieldState.EMPTY): NO_ITEM_TITLE_AVAILABLE,
    (Scope.ITEM, RSSTag.DESCRIPTION, FieldState.EMPTY): NO_DESCRIPTION,
}


def fallback_for(scope: Scope, tag: RSSTag, state: FieldState) -> Optional[str]:
    """Look up the replacement text, or None when the table defines none."""
    return FALLBACKS.get((scope, tag, state))
