"""
Filter State Synchronizer
=========================

Pure translation between FilterState and its shareable query-parameter
form. Two optional keys make up the contract:

    q    search text       (absent = no text filter)
    cat  category label    (absent = "All")

Unset values are represented by omitting the key, never by an empty
value. Category values are not validated; an unknown label simply
matches no products downstream.

Pushing the result into browser history or a router is the caller's job.
"""

from typing import Mapping, Optional
from urllib.parse import parse_qsl, urlencode

from catalog_engine.schemas.domain import ALL_CATEGORIES, FilterState

SEARCH_KEY = "q"
CATEGORY_KEY = "cat"

DEFAULT_STATE = FilterState()


def to_query(state: FilterState) -> dict[str, str]:
    """
    Serialize filter state into query parameters.

    Examples:
        >>> to_query(FilterState())
        {}

        >>> to_query(FilterState(search_text="cooler", category_filter="Upright"))
        {'q': 'cooler', 'cat': 'Upright'}
    """
    params: dict[str, str] = {}
    if state.search_text:
        params[SEARCH_KEY] = state.search_text
    if state.category_filter and state.category_filter != ALL_CATEGORIES:
        params[CATEGORY_KEY] = state.category_filter
    return params


def from_query(params: Optional[Mapping[str, str]]) -> FilterState:
    """
    Restore filter state from query parameters.

    Missing or empty values fall back to the defaults ("" and "All").
    """
    params = params or {}
    return FilterState(
        search_text=params.get(SEARCH_KEY) or "",
        category_filter=params.get(CATEGORY_KEY) or ALL_CATEGORIES,
    )


def merge_query(existing: Mapping[str, str], state: FilterState) -> dict[str, str]:
    """
    Apply filter state onto an existing parameter mapping.

    `q` and `cat` are set or removed to match the state; any other
    parameters already present are kept as they are.
    """
    merged = {
        key: value
        for key, value in existing.items()
        if key not in (SEARCH_KEY, CATEGORY_KEY)
    }
    merged.update(to_query(state))
    return merged


def encode_query(state: FilterState) -> str:
    """Render filter state as a URL query string (without the leading '?')."""
    return urlencode(to_query(state))


def decode_query(query_string: str) -> FilterState:
    """
    Parse a URL query string into filter state.

    A leading '?' is accepted. When a key repeats, the first value wins.
    """
    params: dict[str, str] = {}
    for key, value in parse_qsl(query_string.lstrip("?")):
        params.setdefault(key, value)
    return from_query(params)


# =============================================================================
# State Transitions
# =============================================================================


def with_search(state: FilterState, search_text: str) -> FilterState:
    """New state with the search text replaced."""
    return state.model_copy(update={"search_text": search_text})


def with_category(state: FilterState, category_filter: str) -> FilterState:
    """New state with the category filter replaced; an empty label means "All"."""
    return state.model_copy(
        update={"category_filter": category_filter or ALL_CATEGORIES}
    )


def clear_filters() -> FilterState:
    """State with every filter removed."""
    return DEFAULT_STATE
