"""Fuzzy selection primitives shared by browse and history views.

Both helpers are pure so they can be tested without any filesystem state.
"""

from __future__ import annotations


def should_select(name: str, query: str) -> bool:
    """Return whether ``query`` occurs in ``name`` as a case-insensitive subsequence.

    An empty query selects everything. Characters must appear in order but not
    necessarily next to each other, so ``"mrs"`` selects ``"main.rs"``.
    """
    if not query:
        return True

    needles = query.casefold()
    cursor = 0
    for ch in name.casefold():
        if ch == needles[cursor]:
            cursor += 1
            if cursor == len(needles):
                return True
    return False


def wrap_index(raw_index: int, length: int) -> int:
    """Wrap a signed highlight index into ``range(length)``.

    Moving up from row 0 lands on the last row and moving past the last row
    lands on row 0. ``length`` must be positive; callers check for an empty
    selection first.
    """
    if length <= 0:
        raise ValueError(f"cannot wrap an index into an empty selection (length={length})")
    return raw_index % length


__all__ = [
    "should_select",
    "wrap_index",
]
