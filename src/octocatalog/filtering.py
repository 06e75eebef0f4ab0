"""Case-insensitive substring filtering of option lists."""

from __future__ import annotations

from typing import Sequence

from octocatalog.models import Option


def filter_options(options: Sequence[Option], query: str) -> list[Option]:
    """Return the options whose text or value contains *query*.

    Matching ignores case.  An empty *query* returns every option.  The
    result is a new list in the original order.
    """
    if not query:
        return list(options)
    needle = query.lower()
    return [
        option
        for option in options
        if needle in option.text.lower() or needle in option.value.lower()
    ]
