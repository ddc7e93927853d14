from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pymultiset.configurations import get_configurations

if TYPE_CHECKING:
    from pymultiset.multiset import Multiset


def inspect(multiset: Multiset[Any], limit: int | None = None) -> str:
    configurations = get_configurations()
    if limit is None:
        limit = configurations.inspect_limit

    pairs = multiset.to_list()
    rendered = [repr(pair) for pair in (pairs[:limit] if limit > 0 else pairs)]
    if 0 < limit < len(pairs):
        rendered.append("...")

    return f"#{configurations.inspect_tag}<[{', '.join(rendered)}]>"
