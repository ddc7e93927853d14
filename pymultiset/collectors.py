from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import replace
from types import TracebackType
from typing import TYPE_CHECKING, Generic, Self, TypeVar

from pymultiset.errors import CollectorFinishedError
from pymultiset.validations import validate_multiplicity, validate_value

if TYPE_CHECKING:
    from pymultiset.multiset import Multiset

ValueType = TypeVar("ValueType", bound=Hashable)


class MultisetCollector(Generic[ValueType]):
    """
    Folds values one at a time into a starting multiset.

    Insertions are buffered and applied to the persistent mapping in a single update when the
    collector is finalized with :meth:`done`. :meth:`halt` drops everything collected so far.
    """

    def __init__(self, original: Multiset[ValueType]) -> None:
        self.original = original
        self.result: Multiset[ValueType] | None = None
        self._pending: dict[ValueType, int] = {}
        self._added = 0
        self._finished = False

    def _check_open(self) -> None:
        if self._finished:
            raise CollectorFinishedError()

    def put(self, value: ValueType, k: int = 1) -> None:
        self._check_open()
        value = validate_value(value)  # type: ignore[assignment]
        k = validate_multiplicity(k)
        if k < 1:
            return
        self._pending[value] = self._pending.get(value, 0) + k
        self._added += k

    def done(self) -> Multiset[ValueType]:
        self._check_open()
        self._finished = True

        if not self._pending:
            self.result = self.original
            return self.original

        multiplicities = self.original.multiplicities
        merged = {value: multiplicities.get(value, 0) + k for value, k in self._pending.items()}
        self.result = replace(
            self.original,
            multiplicities=multiplicities.update(merged),
            size=self.original.size + self._added,
        )
        self._pending = {}
        return self.result

    def halt(self) -> None:
        self._finished = True
        self._pending = {}

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if self._finished:
            return
        if exc_type is None:
            self.done()
        else:
            self.halt()


def into(iterable: Iterable[ValueType], multiset: Multiset[ValueType]) -> Multiset[ValueType]:
    collector = multiset.collect()
    for value in iterable:
        collector.put(value)
    return collector.done()
