from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

from pyrsistent import PMap, pmap

from pymultiset.collectors import MultisetCollector, into
from pymultiset.errors import MultisetTypeError
from pymultiset.rendering import inspect
from pymultiset.validations import unpack_pair, validate_multiplicity, validate_value

logger = logging.getLogger(__name__)

ValueType = TypeVar("ValueType", bound=Hashable)


@dataclass(frozen=True, eq=False)
class Multiset(Generic[ValueType]):
    """
    A persistent multiset (bag) of hashable values.

    Every operation returns a new multiset; existing instances are never changed. Use
    :meth:`new` or :meth:`from_list` rather than passing the fields directly, since ``size``
    is a cached total that has to match ``multiplicities``.
    """

    multiplicities: PMap[ValueType, int] = field(default_factory=pmap)
    size: int = 0

    @classmethod
    def new(
        cls,
        iterable: Iterable[ValueType] | None = None,
        multiplicities: Callable[[ValueType], int] | None = None,
    ) -> Multiset[ValueType]:
        """
        Creates a multiset from ``iterable``, one instance per occurrence.

        When ``multiplicities`` is given, each value contributes ``multiplicities(value)``
        instances instead; values mapped to an integer below 1 are not added.
        """
        empty: Multiset[ValueType] = cls()
        if iterable is None:
            return empty
        if multiplicities is None:
            return into(iterable, empty)

        collector = empty.collect()
        for value in iterable:
            collector.put(value, multiplicities(value))
        return collector.done()

    @classmethod
    def from_list(cls, pairs: Iterable[tuple[ValueType, int]]) -> Multiset[ValueType]:
        """Creates a multiset from ``(value, multiplicity)`` pairs, ignoring multiplicities below 1."""
        collector = cls().collect()
        for pair in pairs:
            value, multiplicity = unpack_pair(pair)
            if multiplicity < 1:
                logger.debug("skipping %r with non-positive multiplicity %d", value, multiplicity)
                continue
            collector.put(value, multiplicity)
        return collector.done()

    def collect(self) -> MultisetCollector[ValueType]:
        return MultisetCollector(self)

    def put(self, value: ValueType, k: int = 1) -> Multiset[ValueType]:
        value = validate_value(value)  # type: ignore[assignment]
        k = validate_multiplicity(k)
        if k < 1:
            return self
        return replace(
            self,
            multiplicities=self.multiplicities.set(value, self.multiplicities.get(value, 0) + k),
            size=self.size + k,
        )

    def delete(self, value: ValueType, k: int = 1) -> Multiset[ValueType]:
        value = validate_value(value)  # type: ignore[assignment]
        k = validate_multiplicity(k)
        if k < 1:
            return self
        current_multiplicity = self.multiplicities.get(value, 0)
        new_multiplicity = max(0, current_multiplicity - k)
        if new_multiplicity == current_multiplicity:
            return self

        if new_multiplicity == 0:
            new_multiplicities = self.multiplicities.discard(value)
        else:
            new_multiplicities = self.multiplicities.set(value, new_multiplicity)
        return replace(
            self,
            multiplicities=new_multiplicities,
            size=self.size - (current_multiplicity - new_multiplicity),
        )

    def multiplicity(self, value: ValueType) -> int:
        return self.multiplicities.get(validate_value(value), 0)

    def member(self, value: ValueType) -> bool:
        return self.multiplicity(value) > 0

    @property
    def distinct_count(self) -> int:
        return len(self.multiplicities)

    def values(self) -> frozenset[ValueType]:
        return frozenset(self.multiplicities.keys())

    def to_list(self) -> list[tuple[ValueType, int]]:
        return [(value, multiplicity) for value, multiplicity in self.multiplicities.items()]

    def elements(self) -> Iterator[ValueType]:
        for value, multiplicity in self.multiplicities.items():
            yield from itertools.repeat(value, multiplicity)

    def _check_operand(self, other: object) -> Multiset[ValueType]:
        if not isinstance(other, Multiset):
            raise MultisetTypeError(other)
        return other

    def sum(self, other: Multiset[ValueType]) -> Multiset[ValueType]:
        other = self._check_operand(other)
        larger, smaller = (self, other) if self.distinct_count >= other.distinct_count else (other, self)

        evolver = larger.multiplicities.evolver()
        for value, multiplicity in smaller.multiplicities.items():
            evolver[value] = larger.multiplicities.get(value, 0) + multiplicity

        return replace(self, multiplicities=evolver.persistent(), size=self.size + other.size)

    def union(self, other: Multiset[ValueType]) -> Multiset[ValueType]:
        other = self._check_operand(other)
        larger, smaller = (self, other) if self.distinct_count >= other.distinct_count else (other, self)

        evolver = larger.multiplicities.evolver()
        size = larger.size
        for value, multiplicity in smaller.multiplicities.items():
            current_multiplicity = larger.multiplicities.get(value, 0)
            if multiplicity > current_multiplicity:
                evolver[value] = multiplicity
                size += multiplicity - current_multiplicity

        return replace(self, multiplicities=evolver.persistent(), size=size)

    def intersection(self, other: Multiset[ValueType]) -> Multiset[ValueType]:
        other = self._check_operand(other)
        smaller, larger = (self, other) if self.distinct_count <= other.distinct_count else (other, self)

        collector = type(self)().collect()
        for value, multiplicity in smaller.multiplicities.items():
            collector.put(value, min(multiplicity, larger.multiplicities.get(value, 0)))
        return collector.done()

    def difference(self, other: Multiset[ValueType]) -> Multiset[ValueType]:
        other = self._check_operand(other)

        evolver = self.multiplicities.evolver()
        size = self.size
        for value, multiplicity in other.multiplicities.items():
            current_multiplicity = self.multiplicities.get(value, 0)
            if current_multiplicity == 0:
                continue
            new_multiplicity = max(0, current_multiplicity - multiplicity)
            size -= current_multiplicity - new_multiplicity
            if new_multiplicity == 0:
                evolver.remove(value)
            else:
                evolver[value] = new_multiplicity

        return replace(self, multiplicities=evolver.persistent(), size=size)

    def equal(self, other: Multiset[ValueType]) -> bool:
        other = self._check_operand(other)
        return self.multiplicities == other.multiplicities

    def subset(self, other: Multiset[ValueType]) -> bool:
        other = self._check_operand(other)
        if self.distinct_count > other.distinct_count:
            logger.debug("not a subset: %d distinct values against %d", self.distinct_count, other.distinct_count)
            return False

        for value, multiplicity in self.multiplicities.items():
            if multiplicity > other.multiplicities.get(value, 0):
                logger.debug("not a subset: %r has multiplicity %d", value, multiplicity)
                return False
        return True

    def __iter__(self) -> Iterator[tuple[ValueType, int]]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return self.size

    def __contains__(self, value: object) -> bool:
        return self.member(value)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Multiset):
            return NotImplemented
        return self.equal(other)

    def __hash__(self) -> int:
        return hash(self.multiplicities)

    def __add__(self, other: object) -> Multiset[ValueType]:
        if not isinstance(other, Multiset):
            return NotImplemented
        return self.sum(other)

    def __or__(self, other: object) -> Multiset[ValueType]:
        if not isinstance(other, Multiset):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> Multiset[ValueType]:
        if not isinstance(other, Multiset):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: object) -> Multiset[ValueType]:
        if not isinstance(other, Multiset):
            return NotImplemented
        return self.difference(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Multiset):
            return NotImplemented
        return self.subset(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Multiset):
            return NotImplemented
        return self.size < other.size and self.subset(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Multiset):
            return NotImplemented
        return other.subset(self)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Multiset):
            return NotImplemented
        return other.size < self.size and other.subset(self)

    def __repr__(self) -> str:
        return inspect(self)


def multiset(*values: Any) -> Multiset[Any]:  # noqa: ANN401
    return Multiset.new(values)
