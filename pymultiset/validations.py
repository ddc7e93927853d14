import operator
from collections.abc import Hashable

from pymultiset.configurations import get_configurations
from pymultiset.errors import MalformedPairError, MultiplicityTypeError, UnhashableValueError


def validate_multiplicity(multiplicity: object) -> int:
    if isinstance(multiplicity, bool):
        raise MultiplicityTypeError(multiplicity)
    if isinstance(multiplicity, int):
        return multiplicity
    if get_configurations().strict_multiplicities:
        raise MultiplicityTypeError(multiplicity)
    try:
        return operator.index(multiplicity)  # type: ignore[arg-type]
    except TypeError as e:
        raise MultiplicityTypeError(multiplicity) from e


def validate_value(value: object) -> Hashable:
    try:
        hash(value)
    except TypeError as e:
        raise UnhashableValueError(value) from e
    return value  # type: ignore[return-value]


def unpack_pair(pair: object) -> tuple[Hashable, int]:
    try:
        value, multiplicity = pair  # type: ignore[misc]
    except (TypeError, ValueError) as e:
        raise MalformedPairError(pair) from e
    return validate_value(value), validate_multiplicity(multiplicity)
