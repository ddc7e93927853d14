from pymultiset.collectors import MultisetCollector, into
from pymultiset.configurations import Configurations, configure, get_configurations, reset_configurations
from pymultiset.errors import (
    CollectorFinishedError,
    ConfigurationError,
    MalformedPairError,
    MultiplicityTypeError,
    MultisetError,
    MultisetTypeError,
    UnhashableValueError,
)
from pymultiset.multiset import Multiset, multiset
from pymultiset.rendering import inspect

__all__ = [
    "CollectorFinishedError",
    "ConfigurationError",
    "Configurations",
    "MalformedPairError",
    "MultiplicityTypeError",
    "Multiset",
    "MultisetCollector",
    "MultisetError",
    "MultisetTypeError",
    "UnhashableValueError",
    "configure",
    "get_configurations",
    "inspect",
    "into",
    "multiset",
    "reset_configurations",
]
