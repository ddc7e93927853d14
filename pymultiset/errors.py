class MultisetError(Exception):
    pass


class MultiplicityTypeError(MultisetError, TypeError):
    def __init__(self, multiplicity: object) -> None:
        super().__init__(f"multiplicity must be an integer, not {type(multiplicity).__name__}: {multiplicity!r}")
        self.multiplicity = multiplicity


class UnhashableValueError(MultisetError, TypeError):
    def __init__(self, value: object) -> None:
        super().__init__(f"unhashable value of type {type(value).__name__}: {value!r}")
        self.value = value


class MultisetTypeError(MultisetError, TypeError):
    def __init__(self, operand: object) -> None:
        super().__init__(f"expected a Multiset, got {type(operand).__name__}")
        self.operand = operand


class MalformedPairError(MultisetError, ValueError):
    def __init__(self, pair: object) -> None:
        super().__init__(f"expected a (value, multiplicity) pair, got {pair!r}")
        self.pair = pair


class ConfigurationError(MultisetError):
    pass


class CollectorFinishedError(MultisetError):
    def __init__(self) -> None:
        super().__init__("collector was already finished")
