from __future__ import annotations

import fnmatch
import logging
from dataclasses import Field, dataclass, field, fields
from typing import Any, ClassVar, Literal, TypeVar, dataclass_transform

from pymultiset.errors import ConfigurationError

logger = logging.getLogger(__name__)

ConfigurationFieldType = Literal["string", "integer", "boolean"]

TRUE_VALUES = {"yes", "true", "on", "1"}
FALSE_VALUES = {"no", "false", "off", "0"}


@dataclass
class ConfigurationFieldData:
    type_: ConfigurationFieldType = "string"
    _name: str | None = None
    _field_name: str | None = None

    @property
    def name(self) -> str:
        if self._name is None:
            raise ValueError()
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def field_name(self) -> str:
        if self._field_name is None:
            raise ValueError()
        return self._field_name

    @field_name.setter
    def field_name(self, value: str) -> None:
        self._field_name = value


def configuration(default: int | str | bool, type_: ConfigurationFieldType = "string") -> Any:  # noqa:ANN401
    return field(
        default=default,
        metadata={
            "configuration": ConfigurationFieldData(type_),
        },
    )


@dataclass_transform()
@dataclass
class ConfigurationBase:
    FIELD_BY_NAME: ClassVar[dict[str, ConfigurationFieldData]] = {}
    CONFIGURATIONS_NAMES: ClassVar[list[str]] = []


ConfigurationType = TypeVar("ConfigurationType", bound=ConfigurationBase)


def configurations(cls: type[ConfigurationType]) -> type[ConfigurationType]:
    for name, f in cls.__dict__.items():
        if not isinstance(f, Field):
            continue

        configuration_field_data = f.metadata.get("configuration")
        if configuration_field_data is None:
            continue

        configuration_field_data.field_name = name

        try:
            configuration_field_data.name
        except ValueError:
            configuration_field_data.name = name.replace("_", "-")

        cls.FIELD_BY_NAME[configuration_field_data.name] = configuration_field_data
        cls.CONFIGURATIONS_NAMES.append(configuration_field_data.name)
    return dataclass(cls)


def parse_boolean(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ConfigurationError(f"argument must be 'yes' or 'no', got {value!r}")


@configurations
class Configurations(ConfigurationBase):
    inspect_limit: int = configuration(default=50, type_="integer")
    inspect_tag: str = configuration(default="Multiset")
    strict_multiplicities: bool = configuration(default=True, type_="boolean")

    @classmethod
    def get_field_name(cls, name: str) -> str:
        if name not in cls.FIELD_BY_NAME:
            raise ConfigurationError(f"unknown configuration {name!r}")
        return cls.FIELD_BY_NAME[name].field_name

    @classmethod
    def get_configuration_type(cls, name: str) -> str:
        if name in cls.FIELD_BY_NAME:
            return cls.FIELD_BY_NAME[name].type_
        return ""

    def set_value(self, name: str, value: str | int | bool) -> None:
        field_name = self.get_field_name(name)
        field_type = self.get_configuration_type(name)

        if field_type == "integer":
            if isinstance(value, bool):
                raise ConfigurationError(f"argument of {name} must be an integer")
            try:
                setattr(self, field_name, int(value))
            except ValueError as e:
                raise ConfigurationError(f"argument of {name} must be an integer") from e
        elif field_type == "boolean":
            setattr(self, field_name, value if isinstance(value, bool) else parse_boolean(str(value)))
        else:
            setattr(self, field_name, str(value))
        logger.debug("configuration %s set to %r", name, getattr(self, field_name))

    def get_names(self, *patterns: str) -> set[str]:
        names: set[str] = set()
        for pattern in patterns:
            names.update(set(fnmatch.filter(self.CONFIGURATIONS_NAMES, pattern)))
        return names

    def info(self, names: set[str]) -> dict[str, int | str | bool]:
        info = {}
        for name in names:
            if name not in self.FIELD_BY_NAME:
                continue
            f = self.FIELD_BY_NAME[name]
            info[name] = getattr(self, f.field_name)
        return info

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, f.default)


_configurations = Configurations()


def get_configurations() -> Configurations:
    return _configurations


def configure(**overrides: str | int | bool) -> Configurations:
    for field_name, value in overrides.items():
        _configurations.set_value(field_name.replace("_", "-"), value)
    return _configurations


def reset_configurations() -> None:
    _configurations.reset()
