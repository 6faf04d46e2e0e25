"""
Height and weight units exposed as GraphQL enums.

Heights are stored in centimetres and weights in kilograms; the converters
below map a stored value to the requested unit.
"""
from collections.abc import Callable
from enum import Enum

import strawberry

from blog_graph.core.exceptions import UnsupportedUnitError


@strawberry.enum(description="Height unit")
class HeightUnit(Enum):
    METRE = strawberry.enum_value("METRE", description="Metre")
    CENTIMETRE = strawberry.enum_value("CENTIMETRE", description="Centimetre")
    FOOT = strawberry.enum_value("FOOT", description="Foot (1 foot = 30.48 centimetres)")


@strawberry.enum(description="Weight unit")
class WeightUnit(Enum):
    KILOGRAM = strawberry.enum_value("KILOGRAM", description="Kilogram")
    GRAM = strawberry.enum_value("GRAM", description="Gram")
    POUND = strawberry.enum_value("POUND", description="Pound (1 pound = 0.45359237 kilograms)")


_FROM_CENTIMETRES: dict[HeightUnit, Callable[[float], float]] = {
    HeightUnit.CENTIMETRE: lambda cm: cm,
    HeightUnit.METRE: lambda cm: cm / 100,
    HeightUnit.FOOT: lambda cm: cm / 30.48,
}

_FROM_KILOGRAMS: dict[WeightUnit, Callable[[float], float]] = {
    WeightUnit.KILOGRAM: lambda kg: kg,
    WeightUnit.GRAM: lambda kg: kg * 100,
    WeightUnit.POUND: lambda kg: kg / 0.45359237,
}


def _coerce(enum_cls, unit):
    if isinstance(unit, enum_cls):
        return unit
    if isinstance(unit, str) and unit in enum_cls.__members__:
        return enum_cls[unit]
    return None


def convert_height(centimetres: float, unit: HeightUnit | str | None = None) -> float:
    """Convert a stored height to ``unit`` (CENTIMETRE when None)."""
    if unit is None:
        unit = HeightUnit.CENTIMETRE
    converter = _FROM_CENTIMETRES.get(_coerce(HeightUnit, unit))
    if converter is None:
        raise UnsupportedUnitError("Height", getattr(unit, "value", unit))
    return converter(centimetres)


def convert_weight(kilograms: float, unit: WeightUnit | str | None = None) -> float:
    """Convert a stored weight to ``unit`` (KILOGRAM when None)."""
    if unit is None:
        unit = WeightUnit.KILOGRAM
    converter = _FROM_KILOGRAMS.get(_coerce(WeightUnit, unit))
    if converter is None:
        raise UnsupportedUnitError("Weight", getattr(unit, "value", unit))
    return converter(kilograms)
