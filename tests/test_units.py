import pytest

from blog_graph.core.exceptions import UnsupportedUnitError
from blog_graph.graphql.units import HeightUnit, WeightUnit, convert_height, convert_weight


def test_height_defaults_to_centimetres():
    assert convert_height(175) == convert_height(175, HeightUnit.CENTIMETRE) == 175


def test_height_conversions():
    cm = convert_height(180, HeightUnit.CENTIMETRE)
    assert convert_height(180, HeightUnit.METRE) * 100 == pytest.approx(cm)
    assert convert_height(180, HeightUnit.FOOT) * 30.48 == pytest.approx(cm)


def test_weight_defaults_to_kilograms():
    assert convert_weight(75) == convert_weight(75, WeightUnit.KILOGRAM) == 75


def test_weight_conversions():
    kg = convert_weight(80, WeightUnit.KILOGRAM)
    assert convert_weight(80, WeightUnit.GRAM) == pytest.approx(kg * 100)
    assert convert_weight(80, WeightUnit.POUND) * 0.45359237 == pytest.approx(kg)


def test_unit_names_are_accepted():
    assert convert_height(175, "METRE") == pytest.approx(1.75)
    assert convert_weight(75, "GRAM") == pytest.approx(7500)


def test_unknown_height_unit():
    with pytest.raises(UnsupportedUnitError, match='Height unit "INCH" not supported.'):
        convert_height(175, "INCH")


def test_unknown_weight_unit():
    with pytest.raises(UnsupportedUnitError, match='Weight unit "STONE" not supported.'):
        convert_weight(75, "STONE")


def test_units_are_not_interchangeable():
    with pytest.raises(UnsupportedUnitError):
        convert_height(175, WeightUnit.KILOGRAM)
