import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.property_classifier import (
    BORDER_FAMILY, SHORTHAND_PROPERTIES, PropertyKind, classify, is_border_family,
    is_shorthand, longhands_of,
)


def test_regular_shorthand_and_longhand():
    assert is_shorthand('background')
    assert not is_shorthand('background-position')


def test_irregular_concatenation_is_exact_match():
    assert classify('border') is PropertyKind.SHORTHAND
    assert classify('border-top-color') is PropertyKind.LONGHAND
    assert classify('grid-area') is PropertyKind.SHORTHAND
    assert classify('grid-row-start') is PropertyKind.LONGHAND


@pytest.mark.parametrize('shorthand, longhands', [
    ('place-content', ('align-content', 'justify-content')),
    ('place-items', ('align-items', 'justify-items')),
    ('place-self', ('align-self', 'justify-self')),
])
def test_place_shorthands(shorthand, longhands):
    assert is_shorthand(shorthand)
    assert longhands_of(shorthand) == longhands
    for longhand in longhands:
        assert not is_shorthand(longhand)


def test_grid_area_longhands_are_not_suffixes():
    assert longhands_of('grid-area') == (
        'grid-row-start', 'grid-column-start', 'grid-row-end', 'grid-column-end')


def test_prefix_of_shorthand_is_not_shorthand():
    assert is_shorthand('grid')
    assert not is_shorthand('gri')
    assert not is_shorthand('grid-')
    assert not is_shorthand('transition-property')
    assert not is_shorthand('margins')


def test_classification_is_case_sensitive():
    assert not is_shorthand('Border')


def test_longhand_has_no_longhands():
    assert longhands_of('color') == ()


def test_border_family():
    assert is_border_family('border-bottom')
    assert is_border_family('border-color')
    assert not is_border_family('border-radius')
    assert BORDER_FAMILY <= SHORTHAND_PROPERTIES


def test_table_is_immutable():
    with pytest.raises(AttributeError):
        SHORTHAND_PROPERTIES.add('color')
