"""
Property Classifier Module
Classifies CSS property names as shorthand or longhand using a fixed table.

Lookups are exact string matches. Many shorthand names are prefixes of
unrelated properties (``grid`` / ``grid-area`` / ``grid-row-start``), so the
relationship is never derived from the name.
"""

from enum import Enum
from types import MappingProxyType
from typing import Tuple


class PropertyKind(Enum):
    SHORTHAND = 'shorthand'
    LONGHAND = 'longhand'


_SIDES = ('top', 'right', 'bottom', 'left')

# shorthand -> the longhands it sets
SHORTHAND_LONGHANDS = MappingProxyType({
    'animation': (
        'animation-duration', 'animation-timing-function', 'animation-delay',
        'animation-iteration-count', 'animation-direction', 'animation-fill-mode',
        'animation-play-state', 'animation-name',
    ),
    'background': (
        'background-image', 'background-position', 'background-size', 'background-repeat',
        'background-origin', 'background-clip', 'background-attachment', 'background-color',
    ),
    # border(-*) names do not always concatenate their longhand names
    'border': ('border-width', 'border-style', 'border-color'),
    'border-bottom': ('border-bottom-width', 'border-bottom-style', 'border-bottom-color'),
    'border-color': tuple(f'border-{side}-color' for side in _SIDES),
    'border-left': ('border-left-width', 'border-left-style', 'border-left-color'),
    'border-radius': (
        'border-top-left-radius', 'border-top-right-radius',
        'border-bottom-right-radius', 'border-bottom-left-radius',
    ),
    'border-right': ('border-right-width', 'border-right-style', 'border-right-color'),
    'border-style': tuple(f'border-{side}-style' for side in _SIDES),
    'border-top': ('border-top-width', 'border-top-style', 'border-top-color'),
    'border-width': tuple(f'border-{side}-width' for side in _SIDES) + (
        'border-block-start-width', 'border-block-end-width',
        'border-inline-start-width', 'border-inline-end-width',
    ),
    'column-rule': ('column-rule-width', 'column-rule-style', 'column-rule-color'),
    'columns': ('column-width', 'column-count'),
    'flex': ('flex-grow', 'flex-shrink', 'flex-basis'),
    'flex-flow': ('flex-direction', 'flex-wrap'),
    'font': (
        'font-style', 'font-variant', 'font-weight', 'font-stretch',
        'font-size', 'line-height', 'font-family',
    ),
    'grid': (
        'grid-template-rows', 'grid-template-columns', 'grid-template-areas',
        'grid-auto-rows', 'grid-auto-columns', 'grid-auto-flow',
        'grid-column-gap', 'grid-row-gap', 'gap',
    ),
    'grid-area': ('grid-row-start', 'grid-column-start', 'grid-row-end', 'grid-column-end'),
    'grid-column': ('grid-column-start', 'grid-column-end'),
    'grid-row': ('grid-row-start', 'grid-row-end'),
    'grid-template': ('grid-template-columns', 'grid-template-rows', 'grid-template-areas'),
    'list-style': ('list-style-type', 'list-style-position', 'list-style-image'),
    'margin': tuple(f'margin-{side}' for side in _SIDES),
    'offset': ('offset-position', 'offset-path', 'offset-distance', 'offset-rotate', 'offset-anchor'),
    'outline': ('outline-style', 'outline-width', 'outline-color'),
    'overflow': ('overflow-x', 'overflow-y'),
    'padding': tuple(f'padding-{side}' for side in _SIDES),
    # place-* set align-* / justify-*
    'place-content': ('align-content', 'justify-content'),
    'place-items': ('align-items', 'justify-items'),
    'place-self': ('align-self', 'justify-self'),
    'text-decoration': (
        'text-decoration-line', 'text-decoration-color',
        'text-decoration-style', 'text-decoration-thickness',
    ),
    'transition': (
        'transition-property', 'transition-duration',
        'transition-timing-function', 'transition-delay',
    ),
})

SHORTHAND_PROPERTIES = frozenset(SHORTHAND_LONGHANDS)

# Shorthands whose longhand spelling never compares equal to the shorthand
BORDER_FAMILY = frozenset({
    'border', 'border-top', 'border-right', 'border-bottom', 'border-left',
    'border-width', 'border-style', 'border-color',
})


def classify(name: str) -> PropertyKind:
    if name in SHORTHAND_PROPERTIES:
        return PropertyKind.SHORTHAND
    return PropertyKind.LONGHAND


def is_shorthand(name: str) -> bool:
    return classify(name) is PropertyKind.SHORTHAND


def longhands_of(name: str) -> Tuple[str, ...]:
    """Documented longhands of a shorthand, empty for a longhand. Used for diagnostics only."""
    return SHORTHAND_LONGHANDS.get(name, ())


def is_border_family(name: str) -> bool:
    return name in BORDER_FAMILY
