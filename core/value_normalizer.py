"""
Value Normalizer Module
Canonicalizes CSS values that have several spellings for the same meaning.

Colors (hex, rgb(), rgba(), hsl(), named keywords, comma or space syntax)
become ``rgba(R, G, B, A)``.
Other values are compared as normalized token text: collapsed whitespace,
lower-cased keywords, function names and units, and integral numbers
without a fractional part.
"""

import logging
from typing import List, Optional

import tinycss2
import tinycss2.color4

from .config import DEFAULT_CONFIG, MatcherConfig
from utils.text_utils import normalize_whitespace

logger = logging.getLogger(__name__)

# Properties other than color / *-color whose values may embed colors
COLOR_COMPOSITE_PROPERTIES = frozenset({
    'background', 'background-image',
    'border', 'border-top', 'border-right', 'border-bottom', 'border-left',
    'border-block', 'border-block-start', 'border-block-end',
    'border-inline', 'border-inline-start', 'border-inline-end',
    'outline', 'column-rule', 'text-decoration', 'text-emphasis',
    'box-shadow', 'text-shadow', 'fill', 'stroke', 'caret',
})

SEPARATORS = {',': ', ', '/': ' / '}

_BLOCK_DELIMITERS = {
    '() block': ('(', ')'),
    '[] block': ('[', ']'),
    '{} block': ('{', '}'),
}


def is_color_bearing(property_name: str) -> bool:
    name = property_name.lower()
    if name.startswith('--'):
        return False
    return name == 'color' or name.endswith('-color') or name in COLOR_COMPOSITE_PROPERTIES


def format_rgba(rgba) -> str:
    red, green, blue = (round(min(max(channel, 0.0), 1.0) * 255) for channel in rgba[:3])
    alpha = round(rgba[3], 4)
    return f'rgba({red}, {green}, {blue}, {alpha:g})'


def _color_text(token_or_text) -> Optional[str]:
    color = tinycss2.color4.parse_color(token_or_text)
    if color is None:
        return None
    if isinstance(color, str):
        # currentcolor
        return color.lower()
    try:
        return format_rgba(color.to('srgb'))
    except NotImplementedError:
        # lab(), lch(), oklab() and color() spaces have no sRGB conversion here
        coordinates = ' '.join(f'{c:g}' for c in color.to(color.space).coordinates)
        return f'color({color.space} {coordinates} / {round(color.alpha, 4):g})'


def normalize_color(value: str) -> Optional[str]:
    """Canonical RGBA text of a single color value, or None when the value is not a color."""
    return _color_text(value.strip())


def colors_equal(first: str, second: str) -> bool:
    first_color = normalize_color(first)
    return first_color is not None and first_color == normalize_color(second)


def _format_number(token) -> str:
    value = float(token.value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class ValueNormalizer:
    def __init__(self, config: Optional[MatcherConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def normalize(self, property_name: str, value: str) -> str:
        """Canonical form of ``value`` as a value of ``property_name``."""
        if value is None:
            return value
        if property_name.startswith('--'):
            # custom properties are arbitrary, case-sensitive token streams
            return normalize_whitespace(value) if self.config.collapse_whitespace else value.strip()
        tokens = tinycss2.parse_component_value_list(value, skip_comments=True)
        colors = self.config.normalize_colors and is_color_bearing(property_name)
        return self._join(self._serialize(tokens, colors))

    def equal(self, property_name: str, first: str, second: str) -> bool:
        return self.normalize(property_name, first) == self.normalize(property_name, second)

    def _serialize(self, tokens, colors: bool) -> List[str]:
        parts = []
        lower = self.config.lowercase_keywords
        for token in tokens:
            if token.type == 'comment':
                continue
            if token.type == 'whitespace':
                parts.append(' ' if self.config.collapse_whitespace else token.value)
                continue
            if colors:
                color = _color_text(token)
                if color is not None:
                    parts.append(color)
                    continue
            if token.type == 'ident':
                parts.append(token.lower_value if lower else token.value)
            elif token.type == 'number':
                parts.append(_format_number(token))
            elif token.type == 'percentage':
                parts.append(f'{_format_number(token)}%')
            elif token.type == 'dimension':
                parts.append(f'{_format_number(token)}{token.lower_unit if lower else token.unit}')
            elif token.type == 'function':
                name = token.lower_name if lower else token.name
                parts.append(f'{name}({self._join(self._serialize(token.arguments, colors))})')
            elif token.type in _BLOCK_DELIMITERS:
                start, end = _BLOCK_DELIMITERS[token.type]
                parts.append(f'{start}{self._join(self._serialize(token.content, colors))}{end}')
            elif token.type == 'literal':
                parts.append(token.value)
            else:
                parts.append(token.serialize())
        return parts

    def _join(self, parts: List[str]) -> str:
        if not self.config.collapse_whitespace:
            return ''.join(parts).strip()
        # separators get fixed spacing, no doubled spaces
        result = []
        for part in parts:
            if part == ' ':
                if not result or result[-1] == ' ' or result[-1] in SEPARATORS:
                    continue
                result.append(part)
            elif part in SEPARATORS:
                if result and result[-1] == ' ':
                    result.pop()
                result.append(part)
            else:
                result.append(part)
        return ''.join(SEPARATORS.get(part, part) for part in result).strip()


_normalizer = ValueNormalizer()


def normalize_value(property_name: str, value: str) -> str:
    """Module-level shortcut using the default settings."""
    return _normalizer.normalize(property_name, value)
