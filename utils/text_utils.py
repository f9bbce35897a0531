"""
Text Utilities Module
Common string helpers shared by the parser, serializer and report builder.
"""

import re
import textwrap
from typing import Dict

# Vendor prefixes written capitalized in style objects (WebkitTransition -> -webkit-transition)
VENDOR_PREFIXES = ('Webkit', 'Moz', 'ms', 'O')

# Style object names that do not follow the camelCase rule
SPECIAL_STYLE_NAMES = {
    'cssFloat': 'float',
    'styleFloat': 'float',
}

_WHITESPACE_RE = re.compile(r'\s+')
_UPPER_RE = re.compile(r'[A-Z]')


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace into a single space and trim the ends."""
    return _WHITESPACE_RE.sub(' ', text).strip()


def camel_to_kebab(name: str) -> str:
    """
    Convert a style object property name to its CSS spelling.

    Args:
        name: camelCase name such as ``backgroundColor`` or ``WebkitTransition``

    Returns:
        The kebab-case CSS property name
    """
    if name in SPECIAL_STYLE_NAMES:
        return SPECIAL_STYLE_NAMES[name]
    # Custom properties and names already written in CSS form
    if name.startswith('--') or '-' in name:
        return name
    for prefix in VENDOR_PREFIXES:
        if name.startswith(prefix) and len(name) > len(prefix) and name[len(prefix)].isupper():
            rest = _UPPER_RE.sub(lambda m: f'-{m.group(0).lower()}', name[len(prefix):])
            return f'-{prefix.lower()}{rest}'
    return _UPPER_RE.sub(lambda m: f'-{m.group(0).lower()}', name)


def redent(text: str, indent: int = 2) -> str:
    """Strip the common leading indentation of a block and indent it by ``indent`` spaces."""
    stripped = textwrap.dedent(text).strip('\n')
    return textwrap.indent(stripped, ' ' * indent)


def print_declarations(declarations: Dict[str, str]) -> str:
    """Render a declaration mapping as sorted ``prop: value;`` lines."""
    return '\n'.join(f'{prop}: {declarations[prop]};' for prop in sorted(declarations))
