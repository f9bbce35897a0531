"""
Declaration Parser Module
Parses a CSS declaration block fragment into an ordered property/value mapping.
"""

import logging
from typing import Dict, List

import tinycss2

from .errors import StyleCheckError

logger = logging.getLogger(__name__)

# The fragment is parsed as the body of this rule so the full stylesheet grammar applies
SYNTHETIC_SELECTOR = 'selector'


class DeclarationParser:
    def parse(self, css: str) -> Dict[str, str]:
        """
        Parse ``property: value;`` statements into a dict.

        The last declaration of a repeated property wins. Comments and nested
        at-rules are ignored. Raises StyleCheckError (CSS_SYNTAX) carrying the
        first error tinycss2 reports.
        """
        if not css or not css.strip():
            return {}

        logger.debug(f"Parsing expected css, length: {len(css)}")
        stylesheet = tinycss2.parse_stylesheet(
            f'{SYNTHETIC_SELECTOR} {{ {css} }}', skip_comments=True, skip_whitespace=True)

        errors = [node for node in stylesheet if node.type == 'error']
        rules = [node for node in stylesheet if node.type == 'qualified-rule']
        declarations = []
        if rules:
            declarations = tinycss2.parse_declaration_list(
                rules[0].content, skip_comments=True, skip_whitespace=True)
            errors = [node for node in declarations if node.type == 'error'] + errors

        if errors:
            self._raise_first(css, errors)

        parsed = {}
        for decl in declarations:
            if decl.type != 'declaration':
                continue
            value = tinycss2.serialize(decl.value).strip()
            if decl.important:
                value = f'{value} !important'.strip()
            parsed[decl.name] = value
        logger.debug(f"Parsed {len(parsed)} declarations")
        return parsed

    def _raise_first(self, css: str, errors: List) -> None:
        first = min(errors, key=lambda e: (e.source_line, e.source_column))
        logger.debug(f"Expected css has {len(errors)} syntax error(s), first: {first.message}")
        raise StyleCheckError.invalid_css(css, first.message, first.source_line, errors=errors)


_parser = DeclarationParser()


def parse_css(css: str) -> Dict[str, str]:
    """Module-level shortcut for DeclarationParser().parse."""
    return _parser.parse(css)
