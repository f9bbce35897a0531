"""
Style Check Errors Module
A single exception type tagged with the kind of failure.
"""

from enum import Enum
from typing import Any, List, Optional


class ErrorKind(Enum):
    INVALID_INPUT_TYPE = 'invalid-input-type'
    CSS_SYNTAX = 'css-syntax'
    INVALID_EXPECTED = 'invalid-expected'


class StyleCheckError(Exception):
    """
    Raised when a style assertion cannot be evaluated at all.

    A mismatch between expected and actual styles is never reported through
    this exception; callers receive a negative MatchResult instead.
    """

    def __init__(self, kind: ErrorKind, message: str, *,
                 received: Any = None,
                 css: Optional[str] = None,
                 reason: Optional[str] = None,
                 line: Optional[int] = None,
                 errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.received = received
        self.css = css
        self.reason = reason
        self.line = line
        self.errors = errors or []

    @classmethod
    def invalid_element(cls, received: Any, matcher: str = 'toHaveStyle', is_not: bool = False) -> 'StyleCheckError':
        hint = f"expect(received).{'not.' if is_not else ''}{matcher}()"
        message = '\n'.join([
            hint,
            '',
            'received value must be an HTMLElement or an SVGElement.',
            f'Received has type:  {type(received).__name__}',
        ])
        return cls(ErrorKind.INVALID_INPUT_TYPE, message, received=received)

    @classmethod
    def invalid_css(cls, css: str, reason: str, line: Optional[int], errors: Optional[List[Any]] = None) -> 'StyleCheckError':
        message = f'Syntax error parsing expected css: {reason} on line: {line}'
        return cls(ErrorKind.CSS_SYNTAX, message, css=css, reason=reason, line=line, errors=errors)

    @classmethod
    def invalid_expected(cls, received: Any) -> 'StyleCheckError':
        message = f'expected styles must be CSS text or a style mapping, got {type(received).__name__}'
        return cls(ErrorKind.INVALID_EXPECTED, message, received=received)

    def __str__(self) -> str:
        if self.kind is ErrorKind.CSS_SYNTAX:
            return '\n'.join([self.message, '', 'Failing css:', self.css or ''])
        return self.message
