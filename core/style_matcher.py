"""
Style Matcher Module
Asserts that an element's applied style contains an expected set of declarations.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Union

from comparator.report_builder import ReportBuilder
from host.base import StyleHost
from utils.text_utils import camel_to_kebab
from .config import DEFAULT_CONFIG, MatcherConfig
from .declaration_parser import DeclarationParser
from .errors import StyleCheckError
from .style_equivalence import DeclarationMismatch, MatchResult, StyleComparator
from .style_serializer import parse_js_to_css, style_value
from .value_normalizer import ValueNormalizer

logger = logging.getLogger(__name__)

ExpectedStyle = Union[str, Mapping]


@dataclass
class StyleAssertion:
    passed: bool
    is_not: bool
    result: MatchResult
    expected: Dict[str, str] = field(default_factory=dict)
    received: Dict[str, str] = field(default_factory=dict)
    _render: Optional[Callable[[], str]] = field(default=None, repr=False)

    def message(self) -> str:
        return self._render() if self._render else ''


class StyleMatcher:
    def __init__(self, host: StyleHost,
                 config: Optional[MatcherConfig] = None,
                 formatter: Optional[ReportBuilder] = None):
        self.host = host
        self.config = config or DEFAULT_CONFIG
        self.parser = DeclarationParser()
        self.comparator = StyleComparator(ValueNormalizer(self.config))
        self.formatter = formatter or ReportBuilder(self.config)

    def parse_expected(self, css: ExpectedStyle) -> Dict[str, str]:
        """Expected declarations from CSS text or from a camelCase style mapping."""
        if isinstance(css, str):
            return self.parser.parse(css)
        if isinstance(css, Mapping):
            return self.parser.parse(parse_js_to_css(self.host.create_sandbox, css))
        raise StyleCheckError.invalid_expected(css)

    def to_have_style(self, element: Any, css: ExpectedStyle, is_not: bool = False) -> StyleAssertion:
        """
        Evaluate the assertion. ``passed`` already accounts for ``is_not``.

        Invalid elements and unparseable CSS raise StyleCheckError for both
        polarities; a mismatch is only reported through the returned value.
        """
        self.host.check_element(element, is_not=is_not)
        expected = self.parse_expected(css)
        actual = self.host.get_applied_style(element, properties=list(expected))
        rejected = {}
        if not expected and isinstance(css, Mapping):
            # empty values are skipped by the serializer, the rest were refused by the host
            rejected = {camel_to_kebab(name): style_value(value) for name, value in css.items()
                        if style_value(value)}
        if rejected:
            expected = rejected
            result = MatchResult(passed=False, mismatches=[
                DeclarationMismatch(prop, value, None) for prop, value in expected.items()])
        else:
            result = self.comparator.compare(actual, expected)
        passed = result.passed != is_not
        logger.info(f"toHaveStyle{' (negated)' if is_not else ''}: "
                    f"{'pass' if passed else 'fail'}, {len(result.mismatches)} mismatched declarations")

        def render() -> str:
            return self.formatter.build_message(result, expected, is_not=is_not)

        return StyleAssertion(passed, is_not, result, expected, dict(result.received), render)

    def assert_has_style(self, element: Any, css: ExpectedStyle) -> StyleAssertion:
        assertion = self.to_have_style(element, css)
        if not assertion.passed:
            raise AssertionError(assertion.message())
        return assertion

    def assert_not_has_style(self, element: Any, css: ExpectedStyle) -> StyleAssertion:
        assertion = self.to_have_style(element, css, is_not=True)
        if not assertion.passed:
            raise AssertionError(assertion.message())
        return assertion


def _default_host() -> StyleHost:
    from host.soup_host import SoupStyleHost
    return SoupStyleHost()


def to_have_style(element: Any, css: ExpectedStyle, host: Optional[StyleHost] = None,
                  is_not: bool = False) -> StyleAssertion:
    return StyleMatcher(host or _default_host()).to_have_style(element, css, is_not=is_not)


def assert_has_style(element: Any, css: ExpectedStyle, host: Optional[StyleHost] = None) -> StyleAssertion:
    return StyleMatcher(host or _default_host()).assert_has_style(element, css)


def assert_not_has_style(element: Any, css: ExpectedStyle, host: Optional[StyleHost] = None) -> StyleAssertion:
    return StyleMatcher(host or _default_host()).assert_not_has_style(element, css)
