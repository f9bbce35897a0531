"""
Report Builder Module
Renders assertion failure messages and reports from style match results.
"""

import difflib
import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from jinja2 import DictLoader, Environment

from core.config import DEFAULT_CONFIG, MatcherConfig
from core.style_equivalence import MatchResult, property_key
from utils.text_utils import print_declarations, redent

TEMPLATES = {
    'style_message': (
        "{{ hint }}\n"
        "\n"
        "{% if diff -%}\n"
        "- Expected\n"
        "+ Received\n"
        "\n"
        "{{ diff }}\n"
        "{%- else -%}\n"
        "Expected the element {{ 'not ' if is_not else '' }}to have style:\n"
        "{{ expected }}\n"
        "Received:\n"
        "{{ received }}\n"
        "{%- endif %}"
    ),
    'message': (
        "{{ matcher }}\n"
        "\n"
        "{{ expected_label }}:\n"
        "{{ expected }}\n"
        "{{ received_label }}:\n"
        "{{ received }}"
    ),
}


def display(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


class ReportBuilder:
    def __init__(self, config: Optional[MatcherConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.env = Environment(loader=DictLoader(TEMPLATES), autoescape=False)

    def matcher_hint(self, matcher: str = 'toHaveStyle', is_not: bool = False) -> str:
        return f"expect(element).{'not.' if is_not else ''}{matcher}()"

    def style_diff(self, expected: Mapping[str, str], received: Mapping[str, str]) -> str:
        """Line diff of the sorted ``prop: value;`` printouts, without file headers."""
        lines = difflib.unified_diff(
            print_declarations(expected).splitlines(),
            print_declarations(received).splitlines(),
            lineterm='',
            n=self.config.diff_context_lines,
        )
        body = [line for line in lines if not line.startswith(('---', '+++', '@@'))]
        return '\n'.join(f'{line[0]} {line[1:]}' for line in body)

    def build_message(self, result: MatchResult, expected: Mapping[str, str],
                      received: Optional[Mapping[str, str]] = None, is_not: bool = False) -> str:
        """
        Failure message for a style assertion.

        ``received`` defaults to the actual values the comparison looked up,
        so the diff only shows properties that were expected.
        """
        received = result.received if received is None else received
        # received is keyed by lookup name, so expected must be too
        expected = {property_key(prop): value for prop, value in expected.items()}
        received = {property_key(prop): value for prop, value in received.items()}
        diff = '' if is_not else self.style_diff(expected, received)
        template = self.env.get_template('style_message')
        return template.render(
            hint=self.matcher_hint(is_not=is_not),
            diff=diff,
            is_not=is_not,
            expected=redent(print_declarations(expected), self.config.indent),
            received=redent(print_declarations(received), self.config.indent),
        )

    def get_message(self, matcher: str, expected_label: str, expected_value: Any,
                    received_label: str, received_value: Any) -> str:
        """Generic two-sided message: matcher line, then labelled expected and received values."""
        template = self.env.get_template('message')
        return template.render(
            matcher=matcher,
            expected_label=expected_label,
            expected=redent(display(expected_value), self.config.indent),
            received_label=received_label,
            received=redent(display(received_value), self.config.indent),
        )

    def build_report(self, result: MatchResult, expected: Mapping[str, str]) -> Dict:
        report = result.to_dict()
        report['expected'] = dict(expected)
        report['received'] = dict(result.received)
        return report

    def generate_json_report(self, result: MatchResult, expected: Mapping[str, str],
                             output_path: Union[str, Path]) -> Path:
        """Write the report of one assertion as JSON."""
        path = Path(output_path)
        path.write_text(json.dumps(self.build_report(result, expected), indent=2), encoding='utf-8')
        return path
