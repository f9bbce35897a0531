import sys
import os
import json
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from comparator.report_builder import ReportBuilder
from core.config import MatcherConfig
from core.style_equivalence import compare_styles

ACTUAL = {'color': 'white', 'background-color': 'blue', 'height': '100%'}


def test_build_message_for_missing_and_different_values():
    expected = {'font-weight': 'bold', 'color': 'red'}
    result = compare_styles(ACTUAL, expected)
    message = ReportBuilder().build_message(result, expected)
    assert message == '\n'.join([
        'expect(element).toHaveStyle()',
        '',
        '- Expected',
        '+ Received',
        '',
        '- color: red;',
        '- font-weight: bold;',
        '+ color: white;',
    ])


def test_build_message_keeps_matching_lines_as_context():
    expected = {'background-color': 'blue', 'color': 'red'}
    result = compare_styles(ACTUAL, expected)
    message = ReportBuilder().build_message(result, expected)
    assert '  background-color: blue;' in message
    assert '- color: red;' in message
    assert '+ color: white;' in message


def test_build_message_negated():
    expected = {'color': 'white'}
    result = compare_styles(ACTUAL, expected)
    message = ReportBuilder().build_message(result, expected, is_not=True)
    assert message == '\n'.join([
        'expect(element).not.toHaveStyle()',
        '',
        'Expected the element not to have style:',
        '  color: white;',
        'Received:',
        '  color: white;',
    ])


def test_indent_follows_config():
    expected = {'color': 'white'}
    result = compare_styles(ACTUAL, expected)
    message = ReportBuilder(MatcherConfig(indent=4)).build_message(result, expected, is_not=True)
    assert '\n    color: white;' in message


def test_get_message():
    message = ReportBuilder().get_message('.toHaveClass', 'Expected', 'foo', 'Received', ['bar'])
    assert message == ".toHaveClass\n\nExpected:\n  foo\nReceived:\n  ['bar']"


def test_build_report_and_json_output(tmp_path):
    expected = {'color': 'white', 'font-weight': 'bold'}
    result = compare_styles(ACTUAL, expected)
    builder = ReportBuilder()
    report = builder.build_report(result, expected)
    assert report['passed'] is False
    assert report['expected'] == expected
    assert report['received'] == {'color': 'white'}

    path = builder.generate_json_report(result, expected, tmp_path / 'report.json')
    assert json.loads(path.read_text(encoding='utf-8')) == report


def test_build_message_matches_property_names_case_insensitively():
    expected = {'Align-items': 'center', 'Color': 'red'}
    actual = {'align-items': 'center', 'color': 'white'}
    result = compare_styles(actual, expected)
    message = ReportBuilder().build_message(result, expected)
    assert '  align-items: center;' in message
    assert '- align-items' not in message
    assert '- color: red;' in message
    assert '+ color: white;' in message
