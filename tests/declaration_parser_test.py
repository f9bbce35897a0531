import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.declaration_parser import DeclarationParser, parse_css
from core.errors import ErrorKind, StyleCheckError


def test_parse_multiline_block():
    css = """
          height: 100%;
          color: white;
          background-color: blue;
        """
    assert parse_css(css) == {'height': '100%', 'color': 'white', 'background-color': 'blue'}


def test_parse_keeps_declaration_order():
    parsed = parse_css('color: white; height: 100%; background-color: blue')
    assert list(parsed) == ['color', 'height', 'background-color']


def test_parse_with_and_without_trailing_semicolon():
    assert parse_css('background-color: blue') == {'background-color': 'blue'}
    assert parse_css('background-color: blue;') == {'background-color': 'blue'}
    assert parse_css('background-color:blue;color:white') == {'background-color': 'blue', 'color': 'white'}


def test_parse_empty_input():
    parser = DeclarationParser()
    assert parser.parse('') == {}
    assert parser.parse('   \n\t  ') == {}


def test_parse_ignores_comments():
    assert parse_css('/* heading */ color: red; /* trailing */') == {'color': 'red'}


def test_parse_preserves_property_name_case():
    assert parse_css('Align-items: center;') == {'Align-items': 'center'}


def test_parse_last_declaration_wins():
    css = """
        transition-property: opacity;
        transition-duration: 0.2s;
        transition-property: top;
    """
    parsed = parse_css(css)
    assert parsed['transition-property'] == 'top'
    assert len(parsed) == 2


def test_parse_compound_values():
    css = 'transition: opacity 0.2s ease-out, top 0.3s cubic-bezier(1.175, 0.885, 0.32, 1.275);'
    assert parse_css(css) == {
        'transition': 'opacity 0.2s ease-out, top 0.3s cubic-bezier(1.175, 0.885, 0.32, 1.275)'
    }


def test_parse_important_is_kept_in_value():
    assert parse_css('color: red !important') == {'color': 'red !important'}


def test_missing_colon_raises_syntax_error():
    with pytest.raises(StyleCheckError) as exc_info:
        parse_css('font-weight bold')
    err = exc_info.value
    assert err.kind is ErrorKind.CSS_SYNTAX
    assert err.line == 1
    assert err.css == 'font-weight bold'
    assert err.reason
    assert err.message == f'Syntax error parsing expected css: {err.reason} on line: 1'


def test_syntax_error_message_shows_failing_css():
    with pytest.raises(StyleCheckError) as exc_info:
        parse_css('color white')
    text = str(exc_info.value)
    assert text.startswith('Syntax error parsing expected css:')
    assert 'Failing css:' in text
    assert text.endswith('color white')


def test_syntax_error_reports_line_of_first_error():
    css = 'color: red;\nfont-weight bold;\nheight 10px;'
    with pytest.raises(StyleCheckError) as exc_info:
        parse_css(css)
    err = exc_info.value
    assert err.line == 2
    assert len(err.errors) == 2
