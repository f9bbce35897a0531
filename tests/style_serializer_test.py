import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.declaration_parser import parse_css
from core.style_serializer import parse_js_to_css
from host.soup_host import SoupStyleHost
from core.value_normalizer import normalize_value


@pytest.fixture
def host():
    return SoupStyleHost()


def test_valid_styles_become_css_text(host):
    css = parse_js_to_css(host.create_sandbox, {'backgroundColor': 'blue', 'height': '100%'})
    assert css == 'background-color: blue; height: 100%;'


def test_invalid_style_is_dropped(host):
    css = parse_js_to_css(host.create_sandbox, {'backgroundColor': 'blue', 'whatever': 'anything'})
    assert css == 'background-color: blue;'


def test_all_invalid_styles_give_empty_string(host):
    assert parse_js_to_css(host.create_sandbox, {'whatever': 'anything'}) == ''
    assert parse_js_to_css(host.create_sandbox, {}) == ''


def test_numbers_vendor_prefixes_and_float(host):
    css = parse_js_to_css(host.create_sandbox, {
        'opacity': 0.5,
        'zIndex': 2,
        'flexGrow': 1.0,
        'WebkitTransition': 'all 1s',
        'cssFloat': 'left',
    })
    assert css == 'opacity: 0.5; z-index: 2; flex-grow: 1; -webkit-transition: all 1s; float: left;'


def test_empty_values_are_skipped(host):
    css = parse_js_to_css(host.create_sandbox, {'color': None, 'height': '', 'width': '10px'})
    assert css == 'width: 10px;'


def test_sandbox_is_created_per_call():
    created = []

    class RecordingSandbox:
        def __init__(self):
            self.items = []
            created.append(self)

        def set_property(self, name, value):
            self.items.append(f'{name}: {value};')
            return True

        @property
        def css_text(self):
            return ' '.join(self.items)

    assert parse_js_to_css(RecordingSandbox, {'color': 'red'}) == 'color: red;'
    assert parse_js_to_css(RecordingSandbox, {'height': '1px'}) == 'height: 1px;'
    assert len(created) == 2


def test_parse_serialize_parse_round_trip(host):
    text = 'background-color: blue;\n height: 100%; transition: opacity 0.2s ease-out,top 0.3s ease'
    parsed = parse_css(text)
    reparsed = parse_css(parse_js_to_css(host.create_sandbox, parsed))
    assert list(reparsed) == list(parsed)
    for prop in parsed:
        assert normalize_value(prop, reparsed[prop]) == normalize_value(prop, parsed[prop])
