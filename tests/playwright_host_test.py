import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sync_api = pytest.importorskip('playwright.sync_api')
from core.errors import ErrorKind, StyleCheckError
from core.style_matcher import StyleMatcher
from core.style_serializer import parse_js_to_css
from host.playwright_host import PlaywrightStyleHost

LABEL_HTML = """
<style>
  .label { color: white; float: left; }
</style>
<div class="label" style="background-color: blue; border-bottom: thick double #32a1ce">Hello World</div>
"""


@pytest.fixture(scope='module')
def page():
    try:
        playwright = sync_api.sync_playwright().start()
    except Exception as e:
        pytest.skip(f'Playwright is not usable here: {e}')
    try:
        browser = playwright.chromium.launch()
    except Exception as e:
        playwright.stop()
        pytest.skip(f'Chromium is not available: {e}')
    page = browser.new_page()
    page.set_content(LABEL_HTML)
    yield page
    browser.close()
    playwright.stop()


@pytest.fixture
def host(page):
    return PlaywrightStyleHost(page)


def test_computed_style_matches_across_color_formats(page, host):
    matcher = StyleMatcher(host)
    label = page.query_selector('.label')
    matcher.assert_has_style(label, 'background-color: blue; color: #fff; float: left')
    matcher.assert_not_has_style(label, 'font-weight: bold')


def test_requested_shorthands_are_read_from_the_browser(page, host):
    label = page.query_selector('.label')
    style = host.get_applied_style(label, properties=['border-bottom'])
    assert 'border-bottom' in style
    assert 'border-bottom-style' in style


def test_sandbox_drops_unknown_properties(host):
    assert parse_js_to_css(host.create_sandbox, {'backgroundColor': 'blue', 'whatever': 'anything'}) == (
        'background-color: blue;')
    assert parse_js_to_css(host.create_sandbox, {'whatever': 'anything'}) == ''


def test_check_element_rejects_non_handles(host):
    with pytest.raises(StyleCheckError) as exc_info:
        host.check_element('div')
    assert exc_info.value.kind is ErrorKind.INVALID_INPUT_TYPE
