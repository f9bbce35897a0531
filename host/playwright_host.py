"""
Playwright Style Host Module
Live browser host: computed styles and style sandboxes come from a Playwright page.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from playwright.sync_api import ElementHandle, Error as PlaywrightError, Page

from core.errors import StyleCheckError
from .base import StyleHost, StyleSandbox

logger = logging.getLogger(__name__)

IS_STYLEABLE_ELEMENT_JS = """
element => {
  const view = element && element.ownerDocument && element.ownerDocument.defaultView
  return !!view && (element instanceof view.HTMLElement || element instanceof view.SVGElement)
}
"""

COMPUTED_STYLE_JS = """
(element, names) => {
  const style = element.ownerDocument.defaultView.getComputedStyle(element)
  const result = {}
  for (const name of Array.from(style)) {
    result[name] = style.getPropertyValue(name)
  }
  for (const name of names) {
    const value = style.getPropertyValue(name)
    if (value !== '') {
      result[name] = value
    }
  }
  return result
}
"""

ACCEPTS_PROPERTY_JS = """
([name, value]) => {
  const style = document.createElement('div').style
  style.setProperty(name, value)
  return style.getPropertyValue(name) !== ''
}
"""

CSS_TEXT_JS = """
declarations => {
  const style = document.createElement('div').style
  for (const [name, value] of declarations) {
    style.setProperty(name, value)
  }
  return style.cssText
}
"""


class PlaywrightStyleSandbox(StyleSandbox):
    """Sandbox backed by a detached ``div.style`` created in the page for each query."""

    def __init__(self, page: Page):
        self.page = page
        self._declarations: List[Tuple[str, str]] = []

    def set_property(self, name: str, value: str) -> bool:
        if not self.page.evaluate(ACCEPTS_PROPERTY_JS, [name, value]):
            return False
        self._declarations.append((name, value))
        return True

    @property
    def css_text(self) -> str:
        if not self._declarations:
            return ''
        return self.page.evaluate(CSS_TEXT_JS, [list(d) for d in self._declarations])


class PlaywrightStyleHost(StyleHost):
    def __init__(self, page: Page):
        self.page = page

    def check_element(self, element: Any, is_not: bool = False) -> None:
        if not isinstance(element, ElementHandle):
            raise StyleCheckError.invalid_element(element, is_not=is_not)
        try:
            styleable = element.evaluate(IS_STYLEABLE_ELEMENT_JS)
        except PlaywrightError as e:
            logger.error(f"Error checking element handle: {str(e)}", exc_info=True)
            raise
        if not styleable:
            raise StyleCheckError.invalid_element(element, is_not=is_not)

    def get_applied_style(self, element: ElementHandle,
                          properties: Optional[Iterable[str]] = None) -> Dict[str, str]:
        names = [name if name.startswith('--') else name.lower() for name in (properties or [])]
        try:
            style = element.evaluate(COMPUTED_STYLE_JS, names)
        except PlaywrightError as e:
            logger.error(f"Error reading computed style: {str(e)}", exc_info=True)
            raise
        logger.debug(f"Computed style has {len(style)} properties")
        return style

    def create_sandbox(self) -> StyleSandbox:
        return PlaywrightStyleSandbox(self.page)
