"""
Soup Style Host Module
Static style host for BeautifulSoup documents.

Applied style is a simplified cascade: declarations from the document's
<style> elements whose selectors match the element, ordered by importance,
specificity and source order, with the inline style attribute applied after
normal sheet declarations and again after important ones.
"""

import logging
import re
from typing import Any, Dict, Iterable, List, Optional, Tuple

import soupsieve
import tinycss2
from bs4 import BeautifulSoup
from bs4.element import Tag

from core.errors import StyleCheckError
from core.style_equivalence import property_key
from .base import StyleHost, StyleSandbox
from .known_properties import is_known_property

logger = logging.getLogger(__name__)

Specificity = Tuple[int, int, int]

# Group rules whose contents always apply in a static document
CONDITIONAL_AT_RULES = {'media', 'supports', 'layer'}

INLINE_SPECIFICITY: Specificity = (0, 0, 0)


class SoupStyleSandbox(StyleSandbox):
    def __init__(self):
        self._declarations: Dict[str, str] = {}

    def set_property(self, name: str, value: str) -> bool:
        if not is_known_property(name):
            return False
        tokens = tinycss2.parse_component_value_list(value)
        for token in tokens:
            if token.type in ('error', '{} block') or (token.type == 'literal' and token.value == ';'):
                logger.debug(f"Rejecting value for {name}: {value!r}")
                return False
        self._declarations[name] = value
        return True

    @property
    def css_text(self) -> str:
        return ' '.join(f'{prop}: {value};' for prop, value in self._declarations.items())


class SoupStyleHost(StyleHost):
    def check_element(self, element: Any, is_not: bool = False) -> None:
        if (not isinstance(element, Tag) or isinstance(element, BeautifulSoup)
                or self.owner_document(element) is None):
            raise StyleCheckError.invalid_element(element, is_not=is_not)

    def owner_document(self, element: Tag) -> Optional[BeautifulSoup]:
        """The BeautifulSoup document the element is attached to, if any."""
        node = element
        while node.parent is not None:
            node = node.parent
        return node if isinstance(node, BeautifulSoup) else None

    def create_sandbox(self) -> StyleSandbox:
        return SoupStyleSandbox()

    def get_applied_style(self, element: Tag, properties: Optional[Iterable[str]] = None) -> Dict[str, str]:
        document = self.owner_document(element)
        candidates = []
        order = 0

        for style_tag in document.find_all('style'):
            css = style_tag.string or ''
            for selector, weight, content in self._matching_rules(css, element):
                for name, value, important in self._declarations(content):
                    order += 1
                    candidates.append(((important, 0, weight, order), name, value))
                logger.debug(f"Rule '{selector}' applies with specificity {weight}")

        inline = element.get('style')
        if inline:
            for name, value, important in self._declarations(inline):
                order += 1
                candidates.append(((important, 1, INLINE_SPECIFICITY, order), name, value))

        candidates.sort(key=lambda candidate: candidate[0])
        applied = {}
        for _, name, value in candidates:
            applied[name] = value
        logger.debug(f"Applied style for <{element.name}>: {len(applied)} properties")
        return applied

    def _matching_rules(self, css: str, element: Tag):
        """Yield (selector, specificity, content) for every rule matching ``element``."""
        stylesheet = tinycss2.parse_stylesheet(css, skip_comments=True, skip_whitespace=True)
        for rule in self._style_rules(stylesheet):
            best = None
            for selector in self._split_selector_list(rule.prelude):
                if self._matches(selector, element):
                    weight = self.specificity(selector)
                    best = weight if best is None else max(best, weight)
            if best is not None:
                yield tinycss2.serialize(rule.prelude).strip(), best, rule.content

    def _style_rules(self, nodes) -> Iterable:
        for rule in nodes:
            if rule.type == 'qualified-rule':
                yield rule
            elif rule.type == 'at-rule' and rule.lower_at_keyword in CONDITIONAL_AT_RULES and rule.content:
                nested = tinycss2.parse_rule_list(rule.content, skip_comments=True, skip_whitespace=True)
                yield from self._style_rules(nested)
            elif rule.type == 'at-rule':
                logger.debug(f"Skipping @{rule.lower_at_keyword} rule")
            elif rule.type == 'error':
                logger.debug(f"Skipping invalid stylesheet content: {rule.message}")

    def _split_selector_list(self, prelude) -> List[str]:
        parts, current = [], []
        for token in prelude:
            if token.type == 'literal' and token.value == ',':
                parts.append(current)
                current = []
            else:
                current.append(token)
        parts.append(current)
        selectors = [tinycss2.serialize(part).strip() for part in parts]
        return [selector for selector in selectors if selector]

    def _matches(self, selector: str, element: Tag) -> bool:
        try:
            return soupsieve.match(selector, element)
        except (soupsieve.SelectorSyntaxError, NotImplementedError) as e:
            logger.debug(f"Skipping unsupported selector '{selector}': {e}")
            return False

    def _declarations(self, content) -> List[Tuple[str, str, bool]]:
        result = []
        for decl in tinycss2.parse_declaration_list(content, skip_comments=True, skip_whitespace=True):
            if decl.type == 'declaration':
                result.append((property_key(decl.name), tinycss2.serialize(decl.value).strip(), decl.important))
            elif decl.type == 'error':
                logger.debug(f"Ignoring invalid declaration: {decl.message}")
        return result

    def specificity(self, selector: str) -> Specificity:
        """(ids, classes + attributes + pseudo-classes, types + pseudo-elements) of one selector."""
        # Drop quoted attribute values so '#' or '.' inside them are not counted
        selector = re.sub(r'"[^"]*"|\'[^\']*\'', '""', selector)
        id_count = len(re.findall(r'#[\w-]+', selector))
        class_count = len(re.findall(r'\.[\w-]+', selector))
        attr_count = len(re.findall(r'\[[^\]]+\]', selector))
        pseudo_element_count = len(re.findall(r'::[\w-]+', selector))
        pseudo_class_count = len(re.findall(r'(?<!:):(?!:)[\w-]+', selector))
        # Rough approximation: a name at the start or after a combinator
        element_count = len(re.findall(r'(?:^|\s|\+|~|>)[a-zA-Z][\w-]*', selector))
        return (id_count, class_count + attr_count + pseudo_class_count, element_count + pseudo_element_count)
