"""
Style Object Serializer Module
Converts camelCase style objects into declaration text the host accepts.
"""

import logging
import numbers
from typing import Any, Callable, Mapping, Optional

from utils.text_utils import camel_to_kebab

logger = logging.getLogger(__name__)


def style_value(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        value = float(value)
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value).strip()


def parse_js_to_css(create_sandbox: Callable[[], Any], style_object: Mapping[str, Any]) -> str:
    """
    Apply ``style_object`` to a fresh host sandbox and return its declaration text.

    Properties the host does not recognize are dropped without error, so an
    object made only of unknown names yields an empty string.
    """
    sandbox = create_sandbox()
    for name, raw_value in style_object.items():
        prop = camel_to_kebab(name)
        value = style_value(raw_value)
        if not value:
            logger.debug(f"Skipping empty style value for {name}")
            continue
        if not sandbox.set_property(prop, value):
            logger.debug(f"Host rejected style property {name} ({prop}), dropping it")
    css_text = sandbox.css_text
    logger.debug(f"Serialized style object with {len(style_object)} entries to: {css_text!r}")
    return css_text
