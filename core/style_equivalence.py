"""
Style Equivalence Module
Decides whether an element's actual declarations contain the expected ones.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from .property_classifier import PropertyKind, classify, is_border_family, longhands_of
from .value_normalizer import ValueNormalizer

logger = logging.getLogger(__name__)


def property_key(name: str) -> str:
    """Lookup key of a property name. Custom properties are case-sensitive."""
    return name if name.startswith('--') else name.lower()


@dataclass
class DeclarationMismatch:
    property: str
    expected: str
    actual: Optional[str]
    kind: PropertyKind = PropertyKind.LONGHAND

    @property
    def missing(self) -> bool:
        return self.actual is None


@dataclass
class MatchResult:
    passed: bool = True
    mismatches: List[DeclarationMismatch] = field(default_factory=list)
    matched: Dict[str, str] = field(default_factory=dict)
    received: Dict[str, str] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.passed

    def to_dict(self) -> Dict:
        """Plain dict for reports."""
        return {
            'passed': self.passed,
            'matched': dict(self.matched),
            'mismatches': [
                {
                    'property': m.property,
                    'expected': m.expected,
                    'actual': m.actual,
                    'kind': m.kind.value,
                }
                for m in self.mismatches
            ],
            'summary': f"{len(self.matched)} matching; {len(self.mismatches)} differ",
        }


class StyleComparator:
    def __init__(self, normalizer: Optional[ValueNormalizer] = None):
        self.normalizer = normalizer or ValueNormalizer()

    def compare(self, actual: Mapping[str, str], expected: Mapping[str, str]) -> MatchResult:
        """
        Containment check: every expected declaration must be present in
        ``actual`` with an equal normalized value. Extra actual declarations
        are ignored and an empty expectation passes.

        Shorthands are looked up by their own name only. A shorthand is never
        expanded into longhands nor rebuilt from them.
        """
        lookup = {property_key(prop): value for prop, value in actual.items()}
        result = MatchResult()

        for prop, expected_value in expected.items():
            key = property_key(prop)
            actual_value = lookup.get(key)
            kind = classify(key)
            if actual_value is not None:
                result.received[key] = actual_value
                if self.normalizer.equal(key, actual_value, expected_value):
                    result.matched[prop] = expected_value
                    continue
            elif kind is PropertyKind.SHORTHAND:
                present = [name for name in longhands_of(key) if name in lookup]
                if present:
                    note = ' (border shorthands do not match longhands)' if is_border_family(key) else ''
                    logger.debug(f"Shorthand {key} absent, longhands {present} not combined{note}")
            result.mismatches.append(DeclarationMismatch(prop, expected_value, actual_value, kind))

        result.passed = not result.mismatches
        logger.debug(f"Style comparison: {len(result.matched)} matched, {len(result.mismatches)} mismatched")
        return result


_comparator = StyleComparator()


def compare_styles(actual: Mapping[str, str], expected: Mapping[str, str],
                   normalizer: Optional[ValueNormalizer] = None) -> MatchResult:
    if normalizer is None:
        return _comparator.compare(actual, expected)
    return StyleComparator(normalizer).compare(actual, expected)
