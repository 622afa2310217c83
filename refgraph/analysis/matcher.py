"""
Reference matcher built from the set of node labels.

Each distinct label is escaped for literal matching with every underscore made
optional, so ``foo_bar`` also matches ``foobar``. Alternatives are ordered
longest first so the most specific label wins at a given position. A word
boundary is required before a match but not after it (suffixes such as
plurals still count).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Pattern

from refgraph.analysis.naming import normalize_identifier


def label_alternative(label: str) -> str:
    """Regex fragment matching ``label`` literally, underscores optional."""
    return re.escape(label).replace("_", "_?")


@dataclass(frozen=True)
class ReferenceMatcher:
    """Compiled matcher over node labels; yields identifiers of referenced nodes.

    Every label has its own named group; a match resolves to the identifier of
    that label, never to the matched text itself.
    """

    pattern: Pattern[str]
    identifiers: Dict[str, str] = field(default_factory=dict)
    case_sensitive: bool = False

    @classmethod
    def build(cls, labels: Iterable[str], case_sensitive: bool = False) -> "ReferenceMatcher":
        distinct: List[str] = []
        seen = set()
        for label in labels:
            if label and label not in seen:
                seen.add(label)
                distinct.append(label)
        if not distinct:
            # matches nothing
            return cls(re.compile(r"(?!)"), {}, case_sensitive)
        groups = [(f"l{i}", label) for i, label in enumerate(distinct)]
        # stable sort: equal-length labels keep first-seen order
        groups.sort(key=lambda item: len(label_alternative(item[1])), reverse=True)
        alternatives = "|".join(f"(?P<{group}>{label_alternative(label)})" for group, label in groups)
        identifiers = {group: normalize_identifier(label, case_sensitive) for group, label in groups}
        flags = 0 if case_sensitive else re.IGNORECASE
        return cls(re.compile(r"\b(?:%s)" % alternatives, flags), identifiers, case_sensitive)

    def references(self, text: str) -> Iterator[str]:
        """Yield the node identifier of every non-overlapping match in ``text``."""
        for match in self.pattern.finditer(text):
            yield self.identifiers[match.lastgroup]
