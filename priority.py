"""
Keyword-based priority detection for customer service questions.

A question is lowercased and scanned for high-priority keywords first, then
medium-priority ones. Matching is plain substring containment, so "reissued"
counts as "issue".
"""
from enum import Enum

from config import HIGH_PRIORITY_KEYWORDS, MEDIUM_PRIORITY_KEYWORDS


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        # 0 is the most severe; used as the heap key in the request queue
        return _RANK[self]

    def __str__(self):
        return self.value


_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}

# High tier must stay first
_TIERS = (
    (Priority.HIGH, HIGH_PRIORITY_KEYWORDS),
    (Priority.MEDIUM, MEDIUM_PRIORITY_KEYWORDS),
)


def matched_keyword(text: str):
    """
    Return (priority, keyword) for the first keyword that fires, or
    (Priority.LOW, None) when nothing matches.
    """
    lowered = text.lower()
    for priority, keywords in _TIERS:
        for kw in keywords:
            if kw in lowered:
                return priority, kw
    return Priority.LOW, None


def classify(text: str) -> Priority:
    priority, _ = matched_keyword(text)
    return priority


# Name used by the /classify endpoint
detect_priority = classify
