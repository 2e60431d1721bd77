"""
Helpers that turn user-entered text into validated scheduler inputs.

Each function reports problems as a structured result or a CPMError rather
than a sentinel value, so callers such as the interactive console can decide
whether to re-prompt.
"""

from typing import Dict, Iterable, List, Tuple

from cpm.domain.errors import InvalidDurationError, UnknownLabelError

NO_PREDECESSORS = "-"


class PredecessorParseResult:
    """Outcome of parsing one predecessor line."""

    def __init__(self, line: str, predecessors: List[str], unknown: List[str]):
        self.line = line
        self.predecessors = predecessors
        self.unknown = unknown

    @property
    def blank(self) -> bool:
        return self.line.strip() == ""

    @property
    def ok(self) -> bool:
        return not self.blank and not self.unknown

    def __repr__(self) -> str:
        return (
            f"PredecessorParseResult(predecessors={self.predecessors}, "
            f"unknown={self.unknown})"
        )


def parse_predecessors(line, labels, marker=NO_PREDECESSORS):
    """
    Parse a comma-separated predecessor line such as "A,B" or "-".

    Args:
        line: Text entered for one activity
        labels: Known activity labels
        marker: Text meaning "no predecessors"

    Returns:
        PredecessorParseResult: Resolved labels plus any unknown tokens
    """
    known = set(labels)
    text = line.strip()

    if text == "" or text == marker:
        return PredecessorParseResult(line, [], [])

    predecessors = []
    unknown = []
    for token in text.split(","):
        token = token.strip()
        if token in known:
            if token not in predecessors:
                predecessors.append(token)
        else:
            unknown.append(token)

    return PredecessorParseResult(line, predecessors, unknown)


def parse_duration(text) -> int:
    """
    Parse a duration entered as text.

    Raises:
        InvalidDurationError: If the text is not an integer >= 0
    """
    try:
        value = int(str(text).strip())
    except ValueError:
        raise InvalidDurationError(text)
    if value < 0:
        raise InvalidDurationError(value)
    return value


def resolve_edges(
    predecessor_map: Dict[str, Iterable[str]], labels: Iterable[str]
) -> List[Tuple[str, str]]:
    """
    Convert {activity: [predecessors]} into (predecessor, activity) edges.

    Raises:
        UnknownLabelError: On the first label that is not a known activity
    """
    known = list(labels)
    known_set = set(known)
    edges = []
    for label in known:
        for pred in predecessor_map.get(label, ()):
            if pred not in known_set:
                raise UnknownLabelError(pred, referenced_by=label)
            edges.append((pred, label))

    for label in predecessor_map:
        if label not in known_set:
            raise UnknownLabelError(label)

    return edges
