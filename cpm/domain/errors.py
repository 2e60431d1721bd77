from typing import Iterable, Optional


class CPMError(Exception):
    """Base class for all errors raised by the CPM scheduler."""

    pass


class ActivityError(CPMError):
    """Exception raised for errors in the Activity class."""

    pass


class InvalidDurationError(ActivityError):
    """Raised when an activity duration is not a non-negative integer."""

    def __init__(self, duration, label: Optional[str] = None):
        self.duration = duration
        self.label = label
        if label is None:
            message = f"Invalid duration: {duration!r}. Must be an integer >= 0"
        else:
            message = (
                f"Invalid duration for activity '{label}': {duration!r}. "
                "Must be an integer >= 0"
            )
        super().__init__(message)


class DuplicateLabelError(CPMError):
    """Raised when the same activity label appears more than once."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Activity label '{label}' is defined more than once")


class UnknownLabelError(CPMError):
    """Raised when a precedence edge references a label that is not an activity."""

    def __init__(self, label: str, referenced_by: Optional[str] = None):
        self.label = label
        self.referenced_by = referenced_by
        if referenced_by is None:
            message = f"Unknown activity label: '{label}'"
        else:
            message = (
                f"Unknown activity label '{label}' in dependency with '{referenced_by}'"
            )
        super().__init__(message)


class CyclePresentError(CPMError):
    """Raised when the precedence relation contains at least one cycle."""

    def __init__(self, unordered: Iterable[str] = ()):
        # Activities the orderer could not place; they lie on or behind a cycle
        self.unordered = list(unordered)
        message = "The activity graph contains one or more cycles"
        if self.unordered:
            message += f" (could not order: {', '.join(self.unordered)})"
        super().__init__(message)


class PredecessorParseError(CPMError):
    """Raised when a predecessor line cannot be resolved to known labels."""

    def __init__(self, line: str, unknown: Iterable[str] = ()):
        self.line = line
        self.unknown = list(unknown)
        if self.unknown:
            message = (
                f"Unknown predecessor label(s) {', '.join(repr(u) for u in self.unknown)}"
                f" in line {line!r}"
            )
        else:
            message = f"Invalid predecessor line: {line!r}"
        super().__init__(message)


class ProjectFormatError(CPMError):
    """Raised when a project document is malformed."""

    pass
