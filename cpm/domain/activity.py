from typing import Any, Dict

from cpm.domain.errors import ActivityError, InvalidDurationError


class Activity:
    """
    Represents an activity (a node) in a Critical Path Method (CPM) network.

    An activity is identified by a unique, case-sensitive label and takes a
    whole number of time units to complete. Activities are immutable once
    created so that a schedule run always sees the same inputs.
    """

    __slots__ = ("_label", "_duration")

    def __init__(self, label: str, duration: int):
        """
        Initialize a new Activity.

        Args:
            label: Unique identifier for the activity (e.g. "A", "T12")
            duration: Duration in time units, must be an integer >= 0

        Raises:
            ActivityError: If the label is empty or not a string
            InvalidDurationError: If the duration is negative or not an integer
        """
        if not isinstance(label, str) or label.strip() == "":
            raise ActivityError("Activity label must be a non-empty string")
        if label != label.strip():
            raise ActivityError(
                f"Activity label {label!r} must not have surrounding whitespace"
            )

        # bool is an int subclass, but True/False are not durations
        if (
            isinstance(duration, bool)
            or not isinstance(duration, int)
            or duration < 0
        ):
            raise InvalidDurationError(duration, label)

        object.__setattr__(self, "_label", label)
        object.__setattr__(self, "_duration", duration)

    def __setattr__(self, name, value):
        raise AttributeError(f"Activity is immutable, cannot set '{name}'")

    @property
    def label(self) -> str:
        """Get the activity label."""
        return self._label

    @property
    def duration(self) -> int:
        """Get the activity duration."""
        return self._duration

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert activity to a dictionary representation.

        Returns:
            dict: Dictionary with "id" and "duration" keys
        """
        return {"id": self.label, "duration": self.duration}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Activity":
        """
        Create an activity from a dictionary representation.

        Args:
            data: Dictionary with "id" (or "label") and "duration" keys

        Returns:
            Activity: New activity instance
        """
        label = data.get("id", data.get("label"))
        if "duration" not in data:
            raise ActivityError(f"Activity {label!r} has no duration")
        return cls(label, data["duration"])

    @classmethod
    def coerce(cls, value) -> "Activity":
        """Accept an Activity or a (label, duration) pair."""
        if isinstance(value, cls):
            return value
        try:
            label, duration = value
        except (TypeError, ValueError):
            raise ActivityError(
                f"Expected an Activity or a (label, duration) pair, got {value!r}"
            )
        return cls(label, duration)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Activity):
            return NotImplemented
        return self.label == other.label and self.duration == other.duration

    def __hash__(self) -> int:
        return hash((self.label, self.duration))

    def __repr__(self) -> str:
        return f"Activity(label={self.label}, duration={self.duration})"
