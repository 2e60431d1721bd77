"""
CPM Scheduler
=============

Critical Path Method scheduling for activity-on-node project networks.

Available modules:
- domain: activities, the activity graph, schedules and errors
- services: topological ordering, time windows, critical path, scheduler
- utils: predecessor parsing, console reports, JSON interchange
- visualization: network diagram and Gantt chart
"""

from cpm.domain.activity import Activity
from cpm.domain.errors import (
    ActivityError,
    CPMError,
    CyclePresentError,
    DuplicateLabelError,
    InvalidDurationError,
    PredecessorParseError,
    ProjectFormatError,
    UnknownLabelError,
)
from cpm.domain.graph import ActivityGraph
from cpm.domain.schedule import Schedule, TimeWindow
from cpm.services.scheduler import CPMScheduler, compute_schedule

__all__ = [
    "Activity",
    "ActivityError",
    "ActivityGraph",
    "CPMError",
    "CPMScheduler",
    "CyclePresentError",
    "DuplicateLabelError",
    "InvalidDurationError",
    "PredecessorParseError",
    "ProjectFormatError",
    "Schedule",
    "TimeWindow",
    "UnknownLabelError",
    "compute_schedule",
]
