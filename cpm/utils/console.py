"""
Console front end: interactive project entry and plain-text reports.
"""

from cpm.domain.activity import Activity
from cpm.domain.errors import InvalidDurationError
from cpm.utils.parsing import NO_PREDECESSORS, parse_duration, parse_predecessors


def _ask(prompt, input_func):
    return input_func(prompt).strip()


def _read_count(input_func, output_func):
    while True:
        text = _ask("Number of activities: ", input_func)
        try:
            count = int(text)
        except ValueError:
            count = 0
        if count > 0:
            return count
        output_func("Invalid input. Enter an integer > 0.")


def _read_labels(count, input_func, output_func):
    labels = []
    output_func("\nEnter the activity labels:")
    while len(labels) < count:
        label = _ask(f"Label of activity {len(labels) + 1}: ", input_func)
        if not label or " " in label:
            output_func("A label must be a single non-empty word.")
        elif label in labels:
            output_func(f"Label '{label}' is already used.")
        else:
            labels.append(label)
    return labels


def _read_durations(labels, input_func, output_func):
    activities = []
    output_func("\nEnter the durations:")
    for label in labels:
        while True:
            try:
                duration = parse_duration(_ask(f"Duration of {label}: ", input_func))
                activities.append(Activity(label, duration))
                break
            except InvalidDurationError:
                output_func("Invalid duration. Enter an integer >= 0.")
    return activities


def read_project_interactively(
    input_func=None, output_func=print, marker=NO_PREDECESSORS
):
    """
    Prompt for a project on the console.

    Every answer is validated and the question repeated until it is valid.

    Args:
        input_func: Function used to read a line (default: input)
        output_func: Function used to write a message (default: print)
        marker: Text meaning "no predecessors"

    Returns:
        tuple: (activities, predecessor_map) where predecessor_map maps each
        label to its list of predecessor labels
    """
    if input_func is None:
        input_func = input

    count = _read_count(input_func, output_func)
    labels = _read_labels(count, input_func, output_func)
    activities = _read_durations(labels, input_func, output_func)

    output_func(
        "\nEnter the predecessors of each activity.\n"
        f"Example: A,B or '{marker}' if none."
    )
    predecessor_map = {}
    for label in labels:
        while True:
            line = input_func(f"Predecessors of {label}: ")
            result = parse_predecessors(line, labels, marker)
            if result.blank:
                continue
            if not result.ok:
                output_func("One or more labels do not exist. Try again.")
                continue
            predecessor_map[label] = result.predecessors
            break

    return activities, predecessor_map


def format_adjacency_matrix(graph):
    """Render the graph as a 0/1 adjacency matrix with activity annotations."""
    n = len(graph)
    width = max(len(str(n - 1)), 1) if n else 1
    lines = [" " * (width + 2) + " ".join(str(j).rjust(width) for j in range(n))]
    rows = zip(graph.adjacency_matrix(), graph.activities)
    for i, (row, activity) in enumerate(rows):
        cells = " ".join(str(c).rjust(width) for c in row)
        lines.append(
            f"{str(i).rjust(width)}: {cells}   ({activity.label}, d={activity.duration})"
        )
    return "\n".join(lines)


def format_schedule_table(schedule):
    """Render the CPM table (Dur, ES, EF, LS, LF, Float) for every activity."""
    headers = ["Atv", "Dur", "ES", "EF", "LS", "LF", "Float"]
    rows = [
        [
            w.label,
            w.duration,
            w.early_start,
            w.early_finish,
            w.late_start,
            w.late_finish,
            w.total_float,
        ]
        for w in schedule.rows()
    ]

    widths = [len(h) for h in headers]
    for row in rows:
        for k, cell in enumerate(row):
            widths[k] = max(widths[k], len(str(cell)))

    def fmt(cells):
        return " | ".join(str(c).ljust(widths[k]) for k, c in enumerate(cells))

    rule = "-" * len(fmt(headers))
    lines = [fmt(headers), rule]
    lines.extend(fmt(row) for row in rows)
    lines.append(rule)
    lines.append(f"Minimum project duration: {schedule.project_duration}")
    return "\n".join(lines)


def format_critical_summary(schedule):
    """Render critical activities and the critical path."""
    lines = ["Critical activities (total float = 0):"]
    if schedule.critical_activities:
        lines.append(" ".join(schedule.critical_activities))
    else:
        lines.append("(none)")

    if schedule.critical_path:
        lines.append("Critical path: " + " -> ".join(schedule.critical_path))
    else:
        lines.append("Could not extract a linear critical path.")
    return "\n".join(lines)


def format_report(schedule):
    """Full console report: schedule table followed by the critical summary."""
    return format_schedule_table(schedule) + "\n\n" + format_critical_summary(schedule)
