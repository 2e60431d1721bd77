import json
import logging
from pathlib import Path

from cpm.domain.activity import Activity
from cpm.domain.errors import CPMError, ProjectFormatError
from cpm.utils.parsing import NO_PREDECESSORS, parse_predecessors

logger = logging.getLogger(__name__)


def _edge_dicts(edges):
    return [{"from": pred, "to": succ} for pred, succ in edges]


def schedule_to_dict(schedule):
    """
    Convert a schedule to the interchange document used for visualization.

    Returns:
        dict: "nodes", "edges", "critical_path" and "critical_edges" sections
    """
    graph = schedule.graph
    return {
        "nodes": [activity.to_dict() for activity in graph.activities],
        "edges": _edge_dicts(graph.edges()),
        "critical_path": list(schedule.critical_path),
        "critical_edges": _edge_dicts(schedule.critical_edges),
    }


def schedule_to_report_dict(schedule):
    """Interchange document extended with time windows and summary values."""
    result = schedule_to_dict(schedule)
    for node in result["nodes"]:
        node.update(schedule.window(node["id"]).to_dict())
    result["project_duration"] = schedule.project_duration
    result["critical_activities"] = list(schedule.critical_activities)
    return result


def write_schedule_json(schedule, path, detailed=False):
    """
    Write the schedule to a JSON file.

    Args:
        schedule: The Schedule to write
        path: Destination file path
        detailed: Include time windows and project duration

    Returns:
        Path: The written file
    """
    path = Path(path)
    data = schedule_to_report_dict(schedule) if detailed else schedule_to_dict(schedule)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    logger.info("Wrote schedule to %s", path)
    return path


def _predecessor_list(entry, labels):
    label = entry.get("id", entry.get("label"))
    raw = entry.get("predecessors", [])

    if raw is None:
        return []
    if isinstance(raw, str):
        result = parse_predecessors(raw, labels, NO_PREDECESSORS)
        # Unknown labels are kept so graph construction reports them
        return result.predecessors + result.unknown
    if isinstance(raw, list) and all(isinstance(p, str) for p in raw):
        return list(raw)

    raise ProjectFormatError(
        f"Predecessors of '{label}' must be a list of labels or a string"
    )


def project_from_dict(data):
    """
    Read activities and precedence edges from a project document.

    Accepts either {"activities": [{"id", "duration", "predecessors"}]} or the
    interchange layout {"nodes": [{"id", "duration"}], "edges": [{"from", "to"}]}.

    Returns:
        tuple: (activities, edges)

    Raises:
        ProjectFormatError: If the document is malformed
    """
    if not isinstance(data, dict):
        raise ProjectFormatError("Project document must be a JSON object")

    if "activities" in data:
        entries = data["activities"]
        if not isinstance(entries, list):
            raise ProjectFormatError("'activities' must be a list")
        activities = [_activity_from_entry(entry) for entry in entries]
        labels = [a.label for a in activities]

        edges = []
        for entry, activity in zip(entries, activities):
            for pred in _predecessor_list(entry, labels):
                edges.append((pred, activity.label))
        return activities, edges

    if "nodes" in data:
        nodes = data["nodes"]
        if not isinstance(nodes, list):
            raise ProjectFormatError("'nodes' must be a list")
        activities = [_activity_from_entry(node) for node in nodes]

        edges = []
        for edge in data.get("edges", []):
            if not isinstance(edge, dict) or "from" not in edge or "to" not in edge:
                raise ProjectFormatError(f"Invalid edge entry: {edge!r}")
            edges.append((edge["from"], edge["to"]))
        return activities, edges

    raise ProjectFormatError("Project document needs an 'activities' or 'nodes' list")


def _activity_from_entry(entry):
    if not isinstance(entry, dict):
        raise ProjectFormatError(f"Invalid activity entry: {entry!r}")
    try:
        return Activity.from_dict(entry)
    except CPMError as e:
        raise ProjectFormatError(str(e)) from e


def load_project(path):
    """Load a project document from a JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ProjectFormatError(f"{path}: not valid JSON ({e})") from e
    logger.debug("Loaded project document from %s", path)
    return project_from_dict(data)
