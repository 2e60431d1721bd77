import unittest
from unittest import mock

from cpm.domain.errors import (
    CyclePresentError,
    DuplicateLabelError,
    InvalidDurationError,
    PredecessorParseError,
    UnknownLabelError,
)
from cpm.services import scheduler as scheduler_module
from cpm.services.scheduler import CPMScheduler, compute_schedule


def _times(schedule, attr):
    return [getattr(w, attr) for w in schedule.rows()]


class CPMSchedulerScenarioTest(unittest.TestCase):
    """End-to-end scheduling scenarios."""

    def test_linear_chain(self):
        schedule = compute_schedule(
            [("X", 3), ("Y", 2), ("Z", 4)], {("X", "Y"), ("Y", "Z")}
        )
        self.assertEqual(_times(schedule, "early_start"), [0, 3, 5])
        self.assertEqual(_times(schedule, "early_finish"), [3, 5, 9])
        self.assertEqual(_times(schedule, "late_start"), [0, 3, 5])
        self.assertEqual(_times(schedule, "late_finish"), [3, 5, 9])
        self.assertEqual(schedule.project_duration, 9)
        self.assertEqual(schedule.critical_activities, ("X", "Y", "Z"))
        self.assertEqual(schedule.critical_path, ("X", "Y", "Z"))
        self.assertEqual(schedule.critical_edges, (("X", "Y"), ("Y", "Z")))

    def test_diamond(self):
        schedule = compute_schedule(
            [("A", 2), ("B", 3), ("C", 1), ("D", 2)],
            {("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")},
        )
        self.assertEqual(_times(schedule, "early_start"), [0, 2, 2, 5])
        self.assertEqual(_times(schedule, "early_finish"), [2, 5, 3, 7])
        self.assertEqual(schedule.project_duration, 7)
        self.assertEqual(schedule.critical_activities, ("A", "B", "D"))
        self.assertEqual(schedule.total_float("C"), 2)
        self.assertFalse(schedule.is_critical("C"))
        self.assertEqual(schedule.critical_path, ("A", "B", "D"))

    def test_cycle(self):
        with self.assertRaises(CyclePresentError) as ctx:
            compute_schedule([("A", 1), ("B", 1)], {("B", "A"), ("A", "B")})
        self.assertEqual(ctx.exception.unordered, ["A", "B"])

    def test_cycle_skips_time_window_calculation(self):
        with mock.patch.object(
            scheduler_module,
            "calculate_time_windows",
            wraps=scheduler_module.calculate_time_windows,
        ) as calculate:
            with self.assertRaises(CyclePresentError):
                compute_schedule([("A", 1), ("B", 1)], [("A", "B"), ("B", "A")])
            calculate.assert_not_called()

            compute_schedule([("A", 1)])
            self.assertEqual(calculate.call_count, 1)

    def test_single_zero_duration_activity(self):
        schedule = compute_schedule([("M", 0)])
        w = schedule.window("M")
        self.assertEqual(
            (w.early_start, w.early_finish, w.late_start, w.late_finish),
            (0, 0, 0, 0),
        )
        self.assertEqual(schedule.project_duration, 0)
        self.assertEqual(schedule.critical_activities, ("M",))
        self.assertEqual(schedule.critical_path, ("M",))
        self.assertEqual(schedule.critical_edges, ())

    def test_empty_project(self):
        schedule = compute_schedule([])
        self.assertEqual(schedule.project_duration, 0)
        self.assertEqual(schedule.critical_path, ())
        self.assertEqual(len(schedule), 0)

    def test_unknown_label(self):
        with self.assertRaises(UnknownLabelError):
            compute_schedule([("A", 1)], [("B", "A")])

    def test_schedule_is_immutable(self):
        schedule = compute_schedule([("A", 1)])
        with self.assertRaises(AttributeError):
            schedule.project_duration = 5
        with self.assertRaises(TypeError):
            schedule.windows["A"] = None

    def test_repeated_runs_are_independent(self):
        activities = [("A", 2), ("B", 3)]
        first = compute_schedule(activities, [("A", "B")])
        second = compute_schedule(activities, [("A", "B")])
        self.assertIsNot(first, second)
        self.assertEqual(first.rows(), second.rows())
        self.assertEqual(first.order, ("A", "B"))


class CPMSchedulerFacadeTest(unittest.TestCase):
    """Test cases for the CPMScheduler facade."""

    def test_fluent_interface(self):
        schedule = (
            CPMScheduler()
            .add_activity("A", 2)
            .add_activity("B", 3, ["A"])
            .add_activity("C", 1, ["A"])
            .add_activity("D", 2)
            .add_dependency("B", "D")
            .add_dependency("C", "D")
            .schedule()
        )
        self.assertEqual(schedule.project_duration, 7)
        self.assertEqual(schedule.critical_path, ("A", "B", "D"))

    def test_predecessor_lines(self):
        scheduler = CPMScheduler()
        scheduler.add_activity("D", 2, "B,C")  # Refers to later activities
        scheduler.add_activity("A", 2, "-")
        scheduler.add_activity("B", 3, "A")
        scheduler.add_activity("C", 1, " A ")

        schedule = scheduler.schedule()
        self.assertEqual(schedule.order, ("A", "B", "C", "D"))
        self.assertEqual(schedule.critical_path, ("A", "B", "D"))

    def test_custom_marker(self):
        scheduler = CPMScheduler(no_predecessor_marker="none")
        scheduler.add_activity("A", 1, "none").add_activity("B", 1, "A")
        self.assertEqual(scheduler.schedule().project_duration, 2)

    def test_unknown_predecessor_line(self):
        scheduler = CPMScheduler()
        scheduler.add_activity("A", 1, "Q")
        with self.assertRaises(UnknownLabelError) as ctx:
            scheduler.build_graph()
        self.assertEqual(ctx.exception.label, "Q")
        self.assertEqual(ctx.exception.referenced_by, "A")

    def test_blank_predecessor_line_means_no_predecessors(self):
        scheduler = CPMScheduler()
        scheduler.add_activity("A", 1, "").add_activity("B", 2, "   ")
        schedule = scheduler.schedule()
        self.assertEqual(schedule.project_duration, 2)
        self.assertEqual(schedule.graph.edges(), [])

    def test_empty_entry_in_predecessor_line(self):
        scheduler = CPMScheduler()
        scheduler.add_activity("A", 1).add_activity("B", 1)
        scheduler.add_activity("C", 1, "A,,B")
        with self.assertRaises(PredecessorParseError) as ctx:
            scheduler.schedule()
        self.assertEqual(ctx.exception.line, "A,,B")

    def test_unknown_dependency(self):
        scheduler = CPMScheduler().add_activity("A", 1).add_dependency("A", "Z")
        with self.assertRaises(UnknownLabelError):
            scheduler.build_graph()

    def test_duplicate_activity(self):
        scheduler = CPMScheduler().add_activity("A", 1)
        with self.assertRaises(DuplicateLabelError):
            scheduler.add_activity("A", 2)

    def test_negative_duration(self):
        with self.assertRaises(InvalidDurationError):
            CPMScheduler().add_activity("A", -1)

    def test_duplicate_dependency_ignored(self):
        scheduler = CPMScheduler().add_activity("A", 1).add_activity("B", 1, ["A"])
        scheduler.add_dependency("A", "B")
        self.assertEqual(scheduler.dependencies, [("A", "B")])

    def test_cycle_through_facade(self):
        scheduler = CPMScheduler()
        scheduler.add_activity("A", 1, "B").add_activity("B", 1, "A")
        with self.assertRaises(CyclePresentError):
            scheduler.schedule()


if __name__ == "__main__":
    unittest.main()
