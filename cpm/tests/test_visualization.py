"""
Tests for the CPM visualization components.
"""

import os
import tempfile
import unittest

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from cpm.services.scheduler import compute_schedule
from cpm.visualization.gantt import create_gantt_chart
from cpm.visualization.network import create_network_diagram


def create_test_schedule():
    """Small project with one non-critical branch and a milestone."""
    return compute_schedule(
        [("REQ", 5), ("DES", 10), ("FE", 15), ("BE", 12), ("DOC", 4), ("GO", 0)],
        [
            ("REQ", "DES"),
            ("DES", "FE"),
            ("DES", "BE"),
            ("DES", "DOC"),
            ("FE", "GO"),
            ("BE", "GO"),
            ("DOC", "GO"),
        ],
    )


class VisualizationTest(unittest.TestCase):
    def setUp(self):
        self.schedule = create_test_schedule()
        self.temp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        plt.close("all")
        self.temp_dir.cleanup()

    def test_network_diagram_layouts(self):
        for layout in ["layered", "spring", "circular", "shell", "unknown"]:
            fig = create_network_diagram(self.schedule, show=False, layout=layout)
            self.assertIsNotNone(fig)
            plt.close(fig)

    def test_network_diagram_saved(self):
        filename = os.path.join(self.temp_dir.name, "network.png")
        create_network_diagram(self.schedule, filename=filename, show=False)
        self.assertTrue(os.path.exists(filename))
        self.assertGreater(os.path.getsize(filename), 0)

    def test_network_diagram_leaves_schedule_graph_untouched(self):
        create_network_diagram(self.schedule, show=False)
        for _, data in self.schedule.graph.digraph.nodes(data=True):
            self.assertNotIn("layer", data)

    def test_gantt_chart_saved(self):
        filename = os.path.join(self.temp_dir.name, "gantt.png")
        fig = create_gantt_chart(self.schedule, filename=filename, show=False)
        self.assertTrue(os.path.exists(filename))

        ax = fig.axes[0]
        self.assertEqual(
            [t.get_text() for t in ax.get_yticklabels()],
            ["REQ", "DES", "FE", "BE", "DOC", "GO"],
        )
        self.assertEqual(ax.get_xlim(), (0.0, 30.0))

    def test_empty_schedule(self):
        schedule = compute_schedule([])
        self.assertIsNotNone(create_gantt_chart(schedule, show=False))
        self.assertIsNotNone(create_network_diagram(schedule, show=False))


if __name__ == "__main__":
    unittest.main()
