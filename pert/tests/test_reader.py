import os
import tempfile
import unittest

from pert.domain.graph import Edge
from pert.examples.simple_project import SAMPLE_PROJECT, create_sample_project
from pert.utils.reader import InputFormatError, read_project, read_project_file


class ReaderTestCase(unittest.TestCase):
    """Test cases for the plain-text project reader."""

    def test_sample_project(self):
        graph, durations = create_sample_project()
        self.assertEqual(graph.size(), 10)
        self.assertEqual(graph.number_of_edges(), 13)
        self.assertEqual(durations, [0, 3, 2, 3, 2, 1, 3, 2, 4, 1])
        # 1-based in the file, 0-based in the graph
        self.assertEqual(graph.out_edges(0), [Edge(0, 1)])
        self.assertEqual(graph.in_edges(9), [Edge(6, 9), Edge(7, 9), Edge(8, 9)])

    def test_weights_are_ignored(self):
        graph_a, durations_a = read_project("2 1  1 2 1  4 5")
        graph_b, durations_b = read_project("2 1  1 2 99  4 5")
        self.assertEqual(graph_a.edges(), graph_b.edges())
        self.assertEqual(durations_a, durations_b)

    def test_layout_is_free_form(self):
        graph, durations = read_project("3 2\n1 2 1\n\t2 3 1\n7\n8 9\n")
        self.assertEqual(graph.edges(), [Edge(0, 1), Edge(1, 2)])
        self.assertEqual(durations, [7, 8, 9])

    def test_empty_project(self):
        graph, durations = read_project("0 0")
        self.assertEqual(graph.size(), 0)
        self.assertEqual(durations, [])

    def test_trailing_tokens_are_ignored(self):
        with self.assertLogs("pert.utils.reader", level="WARNING") as logs:
            graph, durations = read_project("1 0 5 6 7")
        self.assertEqual(durations, [5])
        self.assertIn("Ignoring 2 trailing tokens", logs.output[0])

    def test_malformed_input(self):
        cases = [
            "",
            "2",
            "2 1 1 2",
            "2 1 1 2 1 4",
            "2 x",
            "2 1 1 two 1 4 5",
            "2 1 1 3 1 4 5",
            "2 1 0 1 1 4 5",
            "-1 0",
            "1 0 -3",
            "1 0 2.5",
            "1 0 +3",
            "1 0 1_000",
            "1 0 \u0663",
            "\uff12 0",
        ]
        for text in cases:
            with self.subTest(text=text):
                with self.assertRaises(InputFormatError):
                    read_project(text)

    def test_declared_size_checked_before_allocation(self):
        with self.assertRaises(InputFormatError) as cm:
            read_project("100000000 0")
        self.assertIn("needs 100000000 more tokens", str(cm.exception))

        with self.assertRaises(InputFormatError):
            read_project("2 50000000  1 2 1  3 4")

    def test_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            read_project("3 0 1 2")

    def test_read_project_file(self):
        fd, path = tempfile.mkstemp(suffix=".txt")
        try:
            with os.fdopen(fd, "w") as f:
                f.write(SAMPLE_PROJECT)
            graph, durations = read_project_file(path)
        finally:
            os.remove(path)
        self.assertEqual(graph.size(), 10)
        self.assertEqual(len(durations), 10)

    def test_file_that_is_not_utf8(self):
        fd, path = tempfile.mkstemp(suffix=".txt")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(b"1 0 \xff\xfe")
            with self.assertRaises(InputFormatError):
                read_project_file(path)
        finally:
            os.remove(path)

    def test_missing_file(self):
        with self.assertRaises(OSError):
            read_project_file(os.path.join(tempfile.gettempdir(), "no-such-project.txt"))


if __name__ == "__main__":
    unittest.main()
