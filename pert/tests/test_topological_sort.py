import random
import unittest

from pert.domain.graph import ProjectGraph
from pert.utils.graph import CycleError, TraversalDepthError, topological_order


def random_dag(rng, size, edge_probability=0.3):
    """Random DAG whose edges follow a shuffled vertex ranking."""
    ranking = list(range(size))
    rng.shuffle(ranking)
    edges = [
        (ranking[i], ranking[j])
        for i in range(size)
        for j in range(i + 1, size)
        if rng.random() < edge_probability
    ]
    return ProjectGraph(size, edges)


class TopologicalOrderTestCase(unittest.TestCase):
    def assertTopological(self, graph, order):
        self.assertEqual(sorted(order), list(range(graph.size())))
        position = {u: i for i, u in enumerate(order)}
        for edge in graph.edges():
            self.assertLess(position[edge.from_vertex], position[edge.to_vertex])

    def test_empty_graph(self):
        self.assertEqual(topological_order(ProjectGraph(0)), [])
        self.assertEqual(topological_order(ProjectGraph(0), recursive=True), [])

    def test_chain(self):
        graph = ProjectGraph(4, [(2, 3), (1, 2), (0, 1)])
        self.assertEqual(topological_order(graph), [0, 1, 2, 3])

    def test_reverse_finish_order(self):
        # DFS from 0 finishes 3, 1, 2, 0; then 4 starts a new tree
        graph = ProjectGraph(5, [(0, 1), (1, 3), (0, 2), (2, 3)])
        self.assertEqual(topological_order(graph), [4, 0, 2, 1, 3])

    def test_isolated_vertices_and_components(self):
        graph = ProjectGraph(6, [(0, 1), (3, 4)])
        order = topological_order(graph)
        self.assertTopological(graph, order)

    def test_random_dags(self):
        rng = random.Random(7)
        for _ in range(50):
            graph = random_dag(rng, rng.randint(1, 25))
            order = topological_order(graph)
            self.assertTopological(graph, order)
            self.assertEqual(order, topological_order(graph, recursive=True))

    def test_cycle(self):
        graph = ProjectGraph(3, [(0, 1), (1, 2), (2, 0)])
        for recursive in (False, True):
            with self.assertRaises(CycleError) as cm:
                topological_order(graph, recursive=recursive)
            self.assertEqual(cm.exception.cycle, [0, 1, 2, 0])

    def test_cycle_reached_from_acyclic_prefix(self):
        graph = ProjectGraph(5, [(0, 1), (1, 2), (2, 3), (3, 1), (0, 4)])
        with self.assertRaises(CycleError) as cm:
            topological_order(graph)
        self.assertEqual(cm.exception.cycle, [1, 2, 3, 1])

    def test_self_loop(self):
        graph = ProjectGraph(2, [(0, 1), (1, 1)])
        for recursive in (False, True):
            with self.assertRaises(CycleError) as cm:
                topological_order(graph, recursive=recursive)
            self.assertEqual(cm.exception.cycle, [1, 1])

    def test_deep_chain_iterative(self):
        size = 50000
        graph = ProjectGraph(size, [(u, u + 1) for u in range(size - 1)])
        self.assertEqual(topological_order(graph), list(range(size)))

    def test_deep_chain_recursive_reports_depth_error(self):
        size = 20000
        graph = ProjectGraph(size, [(u, u + 1) for u in range(size - 1)])
        with self.assertRaises(TraversalDepthError) as cm:
            topological_order(graph, recursive=True)
        self.assertIn("recursive=False", str(cm.exception))


if __name__ == "__main__":
    unittest.main()
