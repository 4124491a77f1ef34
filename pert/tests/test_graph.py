import unittest

import networkx as nx

from pert.domain.graph import Edge, GraphError, ProjectGraph


class ProjectGraphTestCase(unittest.TestCase):
    """Test cases for the ProjectGraph adapter."""

    def setUp(self):
        # Diamond: 0 -> 1, 0 -> 2, 1 -> 3, 2 -> 3
        self.graph = ProjectGraph(4, [(0, 1), (0, 2), (1, 3), (2, 3)])

    def test_size_and_iteration(self):
        self.assertEqual(self.graph.size(), 4)
        self.assertEqual(len(self.graph), 4)
        self.assertEqual(list(self.graph), [0, 1, 2, 3])
        self.assertEqual(self.graph.number_of_edges(), 4)

    def test_in_and_out_edges(self):
        self.assertEqual(self.graph.out_edges(0), [Edge(0, 1), Edge(0, 2)])
        self.assertEqual(self.graph.in_edges(3), [Edge(1, 3), Edge(2, 3)])
        self.assertEqual(self.graph.in_edges(0), [])
        self.assertEqual(self.graph.out_edges(3), [])

        edge = self.graph.out_edges(1)[0]
        self.assertEqual(edge.from_vertex, 1)
        self.assertEqual(edge.to_vertex, 3)

    def test_duplicate_edges_collapse(self):
        self.graph.add_edge(0, 1)
        self.assertEqual(self.graph.number_of_edges(), 4)

    def test_add_edge_chaining(self):
        graph = ProjectGraph(3).add_edge(0, 1).add_edge(1, 2)
        self.assertEqual(graph.edges(), [Edge(0, 1), Edge(1, 2)])

    def test_self_loop_is_accepted(self):
        graph = ProjectGraph(1, [(0, 0)])
        self.assertEqual(graph.out_edges(0), [Edge(0, 0)])

    def test_validation(self):
        with self.assertRaises(GraphError):
            ProjectGraph(-1)
        with self.assertRaises(GraphError):
            ProjectGraph(2.5)
        with self.assertRaises(GraphError):
            ProjectGraph(2, [(0, 2)])
        with self.assertRaises(GraphError):
            self.graph.add_edge(-1, 0)
        with self.assertRaises(GraphError):
            self.graph.add_edge(True, 0)

    def test_empty_graph(self):
        graph = ProjectGraph(0)
        self.assertEqual(graph.size(), 0)
        self.assertEqual(list(graph), [])

    def test_labels_default_to_one_based(self):
        self.assertEqual(self.graph.label(0), 1)
        self.assertEqual(self.graph.label(3), 4)

    def test_from_networkx(self):
        G = nx.DiGraph()
        G.add_edge("design", "build")
        G.add_edge("build", "test")
        G.add_node("docs")

        graph = ProjectGraph.from_networkx(G)
        self.assertEqual(graph.size(), 4)
        self.assertEqual(
            [graph.label(u) for u in graph], ["design", "build", "test", "docs"]
        )
        self.assertEqual(graph.edges(), [Edge(0, 1), Edge(1, 2)])

    def test_from_undirected_networkx(self):
        with self.assertRaises(GraphError):
            ProjectGraph.from_networkx(nx.Graph([(1, 2)]))

    def test_to_networkx_is_a_copy(self):
        G = self.graph.to_networkx()
        G.add_edge(3, 0)
        self.assertEqual(self.graph.number_of_edges(), 4)


if __name__ == "__main__":
    unittest.main()
