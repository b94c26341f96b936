import itertools
import unittest

import networkx as nx

from DenseUtils import InvalidInputError, density
from DensestAtMostK import densest_at_most_k_subgraph, peeling_lower_bound, prune_below
from Goldberg import densest_subgraph
from utils.graph_generator import gen_random_graph


def k4_with_pendant():
    G = nx.complete_graph(range(1, 5))
    G.add_edge(1, 5)
    return G


def brute_force_at_most_k(G, k):
    best = 0.0
    for size in range(1, k + 1):
        for subset in itertools.combinations(G.nodes, size):
            best = max(best, density(G, subset))
    return best


class PruningTestCase(unittest.TestCase):
    def test_lower_bound_only_counts_small_steps(self):
        # whole graph is 1.4 and the K4 is 1.5, neither has at most 3 vertices
        self.assertEqual(peeling_lower_bound(k4_with_pendant(), 3), 1.0)
        self.assertEqual(peeling_lower_bound(k4_with_pendant(), 0), 0.0)

    def test_prune_cascades(self):
        # the path tail 5-6-7 unravels once its end goes
        G = nx.complete_graph(range(1, 5))
        G.add_edges_from([(4, 5), (5, 6), (6, 7)])
        H = prune_below(G, 1.5)
        self.assertEqual(sorted(v for v, d in H.degree if d > 0), [1, 2, 3, 4])
        self.assertEqual(set(H.nodes), set(G.nodes))
        self.assertEqual(G.number_of_edges(), 9)


class TestCase(unittest.TestCase):
    def test_k4_with_pendant_triangle(self):
        S, d = densest_at_most_k_subgraph(k4_with_pendant(), 3)
        self.assertEqual(len(S), 3)
        self.assertTrue(S <= {1, 2, 3, 4})
        self.assertEqual(d, 1.0)

    def test_large_k_matches_exact(self):
        G = k4_with_pendant()
        for k in (5, 6, 100):
            S, d = densest_at_most_k_subgraph(G, k)
            self.assertEqual(S, {1, 2, 3, 4})
            self.assertAlmostEqual(d, densest_subgraph(G)[1])

    def test_zero_k(self):
        self.assertEqual(densest_at_most_k_subgraph(k4_with_pendant(), 0), (set(), 0.0))

    def test_negative_k(self):
        with self.assertRaises(ValueError):
            densest_at_most_k_subgraph(k4_with_pendant(), -1)

    def test_no_edges(self):
        self.assertEqual(densest_at_most_k_subgraph(nx.empty_graph(range(1, 5)), 2), (set(), 0.0))

    def test_rejects_directed(self):
        with self.assertRaises(InvalidInputError):
            densest_at_most_k_subgraph(nx.DiGraph([(1, 2)]), 1)

    def test_respects_size_and_brute_force(self):
        for seed in range(6):
            G = gen_random_graph(n=8, seed=seed)
            for k in (2, 4):
                S, d = densest_at_most_k_subgraph(G, k)
                self.assertLessEqual(len(S), k)
                self.assertAlmostEqual(d, density(G, S))
                self.assertLessEqual(d, brute_force_at_most_k(G, k) + 1e-9)


if __name__ == '__main__':
    unittest.main()
