import os
import tempfile
import unittest

import matplotlib

matplotlib.use('Agg')

import networkx as nx

from DensestSubgraph import main
from GraphDrawer import draw_densest_subgraph


class CliTestCase(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.filepath = os.path.join(self.tmp.name, 'edges.txt')
        with open(self.filepath, 'w') as outfile:
            for u, v in [(1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4), (1, 5)]:
                outfile.write(f'{u} {v}\n')

    def tearDown(self):
        self.tmp.cleanup()

    def test_goldberg(self):
        S, d = main([self.filepath])
        self.assertEqual(S, {1, 2, 3, 4})
        self.assertAlmostEqual(d, 1.5, places=6)

    def test_peeling(self):
        _, d = main([self.filepath, '--algorithm', 'peeling'])
        self.assertEqual(d, 1.5)

    def test_at_most_k(self):
        S, d = main([self.filepath, '--algorithm', 'at-most-k', '-k', '3'])
        self.assertEqual(len(S), 3)
        self.assertEqual(d, 1.0)

    def test_at_most_k_needs_k(self):
        with self.assertRaises(SystemExit):
            main([self.filepath, '--algorithm', 'at-most-k'])

    def test_isolated_nodes(self):
        S, d = main([self.filepath, '--nodes', '8', '--algorithm', 'peeling', '--log', 'debug'])
        self.assertEqual(S, {1, 2, 3, 4})

    def test_bad_log_level(self):
        with self.assertRaises(ValueError):
            main([self.filepath, '--log', 'loud'])

    def test_plot(self):
        plot_path = os.path.join(self.tmp.name, 'plots', 'k4.png')
        main([self.filepath, '--plot', plot_path])
        self.assertTrue(os.path.exists(plot_path))


class DrawerTestCase(unittest.TestCase):
    def test_periphery(self):
        G = nx.complete_graph(range(1, 5))
        G.add_edges_from([(1, 5), (5, 6)])
        periphery = draw_densest_subgraph(G, {1, 2, 3, 4}, seed=1)
        self.assertEqual(periphery, {5})


if __name__ == '__main__':
    unittest.main()
