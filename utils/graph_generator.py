import itertools

import networkx as nx
import numpy as np

from DenseUtils import write_edge_list


# vertices are 1..n, isolated ones included
def gen_random_graph(n, weighted=False, seed=None, filepath=None):
    rng = np.random.default_rng(seed)
    G = nx.Graph()
    G.add_nodes_from(range(1, n + 1))
    for i in range(1, n + 1):
        runs_cnt = rng.integers(0, n)
        for _ in range(runs_cnt):
            v_to = int(rng.integers(1, n + 1))
            if v_to != i and not G.has_edge(i, v_to):
                if weighted:
                    G.add_edge(i, v_to, weight=float(rng.uniform(1, 5)))
                else:
                    G.add_edge(i, v_to)
    if filepath is not None:
        write_edge_list(G, filepath, weight='weight' if weighted else None)
    return G


def gen_gnp_graph(n, p, seed=None):
    rng = np.random.default_rng(seed)
    G = nx.Graph()
    G.add_nodes_from(range(1, n + 1))
    upper = np.triu(rng.random((n, n)) < p, k=1)
    for i, j in zip(*np.nonzero(upper)):
        G.add_edge(int(i) + 1, int(j) + 1)
    return G


def plant_clique(G, vertices):
    G.add_edges_from(itertools.combinations(vertices, 2))
    return G
