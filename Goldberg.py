# #####################################################
#   Authors  #  Varun Gohil (gohil.varun@iitgn.ac.in) #
#######################################################

import logging

import maxflow
import networkx as nx

from DenseUtils import check_undirected, density

log = logging.getLogger(__name__)

EPSILON = 1e-9
DEFAULT_MAX_ITERATIONS = 40

SOURCE = ('aux', 'source')
SINK = ('aux', 'sink')


def build_aux_graph(G, least_density, weight=None):
    '''
    Constructs the network as per the specifications given by Goldberg.

    s -> v carries deg(v), v -> t carries 2 * least_density and every undirected
    edge {u, v} becomes the two arcs u -> v and v -> u. With weight set, degrees
    and arc capacities are taken from that edge attribute instead of 1.
    '''
    H = nx.DiGraph()
    capacities = {}
    H.add_nodes_from(G.nodes)
    for v in G.nodes:
        H.add_edge(SOURCE, v)
        capacities[(SOURCE, v)] = float(G.degree(v, weight=weight))
        H.add_edge(v, SINK)
        capacities[(v, SINK)] = 2.0 * least_density
    for u, v, data in G.edges(data=True):
        w = 1.0 if weight is None else float(data[weight])
        H.add_edge(u, v)
        capacities[(u, v)] = w
        H.add_edge(v, u)
        capacities[(v, u)] = w
    return H, capacities, SOURCE, SINK


def min_cut(H, capacities, s, t):
    ''' Minimum s-t cut of a capacitated digraph, computed with PyMaxflow. '''
    inner = [v for v in H.nodes if v != s and v != t]
    index = {v: i for i, v in enumerate(inner)}
    graph = maxflow.Graph[float](len(inner), H.number_of_edges())
    nodes = graph.add_nodes(len(inner))
    direct = 0.0
    for u, v in H.edges:
        cap = capacities[(u, v)]
        if u == t or v == s:
            continue
        if u == s and v == t:
            direct += cap
        elif u == s:
            graph.add_tedge(nodes[index[v]], cap, 0)
        elif v == t:
            graph.add_tedge(nodes[index[u]], 0, cap)
        else:
            graph.add_edge(nodes[index[u]], nodes[index[v]], cap, 0)
    cut_value = graph.maxflow() + direct
    source_side = {s}
    sink_side = {t}
    # segment 0 is the source side
    for v in inner:
        if graph.get_segment(nodes[index[v]]) == 0:
            source_side.add(v)
        else:
            sink_side.add(v)
    return source_side, sink_side, cut_value


def binary_search(G, high, difference, max_iterations, weight=None):
    ''' This function performs the binary search of the density of subgraph and finds the densest subgraph. '''
    total = G.size(weight=weight)
    min_degree = 0.0
    max_degree = high
    subgraph = set(G.nodes)
    best_lambda = 0.0
    iterations = 0
    while max_degree - min_degree >= difference and iterations < max_iterations:
        iterations += 1
        least_density = (max_degree + min_degree) / 2.0
        H, capacities, s, t = build_aux_graph(G, least_density, weight=weight)
        source_segment, _, cut_value = min_cut(H, capacities, s, t)
        source_segment.discard(s)
        log.debug(f'least_density {least_density}, min cut {cut_value}, source side {len(source_segment)}')
        # the cut never exceeds 2m, a non-empty source side is what proves least_density feasible
        if source_segment and cut_value <= 2.0 * total + EPSILON:
            min_degree = least_density
            best_lambda = least_density
            subgraph = source_segment
        else:
            max_degree = least_density
    log.debug(f'binary search stopped after {iterations} iterations, best lambda {best_lambda}')
    return subgraph, best_lambda


def goldberg_search(G, max_iterations=DEFAULT_MAX_ITERATIONS):
    ''' Exact densest subgraph vertices together with the last feasible density threshold. '''
    check_undirected(G)
    n = G.number_of_nodes()
    if n < 2 or G.number_of_edges() == 0:
        return set(G.nodes), 0.0
    max_degree = max(d for _, d in G.degree)
    difference = 1.0 / (n * (n - 1))
    return binary_search(G, max_degree / 2.0, difference, max_iterations)


def densest_subgraph(G, max_iterations=DEFAULT_MAX_ITERATIONS):
    subgraph, _ = goldberg_search(G, max_iterations=max_iterations)
    return subgraph, density(G, subgraph)
