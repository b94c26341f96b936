import errno
import logging
import os

import networkx as nx
import pandas as pd

log = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    ''' Raised when a graph is not a simple undirected graph. '''


def check_undirected(G):
    if G.is_directed():
        raise InvalidInputError('densest subgraph algorithms require an undirected graph')
    if G.is_multigraph():
        raise InvalidInputError('multigraphs are not supported, collapse parallel edges first')
    loops = nx.number_of_selfloops(G)
    if loops:
        raise InvalidInputError(f'graph has {loops} self-loop(s)')


def density(G, S):
    ''' Density |E(S)| / |S| of the subgraph induced by S, each edge counted once. '''
    check_undirected(G)
    return induced_density(G, S)


def induced_density(G, S):
    nodes = set(S)
    if not nodes:
        return 0.0
    edges = 0
    for v in nodes:
        if v not in G:
            continue
        for u in G.neighbors(v):
            if u in nodes:
                edges += 1
    return edges / (2.0 * len(nodes))


def create_path_if_not_exist(filepath):
    dirname = os.path.dirname(filepath)
    if dirname and not os.path.exists(dirname):
        try:
            os.makedirs(dirname)
        except OSError as exc:  # Guard against race condition
            if exc.errno != errno.EEXIST:
                raise


def read_edge_list(filepath, number_of_nodes=None, weighted=False):
    '''
    Reads whitespace separated "from_node to_node [weight]" lines into an undirected graph.
    If number_of_nodes is given, vertices 1..number_of_nodes are added even when isolated.
    '''
    G = nx.Graph()
    if number_of_nodes is not None:
        G.add_nodes_from(range(1, number_of_nodes + 1))
    try:
        if weighted:
            edges = pd.read_csv(filepath, sep=r'\s+', header=None, comment='#',
                                names=['from_node', 'to_node', 'weight'])
        else:
            edges = pd.read_csv(filepath, sep=r'\s+', header=None, comment='#',
                                names=['from_node', 'to_node'], usecols=[0, 1])
    except pd.errors.EmptyDataError:
        log.debug(f'{filepath} has no edges')
        return G
    if edges[['from_node', 'to_node']].isnull().values.any():
        raise InvalidInputError(f'{filepath}: every line needs two endpoints')
    if weighted and edges['weight'].isnull().values.any():
        raise InvalidInputError(f'{filepath}: missing weight on a weighted edge line')
    for row in edges.itertuples(index=False):
        u, v = int(row.from_node), int(row.to_node)
        if weighted:
            G.add_edge(u, v, weight=float(row.weight))
        else:
            G.add_edge(u, v)
    log.debug(f'read {G.number_of_nodes()} nodes, {G.number_of_edges()} edges from {filepath}')
    return G


def write_edge_list(G, filepath, weight=None):
    create_path_if_not_exist(filepath)
    with open(filepath, 'w') as outfile:
        for u, v, data in G.edges(data=True):
            if weight is None:
                outfile.write(f'{u} {v}\n')
            else:
                outfile.write(f'{u} {v} {data[weight]}\n')
