# #####################################################
#   Authors  #  Varun Gohil (gohil.varun@iitgn.ac.in) #
#######################################################

from Goldberg import binary_search
from DenseUtils import InvalidInputError, check_undirected

DEFAULT_MAX_ITERATIONS = 60


def check_weights(G, weight='weight'):
    for u, v, data in G.edges(data=True):
        if weight not in data:
            raise InvalidInputError(f'Missing weight for edge ({u}, {v})')
        if data[weight] < 0:
            raise InvalidInputError(f'Negative weight {data[weight]} for edge ({u}, {v})')


def weighted_density(G, S, weight='weight'):
    ''' Finds the density of the returned subgraph, summing edge weights instead of counting edges. '''
    check_undirected(G)
    nodes = set(S)
    if not nodes:
        return 0.0
    total = G.subgraph(nodes).size(weight=weight)
    return total / len(nodes)


def weighted_densest_subgraph(G, weight='weight', max_iterations=DEFAULT_MAX_ITERATIONS, tolerance=None):
    '''
    Goldberg's binary search with weighted degrees on the source arcs.
    Real weights have no separation bound, the answer is exact up to tolerance.
    '''
    check_undirected(G)
    check_weights(G, weight)
    n = G.number_of_nodes()
    if n == 0 or G.size(weight=weight) == 0:
        return set(G.nodes), 0.0
    if tolerance is None:
        tolerance = 1.0 / (n * (n + 1))
    max_degree = max(d for _, d in G.degree(weight=weight))
    subgraph, _ = binary_search(G, max_degree / 2.0, tolerance, max_iterations, weight=weight)
    return subgraph, weighted_density(G, subgraph, weight)
