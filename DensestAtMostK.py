import itertools
import logging

from Charikar import peel
from DenseUtils import check_undirected, induced_density
from Goldberg import densest_subgraph

log = logging.getLogger(__name__)

ENUMERATION_WARN_SIZE = 25


def peeling_lower_bound(G, k):
    ''' Best density seen while peeling, counted only once at most k vertices remain. '''
    bound = 0.0
    for active, edge_count in peel(G):
        if len(active) <= k:
            bound = max(bound, edge_count / len(active))
    return bound


def prune_below(G, bound):
    '''
    Strips vertices whose degree is positive but below bound until none is left.
    Returns the pruned copy; isolated vertices stay in it.
    '''
    H = G.copy()
    queue = [v for v, d in H.degree if 0 < d < bound]
    removed = 0
    while queue:
        v = queue.pop()
        d = H.degree(v)
        if not 0 < d < bound:
            continue
        neighbours = list(H.neighbors(v))
        for u in neighbours:
            H.remove_edge(u, v)
        removed += 1
        queue.extend(u for u in neighbours if 0 < H.degree(u) < bound)
    log.debug(f'pruned {removed} vertices below degree {bound}')
    return H


def densest_at_most_k_subgraph(G, k):
    '''
    Heuristic for the densest subgraph with at most k vertices: the peeling bound
    prunes the graph and the remaining candidates are enumerated exhaustively.
    No approximation guarantee, the enumeration is exponential in the candidates left.
    '''
    check_undirected(G)
    if k < 0:
        raise ValueError(f'k must be non-negative, got {k}')
    if k >= G.number_of_nodes():
        return densest_subgraph(G)

    bound = peeling_lower_bound(G, k)
    H = prune_below(G, bound)
    candidates = [v for v, d in H.degree if d > 0]
    if len(candidates) > ENUMERATION_WARN_SIZE:
        log.warning(f'enumerating subsets of {len(candidates)} candidates, this may take long')

    best_subgraph = set()
    best_density = 0.0
    for size in range(1, min(k, len(candidates)) + 1):
        for subset in itertools.combinations(candidates, size):
            current_density = induced_density(G, subset)
            if current_density > best_density:
                best_density = current_density
                best_subgraph = set(subset)
    return best_subgraph, best_density
