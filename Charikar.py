import logging

from DenseUtils import check_undirected

log = logging.getLogger(__name__)


class DegreeBuckets:
    '''
    Vertices grouped by current degree, one set per degree 0..max_degree.
    A vertex only ever moves one bucket down, so every move is O(1).
    '''

    def __init__(self, G):
        self.max_degree = max((d for _, d in G.degree), default=0)
        self.buckets = [set() for _ in range(self.max_degree + 1)]
        self.degree = {}
        for v, d in G.degree:
            self.buckets[d].add(v)
            self.degree[v] = d

    def decrement(self, v):
        d = self.degree[v]
        self.buckets[d].remove(v)
        self.buckets[d - 1].add(v)
        self.degree[v] = d - 1

    def pop_min(self, cursor):
        ''' Pops an arbitrary vertex from the first non-empty bucket at or above cursor. '''
        while cursor <= self.max_degree and not self.buckets[cursor]:
            cursor += 1
        if cursor > self.max_degree:
            return None, cursor
        v = self.buckets[cursor].pop()
        del self.degree[v]
        return v, cursor


def peel(G):
    '''
    Repeatedly removes a minimum degree vertex from a private copy of G.
    Yields (active, edge_count) before every removal; active is the live set,
    copy it to keep a snapshot.
    '''
    H = G.copy()
    active = set(H.nodes)
    buckets = DegreeBuckets(H)
    edge_count = H.number_of_edges()
    cursor = 0
    while active:
        yield active, edge_count
        v, cursor = buckets.pop_min(cursor)
        if v is None:
            break
        for u in list(H.neighbors(v)):
            H.remove_edge(u, v)
            buckets.decrement(u)
            edge_count -= 1
        active.remove(v)
        # neighbours may have dropped one bucket below the cursor
        cursor = max(cursor - 1, 0)


def densest_subgraph_peeling(G):
    ''' Charikar's greedy peeling, a 1/2-approximation of the densest subgraph. '''
    check_undirected(G)
    best_subgraph = set(G.nodes)
    best_density = -1.0
    for active, edge_count in peel(G):
        current_density = edge_count / len(active)
        if current_density > best_density:
            best_density = current_density
            best_subgraph = set(active)
            log.debug(f'new best density {best_density} on {len(active)} vertices')
    return best_subgraph, max(best_density, 0.0)
