import argparse
import logging

from Charikar import densest_subgraph_peeling
from DenseUtils import read_edge_list
from DensestAtMostK import densest_at_most_k_subgraph
from Goldberg import DEFAULT_MAX_ITERATIONS, densest_subgraph
from GoldbergWeighted import weighted_densest_subgraph
from GraphDrawer import draw_densest_subgraph

log = logging.getLogger(__name__)

ALGORITHMS = ['goldberg', 'peeling', 'at-most-k', 'weighted']


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
            description="Densest subgraph of an undirected graph given as an edge list")
    parser.add_argument("file", help="whitespace separated 'from to [weight]' lines")
    parser.add_argument("--algorithm", choices=ALGORITHMS, default="goldberg")
    parser.add_argument("-k", type=int, help="vertex limit for at-most-k")
    parser.add_argument("--nodes", type=int, help="add vertices 1..NODES even if isolated")
    parser.add_argument("--iterations", type=int, default=DEFAULT_MAX_ITERATIONS)
    parser.add_argument("--plot", help="save a drawing of the result to this path")
    parser.add_argument("--log", default="warning")
    args = parser.parse_args(argv)
    if args.algorithm == 'at-most-k' and args.k is None:
        parser.error("at-most-k needs -k")
    return args


def run(G, args):
    if args.algorithm == 'goldberg':
        return densest_subgraph(G, max_iterations=args.iterations)
    if args.algorithm == 'peeling':
        return densest_subgraph_peeling(G)
    if args.algorithm == 'at-most-k':
        return densest_at_most_k_subgraph(G, args.k)
    return weighted_densest_subgraph(G, max_iterations=args.iterations)


def main(argv=None):
    args = parse_args(argv)

    log_level_number = getattr(logging, args.log.upper(), None)
    if not isinstance(log_level_number, int):
        raise ValueError(f"Invalid log level: {args.log}")
    logging.basicConfig(level=log_level_number)

    G = read_edge_list(args.file, number_of_nodes=args.nodes, weighted=args.algorithm == 'weighted')
    log.info(f"{G.number_of_nodes()} nodes, {G.number_of_edges()} edges")
    subgraph, dens = run(G, args)
    print(sorted(subgraph))
    print(dens)

    if args.plot:
        draw_densest_subgraph(G, subgraph, save_path=args.plot,
                              title=f'{args.algorithm}, density={dens:0.4f}')
    return subgraph, dens


if __name__ == '__main__':
    main()
