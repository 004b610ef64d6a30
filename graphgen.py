import argparse
from typing import List, Optional, Tuple

import numpy as np

from gconverter import write_graph


def random_adjacency(nvertices: int,
                     density: float = 0.5,
                     min_weight: int = 1,
                     max_weight: int = 100,
                     seed: Optional[int] = None) -> np.ndarray:
    if not 0 <= density <= 1:
        raise ValueError(f'density must be in [0, 1], got {density}')
    if min_weight > max_weight:
        raise ValueError(f'min weight {min_weight} is above max weight {max_weight}')
    # weight 0 marks a missing edge in the matrix
    if min_weight <= 0 <= max_weight:
        raise ValueError('weight range must not contain 0')

    rng = np.random.default_rng(seed)
    total_edges = int(density * nvertices * (nvertices-1) / 2)

    adj_matrix = np.zeros((nvertices, nvertices), dtype=int)

    for _ in range(total_edges):
        # keep trying until an unoccupied spot is found
        while True:
            i = int(rng.integers(0, nvertices-1))
            j = int(rng.integers(i+1, nvertices)) # ensure no self-loops
            if adj_matrix[i, j] == 0:
                break

        # Only bother filling upper triangle for undirected graphs
        adj_matrix[i, j] = rng.integers(min_weight, max_weight, endpoint=True)

    return adj_matrix


def adjacency_to_edges(adj_matrix: np.ndarray) -> List[Tuple[int, int, int]]:
    rows, cols = np.nonzero(np.triu(adj_matrix, k=1))
    return [(int(i), int(j), int(adj_matrix[i, j])) for i, j in zip(rows, cols)]


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate random weighted graphs as spanning tree input')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='graph.txt')
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('-b', '--binary', action='store_true')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args(argv)

    if args.nvertices < 1:
        parser.error('nvertices must be at least 1')

    try:
        adj_matrix = random_adjacency(args.nvertices, args.density,
                                      args.min_weight, args.max_weight, args.seed)
    except ValueError as e:
        parser.error(str(e))

    edges = adjacency_to_edges(adj_matrix)

    if not args.quiet:
        print(f'Generating a graph on {args.nvertices} vertices...')
        print(f'  Density: {args.density} ({len(edges)} edges)')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    if args.verbose:
        print()
        print('Graph adjacency matrix:')
        print(adj_matrix)

    write_graph(args.outfile, args.nvertices, edges, binary=args.binary)


if __name__ == '__main__':
    main()
