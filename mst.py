import argparse
import sys

from gconverter import load_graph
from kruskal import PathFinder
from spanning_tree import build


def parse_args(argv) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='mst',
                                     description='Build a least-cost spanning tree from an edge list')
    parser.add_argument('filename', help='graph file: node count, then one "<source> <destination> <weight>" per line')
    parser.add_argument('-b', '--binary', action='store_true',
                        help='read the binary format written by gconverter/graphgen')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='trace every decision and dump the sorted edges')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='only print the total cost')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        nvertices, edges = load_graph(args.filename, binary=args.binary)
        pf = PathFinder(nvertices, verbose=args.verbose)
        for source, destination, weight in edges:
            pf.insert_new_edge(source, destination, weight)
    except (OSError, ValueError) as e:
        print(f'mst: error: {e}', file=sys.stderr)
        return 1

    pf.sort_edges()
    if args.verbose:
        pf.print_edges()
        print('_____')

    tree = build(pf)

    if not args.quiet:
        print('Minimum Spanning Tree and its components: ')
    tree.report(quiet=args.quiet)
    return 0


if __name__ == '__main__':
    sys.exit(main())
