## Runs the path finder on generated graphs and compares it with networkx

import argparse
import time

from typing import Any, Callable, Dict, List

import networkx as nx

import nx_utils
from kruskal import PathFinder
from spanning_tree import build


def run_once(nvertices: int, edges: List[Any]) -> Dict[str, Any]:
    start = time.perf_counter()
    pf = PathFinder.from_edges(nvertices, edges)
    init_time = time.perf_counter() - start

    start = time.perf_counter()
    tree = build(pf)
    compute_time = time.perf_counter() - start

    return {
        'init_time': init_time,
        'compute_time': compute_time,
        'weight': tree.cost,
        'nedges': len(tree),
        'is_tree': nx_utils.is_spanning_tree(nvertices, tree.edges),
    }

def run_test(g: nx.classes.graph.Graph,
             decide_weight: Callable[[Any, Any], int],
             reps: int,
             nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> Dict[str, Any]:
    nvertices = g.number_of_nodes()
    edges = nx_utils.to_edge_list(g, decide_weight, nodename_to_idx)

    runs = [run_once(nvertices, edges) for _ in range(reps)]
    weights = [run['weight'] for run in runs]
    if min(weights) != max(weights):
        raise RuntimeError(f'inconsistent outputs across runs: {weights}')

    return {
        'nvertices': nvertices,
        'nedges': len(edges),
        'init_time': sum(run['init_time'] for run in runs) / reps,
        'avg_compute_time': sum(run['compute_time'] for run in runs) / reps,
        'weight': weights[0],
        'tree_edges': runs[0]['nedges'],
        'is_tree': runs[0]['is_tree'],
        'reference_weight': nx_utils.reference_mst_weight(nvertices, edges),
    }

def print_stats(all_metrics: Dict[str, Dict[str, Any]]) -> None:
    for (test, metrics) in all_metrics.items():
        gap = metrics['weight'] - metrics['reference_weight']
        print(f'{test} (n={metrics["nvertices"]}, m={metrics["nedges"]}):')
        print(f'    Compute time = {metrics["avg_compute_time"]:0.4f}s,  Init time = {metrics["init_time"]:0.4f}s')
        print(f'    Weight = {metrics["weight"]},  networkx MST weight = {metrics["reference_weight"]},  gap = {gap}')
        print(f'    Edges = {metrics["tree_edges"]}/{metrics["nvertices"] - 1},  spanning tree: {metrics["is_tree"]}')
        print()


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog='mstbench',
                                     description='Benchmark the path finder against networkx')
    parser.add_argument('--reps',
                        default=3,
                        help='the number of times to repeat each experiment',
                        type=int)
    parser.add_argument('-s', '--seed',
                        default=0,
                        help='the seed value to use for generating random graphs',
                        type=int)
    parser.add_argument('--min-weight',
                        default=1,
                        help='the minimum edge weight in random graphs',
                        type=int)
    parser.add_argument('--max-weight',
                        default=1000,
                        help='the maximum edge weight in random graphs',
                        type=int)

    args = parser.parse_args(argv)

    if args.reps < 1:
        parser.error('--reps must be at least 1')

    def hypercube_idx(node: tuple) -> int:
        return sum(node[-i-1]* 2**i for i in range(len(node)))

    tests = {
        '2-degree Circulant n=200': (nx.circulant_graph(200, [1, 2]), int),
        'Hypercube d=6, n=64': (nx.hypercube_graph(6), hypercube_idx),
        'Connected Caveman Graph, 10 groups of size k=8, n=80': (nx.connected_caveman_graph(10, 8), int),
        'Binomial Graph, p=0.05 n=150': (nx.fast_gnp_random_graph(150, 0.05, seed=args.seed), int),
    }

    all_metrics = {}
    for (test_name, (g, nodename_to_idx)) in tests.items():
        print(f'Running test "{test_name}"...')
        all_metrics[test_name] = run_test(g,
                                          nx_utils.arbitrary_weight(args.min_weight, args.max_weight, args.seed),
                                          args.reps,
                                          nodename_to_idx=nodename_to_idx)
    print()

    print_stats(all_metrics)


if __name__ == '__main__':
    main()
