import networkx as nx
import random

from typing import Any, Callable, Iterable, Tuple

from gconverter import write_graph


def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rand = random.Random(seed)
    return lambda _a, _b: rand.randint(low, high)

def to_edge_list(g: nx.classes.graph.Graph,
                 decide_weight: Callable[[Any, Any], int],
                 nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> list[Tuple[int, int, int]]:
    edges = []
    for edge in g.edges:
        # Convert edge names to index
        u = nodename_to_idx(edge[0])
        v = nodename_to_idx(edge[1])
        edges.append((u, v, decide_weight(edge[0], edge[1])))
    return edges

def to_output_file(g: nx.classes.graph.Graph,
                   decide_weight: Callable[[Any, Any], int],
                   fname: str,
                   binary: bool=False,
                   nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> None:
    edges = to_edge_list(g, decide_weight, nodename_to_idx)
    write_graph(fname, g.number_of_nodes(), edges, binary=binary)

def to_nx_graph(nvertices: int, edges: Iterable[Tuple[int, int, int]]) -> nx.Graph:
    # parallel edges collapse onto the lightest one
    g = nx.Graph()
    g.add_nodes_from(range(nvertices))
    for u, v, w in edges:
        if not g.has_edge(u, v) or w < g[u][v]['weight']:
            g.add_edge(u, v, weight=w)
    return g

def reference_mst_weight(nvertices: int, edges: Iterable[Tuple[int, int, int]]) -> int:
    mst = nx.minimum_spanning_tree(to_nx_graph(nvertices, edges), weight='weight')
    return sum(d['weight'] for _, _, d in mst.edges(data=True))

def is_spanning_tree(nvertices: int, edges: Iterable[Tuple[int, int, int]]) -> bool:
    g = nx.MultiGraph()
    g.add_nodes_from(range(nvertices))
    g.add_weighted_edges_from(tuple(e) for e in edges)
    return nx.is_tree(g)

def is_forest(nvertices: int, edges: Iterable[Tuple[int, int, int]]) -> bool:
    g = nx.MultiGraph()
    g.add_nodes_from(range(nvertices))
    g.add_weighted_edges_from(tuple(e) for e in edges)
    return nx.is_forest(g)
