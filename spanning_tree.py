from typing import List

from kruskal import END, SKIP, Edge, PathFinder


class SpanningTree:
    def __init__(self) -> None:
        self.edges: List[Edge] = []
        self.cost = 0

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)
        self.cost += edge.weight

    def __len__(self) -> int:
        return len(self.edges)

    def report(self, quiet: bool = False) -> None:
        if not quiet:
            for edge in self.edges:
                print(f'From {edge.source}, To: {edge.destination}, Cost: {edge.weight}')
        print(f'Cost of the Spanning Tree : {self.cost}')


def build(path_finder: PathFinder) -> SpanningTree:
    '''Pull decisions from path_finder until END, keeping the accepted edges.'''
    tree = SpanningTree()

    result = path_finder.traverse()
    while result is not END:
        # edge would have created a cycle, nothing to add
        if result is not SKIP:
            tree.add_edge(result)
        result = path_finder.traverse()

    return tree
