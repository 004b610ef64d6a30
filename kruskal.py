'''
Greedy spanning tree selection over a static edge list.

Edges are sorted by weight and examined one at a time. Connectivity is
tracked as a set of ordered node pairs rather than a union-find: accepting
(s, d) records the pair and then augments the set with the pairs implied
through s and d, e.g. accepting (a, b) while (x, a) is known adds (x, b).
'''
from typing import Iterator, List, Set, Tuple, Union


class Edge:
    def __init__(self, source: int, destination: int, weight: int) -> None:
        self._triple = (source, destination, weight)

    @property
    def source(self) -> int:
        return self._triple[0]

    @property
    def destination(self) -> int:
        return self._triple[1]

    @property
    def weight(self) -> int:
        return self._triple[2]

    @classmethod
    def from_line(cls, s: str) -> 'Edge':
        parts = s.split()
        if len(parts) != 3:
            raise ValueError(f'expected "<source> <destination> <weight>", got {s.strip()!r}')
        return cls(*[int(token) for token in parts])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._triple == other._triple

    def __hash__(self) -> int:
        return hash(self._triple)

    def __iter__(self) -> Iterator[int]:
        return iter(self._triple)

    def __repr__(self):
        return f'({self.source}, {self.destination}, {self.weight})'

    __str__ = __repr__


class SkipMarker:
    '''Produced when the examined edge was dropped because it closes a cycle.'''

    def __repr__(self):
        return 'SKIP'


class EndOfSequence:
    '''Produced once the tree is complete or no candidate edges remain.'''

    def __repr__(self):
        return 'END'


SKIP = SkipMarker()
END = EndOfSequence()

TraversalResult = Union[Edge, SkipMarker, EndOfSequence]


class EdgeStore:
    '''
    Append-only list of input edges plus a parallel (weight, index) list.

    Only the (weight, index) list is ever reordered or pruned, so an index
    always refers to the same stored edge.
    '''

    def __init__(self, node_count: int) -> None:
        if node_count <= 0:
            raise ValueError(f'node count must be positive, got {node_count}')

        self.node_count = node_count
        self.edges: List[Edge] = []
        self.weights: List[Tuple[int, int]] = []
        self.index = 0
        self._stored: Set[Edge] = set()

    def check_node(self, node: int) -> None:
        if not 0 <= node < self.node_count:
            raise ValueError(f'node {node} is out of range [0, {self.node_count})')

    def insert(self, source: int, destination: int, weight: int) -> bool:
        self.check_node(source)
        self.check_node(destination)

        # if (x,y,w) already exists, (y,x,w) is the same undirected edge
        if Edge(destination, source, weight) in self._stored:
            print(f'Can not insert edge ({source},{destination}). '
                  f'Since there exist another edge ({destination},{source}) in the graph')
            return False

        edge = Edge(source, destination, weight)
        self.edges.append(edge)
        self._stored.add(edge)
        self.weights.append((weight, self.index))
        self.index += 1
        return True

    def __len__(self) -> int:
        return len(self.edges)

    def __getitem__(self, index: int) -> Edge:
        return self.edges[index]


class ConnectivityTracker:
    '''
    Directed record of which node pairs are considered linked.

    Pairs are neither symmetric nor transitive on their own; whatever
    closure exists comes from PathFinder.augment_components.
    '''

    def __init__(self, node_count: int) -> None:
        self.node_count = node_count
        self.pairs: Set[Tuple[int, int]] = set()
        self.visited: Set[int] = set()

    def is_pair_connected(self, source: int, destination: int) -> bool:
        return (source, destination) in self.pairs

    def are_endpoints_known(self, source: int, destination: int) -> bool:
        # the two hits may come from different pairs
        source_found = any(first == source for first, _ in self.pairs)
        destination_found = any(second == destination for _, second in self.pairs)
        return source_found and destination_found

    def cycle_witnesses(self, source: int, destination: int) -> Iterator[Tuple[Tuple[int, int], Tuple[int, int]]]:
        # (source,k) and (destination,k) both known: both already reach k
        for k in range(self.node_count):
            if self.is_pair_connected(source, k) and self.is_pair_connected(destination, k):
                yield (source, k), (destination, k)

        # (k,source) and (k,destination) both known: k already reaches both
        for k in range(self.node_count):
            if self.is_pair_connected(k, source) and self.is_pair_connected(k, destination):
                yield (k, source), (k, destination)

    def would_cycle(self, source: int, destination: int) -> bool:
        return any(True for _ in self.cycle_witnesses(source, destination))

    def record_pair(self, source: int, destination: int) -> None:
        self.pairs.add((source, destination))
        self.visited.add(source)
        self.visited.add(destination)


class PathFinder:
    '''
    Sorts the stored edges and hands them out one decision at a time.

    Every call to traverse() returns exactly one of: the accepted Edge,
    SKIP (the examined edge would close a cycle and is dropped for good),
    or END (the tree holds node_count - 1 edges, or nothing is left).
    '''

    def __init__(self, node_count: int, verbose: bool = False) -> None:
        self.store = EdgeStore(node_count)
        self.tracker = ConnectivityTracker(node_count)
        self.verbose = verbose

        self.position = 0
        self.accepted_count = 0
        self.is_sorted = False

    @classmethod
    def from_edges(cls, node_count: int, edges, verbose: bool = False) -> 'PathFinder':
        pf = cls(node_count, verbose=verbose)
        for source, destination, weight in edges:
            pf.insert_new_edge(source, destination, weight)
        pf.sort_edges()
        return pf

    @property
    def node_count(self) -> int:
        return self.store.node_count

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message)

    def insert_new_edge(self, source: int, destination: int, weight: int) -> bool:
        if self.is_sorted:
            raise RuntimeError('can not insert edges after sort_edges()')
        return self.store.insert(source, destination, weight)

    def sort_edges(self) -> None:
        if self.is_sorted:
            raise RuntimeError('sort_edges() must be called exactly once')

        # stable, so equal weights keep insertion order
        self.store.weights.sort(key=lambda item: item[0])
        self.is_sorted = True

    def ordered_edges(self) -> List[Tuple[int, Edge]]:
        return [(index, self.store[index]) for _, index in self.store.weights]

    def print_edges(self) -> None:
        for index, edge in self.ordered_edges():
            print(f'Edge[{index}] => Source : {edge.source}, '
                  f'Destination: {edge.destination}, Weight: {edge.weight}')

    def traverse(self) -> TraversalResult:
        if not self.is_sorted:
            raise RuntimeError('sort_edges() must be called before traverse()')

        if self.accepted_count == self.node_count - 1:
            self._log(f'Spanning tree now contains {self.accepted_count} edges. Terminating...')
            return END

        weights = self.store.weights
        while self.position < len(weights):
            weight, index = weights[self.position]
            edge = self.store[index]
            source, destination = edge.source, edge.destination

            self._log(f'Processing edge ({source},{destination}) with weight {weight}')

            if self.tracker.is_pair_connected(source, destination):
                self._log(f'Edge ({source},{destination}) is already traversed. Skipping...')
                self.position += 1
                continue

            if self.tracker.would_cycle(source, destination):
                if self.verbose:
                    for first, second in self.tracker.cycle_witnesses(source, destination):
                        print(f'CYCLE exist regarding {first} and {second}')
                    print(f'Edge ({source},{destination}) will create a loop. Skipping...')
                # never reconsidered; the next entry slides into this position
                del weights[self.position]
                return SKIP

            self.tracker.record_pair(source, destination)
            self.accepted_count += 1
            self.augment_components(source, destination)
            self.position += 1
            return edge

        return END

    def augment_components(self, source: int, destination: int) -> None:
        # one pass over a snapshot; pairs added here are not rescanned
        for first, second in sorted(self.tracker.pairs):
            if second == source and first != destination:
                self._log(f'+++++ Augment traversed nodes with : ({first},{destination}) +++++')
                self.tracker.record_pair(first, destination)

            if first == destination and second != source:
                self._log(f'+++++ Augment traversed nodes with : ({source},{second}) +++++')
                self.tracker.record_pair(source, second)

    def __iter__(self) -> Iterator[TraversalResult]:
        result = self.traverse()
        while result is not END:
            yield result
            result = self.traverse()
