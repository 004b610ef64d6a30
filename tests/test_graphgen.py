import numpy as np
import pytest

from gconverter import read_bin, read_text
from graphgen import adjacency_to_edges, main, random_adjacency


def test_random_adjacency_shape() -> None:
    adj = random_adjacency(10, density=0.4, min_weight=5, max_weight=9, seed=1)

    assert adj.shape == (10, 10)
    assert np.count_nonzero(adj) == int(0.4 * 10 * 9 / 2)
    # upper triangle only, no self-loops
    assert not np.tril(adj).any()
    weights = adj[adj != 0]
    assert weights.min() >= 5 and weights.max() <= 9


def test_random_adjacency_is_seeded() -> None:
    assert np.array_equal(random_adjacency(8, seed=3), random_adjacency(8, seed=3))


def test_full_density() -> None:
    adj = random_adjacency(5, density=1.0, seed=0)
    assert len(adjacency_to_edges(adj)) == 10


@pytest.mark.parametrize('kwargs', [
    {'density': 1.5},
    {'density': -0.1},
    {'min_weight': 10, 'max_weight': 2},
    {'min_weight': -3, 'max_weight': 3},
])
def test_random_adjacency_rejects(kwargs) -> None:
    with pytest.raises(ValueError):
        random_adjacency(5, **kwargs)


def test_adjacency_to_edges() -> None:
    adj = np.array([[0, 4, 0],
                    [0, 0, 2],
                    [0, 0, 0]])
    assert adjacency_to_edges(adj) == [(0, 1, 4), (1, 2, 2)]


def test_main_writes_text(tmp_path, capsys) -> None:
    out = tmp_path / 'graph.txt'
    main(['6', '-o', str(out), '-d', '0.5', '-s', '7'])

    nvertices, edges = read_text(out)
    assert nvertices == 6
    assert len(edges) == int(0.5 * 6 * 5 / 2)
    assert 'Generating a graph on 6 vertices...' in capsys.readouterr().out


def test_main_writes_binary(tmp_path, capsys) -> None:
    out = tmp_path / 'graph.bin'
    main(['5', '-o', str(out), '-s', '2', '-b', '-q'])

    nvertices, edges = read_bin(out)
    assert nvertices == 5
    assert len(edges) == 5
    assert capsys.readouterr().out == ''
