'''
File format:

<nvertices> [<nedges>]
<v1> <v2> <w>
<v1> <v2> <w>
...

Binary files hold the same numbers as little-endian 4-byte ints, with the
edge count always present.
'''
import os
from typing import List, Tuple

import numpy as np

RawEdge = Tuple[int, int, int]


def _to_bin(num: int) -> bytes:
    return int(num).to_bytes(length=4, byteorder='little', signed=True)


def read_text(fname: str) -> Tuple[int, List[RawEdge]]:
    nvertices = None
    edges = []

    with open(fname, 'r') as f:
        for lineno, line in enumerate(f, start=1):
            parts = line.split()
            if not parts or parts[0].startswith('#'):
                continue

            try:
                numbers = [int(token) for token in parts]
            except ValueError:
                raise ValueError(f'{fname}:{lineno}: non-integer token in {line.strip()!r}') from None

            if nvertices is None:
                # header may also carry the edge count, which is not needed
                nvertices = numbers[0]
                continue

            if len(numbers) != 3:
                raise ValueError(f'{fname}:{lineno}: expected 3 numbers, got {len(numbers)}')
            edges.append((numbers[0], numbers[1], numbers[2]))

    if nvertices is None:
        raise ValueError(f'{fname}: missing node count')

    return nvertices, edges


def read_bin(fname: str) -> Tuple[int, List[RawEdge]]:
    if os.path.getsize(fname) % 4 != 0:
        raise ValueError(f'{fname}: size is not a multiple of 4 bytes')

    data = np.fromfile(fname, dtype='<i4')
    if len(data) < 2:
        raise ValueError(f'{fname}: missing header')

    nvertices, nedges = int(data[0]), int(data[1])
    body = data[2:]
    if nedges < 0 or len(body) != 3 * nedges:
        raise ValueError(f'{fname}: expected {nedges} edges, found {len(body) / 3:g}')

    edges = [(int(u), int(v), int(w)) for u, v, w in body.reshape(-1, 3)]
    return nvertices, edges


def load_graph(fname: str, binary: bool = False) -> Tuple[int, List[RawEdge]]:
    if binary:
        return read_bin(fname)
    return read_text(fname)


def write_text(fname: str, nvertices: int, edges) -> None:
    edges = list(edges)
    with open(fname, 'w') as f:
        f.write(f'{nvertices} {len(edges)}\n')
        for u, v, w in edges:
            f.write(f'{u} {v} {w}\n')


def write_bin(fname: str, nvertices: int, edges) -> None:
    edges = list(edges)
    with open(fname, 'wb') as f:
        f.write(_to_bin(nvertices))
        f.write(_to_bin(len(edges)))
        for u, v, w in edges:
            f.write(_to_bin(u))
            f.write(_to_bin(v))
            f.write(_to_bin(w))


def write_graph(fname: str, nvertices: int, edges, binary: bool = False) -> None:
    if binary:
        write_bin(fname, nvertices, edges)
    else:
        write_text(fname, nvertices, edges)


def text_to_bin(infile_name: str, outfile_name: str) -> None:
    nvertices, edges = read_text(infile_name)
    write_bin(outfile_name, nvertices, edges)


def main(argv=None) -> None:
    import argparse

    parser = argparse.ArgumentParser(prog='gconverter',
                                     description='Convert between graph formats')
    parser.add_argument('-i', '--infile', required=True)
    parser.add_argument('-o', '--outfile', required=True)

    args = parser.parse_args(argv)

    text_to_bin(args.infile, args.outfile)


if __name__ == '__main__':
    main()
