#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Geometry of the unfolded cube net and the text codec for it.

The cube is stored as a 9 x 12 grid laid out as a cross:

          U U U
          U U U
          U U U
    L L L F F F R R R B B B
    L L L F F F R R R B B B
    L L L F F F R R R B B B
          D D D
          D D D
          D D D

Cells outside the cross are unused and hold EMPTY.
"""

import enum
import numpy as np


class CubeFormatError(ValueError):
    pass


# Face identifiers name the physical faces (used for moves)
class Face(enum.Enum):
    F = 'F'
    B = 'B'
    L = 'L'
    R = 'R'
    U = 'U'
    D = 'D'


# Sticker colors, stored in the grid by their integer value
# O - orange (up), W - white (front), R - red (down), G - green (left),
# B - blue (right), Y - yellow (back)
class Color(enum.IntEnum):
    O = 0
    W = 1
    R = 2
    G = 3
    B = 4
    Y = 5


NROWS = 9
NCOLS = 12
EMPTY = -1
GRID_DTYPE = np.int8

# upper left corner of each face block in the net
FACE_ORIGIN = {Face.U: (0, 3), Face.L: (3, 0), Face.F: (3, 3),
               Face.R: (3, 6), Face.B: (3, 9), Face.D: (6, 3)}
# color each face carries on a solved cube
SOLVED_COLOR = {Face.U: Color.O, Face.L: Color.G, Face.F: Color.W,
                Face.R: Color.B, Face.B: Color.Y, Face.D: Color.R}
OPPOSITE_FACE = {Face.F: Face.B, Face.B: Face.F,
                 Face.L: Face.R, Face.R: Face.L,
                 Face.U: Face.D, Face.D: Face.U}


def face_block(face):
    # slices selecting the 3x3 block of a face
    r, c = FACE_ORIGIN[face]
    return slice(r, r+3), slice(c, c+3)


def face_center(face):
    r, c = FACE_ORIGIN[face]
    return r+1, c+1


def make_solved_grid():
    grid = np.full((NROWS, NCOLS), EMPTY, dtype=GRID_DTYPE)
    for face, color in SOLVED_COLOR.items():
        rows, cols = face_block(face)
        grid[rows, cols] = int(color)
    return grid


SOLVED_GRID = make_solved_grid()
# True on the 54 cells that carry a sticker
STICKER_MASK = SOLVED_GRID != EMPTY


def _row_letters(line):
    # drop the padding and any spacing between letters
    return ''.join(line.split())


def parse_grid(text):
    # Convert the nine line text net into the integer grid
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if len(lines) != NROWS:
        raise CubeFormatError('Expected {0:d} rows in cube description, got {1:d}'.format(NROWS, len(lines)))

    grid = np.full((NROWS, NCOLS), EMPTY, dtype=GRID_DTYPE)
    for i, line in enumerate(lines):
        letters = _row_letters(line)
        if 3 <= i <= 5:
            width, start = 12, 0
        else:
            width, start = 3, 3
        if len(letters) != width:
            raise CubeFormatError('Row {0:d} should hold {1:d} stickers, got {2:d}: {3!r}'.format(i, width, len(letters), line))
        for j, ch in enumerate(letters):
            try:
                grid[i, start+j] = int(Color[ch])
            except KeyError:
                raise CubeFormatError('Unknown sticker color {0!r} in row {1:d}'.format(ch, i)) from None

    validate_grid(grid)
    return grid


def validate_grid(grid):
    if grid.shape != (NROWS, NCOLS):
        raise CubeFormatError('Grid must be {0:d}x{1:d}, got {2}'.format(NROWS, NCOLS, grid.shape))
    if np.any(grid[~STICKER_MASK] != EMPTY):
        raise CubeFormatError('Stickers found outside of the cube net')
    stickers = grid[STICKER_MASK].astype(np.int64)
    if np.any(stickers < 0) or np.any(stickers >= len(Color)):
        raise CubeFormatError('Grid holds values that are not sticker colors')
    counts = np.bincount(stickers, minlength=len(Color))
    if np.any(counts != 9):
        raise CubeFormatError('Each color must appear exactly 9 times, counts: {0}'.format(counts.tolist()))
    centers = {int(grid[face_center(f)]) for f in Face}
    if len(centers) != len(Face):
        raise CubeFormatError('Face centers must carry six distinct colors')


def format_grid(grid):
    # Render the grid back into the text net
    out = []
    for i in range(NROWS):
        if 3 <= i <= 5:
            cells = grid[i, :]
            pad = ''
        else:
            cells = grid[i, 3:6]
            pad = '   '
        out.append(pad + ''.join(Color(int(v)).name for v in cells))
    return '\n'.join(out) + '\n'


def read_cube_file(path):
    with open(path, 'r') as f:
        return parse_grid(f.read())


def write_solution(path, solution):
    with open(path, 'w') as f:
        f.write(solution)
