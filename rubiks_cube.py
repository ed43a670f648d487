#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Cube state on the unfolded net and the move algebra.

A move is a face letter repeated 1-3 times, e.g. "R", "RR", "RRR", meaning
90, 180 or 270 degree clockwise turns of that face.  A path of moves is
kept as a tuple of these tokens; the solution written out is the tokens
joined with no separator.
"""

import numpy as np
import face_rotation as fr
from cube_net import (Face, OPPOSITE_FACE, GRID_DTYPE, SOLVED_GRID,
                      face_block, format_grid, parse_grid, read_cube_file,
                      validate_grid)

# Moves in the order they are tried when building the pattern database
PDB_MOVES = ("F", "B", "L", "R", "U", "D",
             "FF", "BB", "LL", "RR", "UU", "DD",
             "FFF", "BBB", "LLL", "RRR", "UUU", "DDD")
# ... and when expanding nodes during the search
SEARCH_MOVES = ("F", "B", "L", "R", "U", "D",
                "FF", "BB", "LL", "RR", "UU", "DD",
                "FFF", "LLL", "RRR", "UUU", "DDD", "BBB")
# separator used when a path is shown as a single string
PATH_SEP = "|"

face_letters = {f.value: f for f in Face}


def move_face(move):
    return face_letters[move[0]]


def check_move(move):
    if not 1 <= len(move) <= 3 or move[0] not in face_letters or move.count(move[0]) != len(move):
        raise ValueError('Invalid move token {0!r}'.format(move))
    return move


def invert_move(move):
    # 1 turn <-> 3 turns, 2 turns is its own inverse
    return move[0] * (4 - len(move))


def invert_path(path):
    return tuple(invert_move(m) for m in reversed(path))


def path_string(path, sep=PATH_SEP):
    return sep.join(path)


def parse_moves(text):
    """Split a move string into canonical move tokens.

    Accepts a flat string ("FFFRUU"), a separated path ("FFF|R|UU") or
    whitespace separated tokens.  Consecutive turns of the same face are
    merged, four quarter turns cancel out.
    """
    moves = []
    curface = None
    count = 0
    for ch in text:
        if ch == PATH_SEP or ch.isspace():
            continue
        if ch not in face_letters:
            raise ValueError('Unknown face letter {0!r} in move string'.format(ch))
        if ch == curface:
            count = count + 1
            continue
        if curface is not None and count % 4:
            moves.append(curface * (count % 4))
        curface = ch
        count = 1
    if curface is not None and count % 4:
        moves.append(curface * (count % 4))
    return tuple(moves)


def is_redundant_move(path, move):
    """True if move only repeats work the end of path already does.

    (a) same face as the last move and together at least a full turn
    (b) the last moves are all on the opposite face, and the move just before
        them was on this face: opposite faces commute so the same state is
        reached by turning this face earlier
    """
    if not path:
        return False
    last = path[-1]
    face = move[0]
    if last[0] == face:
        return len(last) + len(move) >= 4

    opposite = OPPOSITE_FACE[face_letters[face]].value
    i = len(path) - 1
    while i >= 0 and path[i][0] == opposite:
        i = i - 1
    return i < len(path) - 1 and i >= 0 and path[i][0] == face


class rubiks_cube():

    def __init__(self, grid=None):
        if grid is None:
            self.grid = SOLVED_GRID.copy()
        else:
            self.grid = np.array(grid, dtype=GRID_DTYPE)

    @classmethod
    def from_text(cls, text):
        return cls(parse_grid(text))

    @classmethod
    def from_file(cls, path):
        return cls(read_cube_file(path))

    def validate(self):
        validate_grid(self.grid)
        return self

    def quarter_turn(self, face):
        fr.quarter_turn(self.grid, face)
        return self

    # Apply one move token in place, as len(move) quarter turns
    def apply_move(self, move):
        check_move(move)
        face = move_face(move)
        for i in range(len(move)):
            self.quarter_turn(face)
        return self

    def apply_moves(self, moves):
        if isinstance(moves, str):
            moves = parse_moves(moves)
        for move in moves:
            self.apply_move(move)
        return self

    # Copy of the cube with move applied, self is left as it was
    def after_move(self, move):
        return self.clone().apply_move(move)

    def clone(self):
        return rubiks_cube(self.grid)

    # bytes of the grid; fixed shape and dtype make this one to one
    def key(self):
        return self.grid.tobytes()

    def is_solved(self):
        seen = set()
        for face in Face:
            block = self.grid[face_block(face)]
            color = block[1, 1]
            if not np.all(block == color):
                return False
            seen.add(int(color))
        return len(seen) == len(Face)

    def __eq__(self, other):
        if not isinstance(other, rubiks_cube):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def __str__(self):
        return format_grid(self.grid)

    def __repr__(self):
        return 'rubiks_cube(\n{0})'.format(format_grid(self.grid))
