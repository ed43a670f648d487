#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Quarter turn of one face on the unfolded cube net.

A turn touches the 9 stickers of the face plus the 12 border stickers of the
four neighboring faces.  These 21 cells are gathered into a 7x3 local view:
rows 0-2 hold the face itself and rows 3-6 hold the four border strips in the
cyclic order they move into each other.  A clockwise quarter turn rotates the
3x3 block and rolls the strips one position forward.
"""

import numpy as np
from cube_net import Face

# For each face the (row, col) net cell of each local view cell,
# read row by row through the 7x3 view
coord_table = {
    Face.F: [(3, 3), (3, 4), (3, 5), (4, 3), (4, 4), (4, 5), (5, 3), (5, 4), (5, 5),
             (2, 3), (2, 4), (2, 5),
             (3, 6), (4, 6), (5, 6),
             (6, 5), (6, 4), (6, 3),
             (5, 2), (4, 2), (3, 2)],
    Face.B: [(3, 9), (3, 10), (3, 11), (4, 9), (4, 10), (4, 11), (5, 9), (5, 10), (5, 11),
             (0, 5), (0, 4), (0, 3),
             (3, 0), (4, 0), (5, 0),
             (8, 3), (8, 4), (8, 5),
             (5, 8), (4, 8), (3, 8)],
    Face.R: [(3, 6), (3, 7), (3, 8), (4, 6), (4, 7), (4, 8), (5, 6), (5, 7), (5, 8),
             (2, 5), (1, 5), (0, 5),
             (3, 9), (4, 9), (5, 9),
             (8, 5), (7, 5), (6, 5),
             (5, 5), (4, 5), (3, 5)],
    Face.L: [(3, 0), (3, 1), (3, 2), (4, 0), (4, 1), (4, 2), (5, 0), (5, 1), (5, 2),
             (0, 3), (1, 3), (2, 3),
             (3, 3), (4, 3), (5, 3),
             (6, 3), (7, 3), (8, 3),
             (5, 11), (4, 11), (3, 11)],
    Face.U: [(0, 3), (0, 4), (0, 5), (1, 3), (1, 4), (1, 5), (2, 3), (2, 4), (2, 5),
             (3, 11), (3, 10), (3, 9),
             (3, 8), (3, 7), (3, 6),
             (3, 5), (3, 4), (3, 3),
             (3, 2), (3, 1), (3, 0)],
    Face.D: [(6, 3), (6, 4), (6, 5), (7, 3), (7, 4), (7, 5), (8, 3), (8, 4), (8, 5),
             (5, 3), (5, 4), (5, 5),
             (5, 6), (5, 7), (5, 8),
             (5, 9), (5, 10), (5, 11),
             (5, 0), (5, 1), (5, 2)],
}

VIEW_SHAPE = (7, 3)


class face_rotation():

    def __init__(self, face):
        self.face = face
        coords = np.array(coord_table[face], dtype=np.intp)
        # index arrays for fancy indexing into the main grid
        self.rows = coords[:, 0].reshape(VIEW_SHAPE)
        self.cols = coords[:, 1].reshape(VIEW_SHAPE)

    # pull the 21 cells of the local view out of the main grid
    def extract(self, grid):
        return grid[self.rows, self.cols]

    # New 7x3 view after a clockwise quarter turn, view itself is untouched
    def rotate(self, view):
        newview = np.empty_like(view)
        # (r, c) -> (c, 2-r) is a clockwise block rotation
        newview[0:3] = np.rot90(view[0:3], -1)
        # strip r moves to strip r+1, the last one wraps to the first
        newview[3:7] = np.roll(view[3:7], 1, axis=0)
        return newview

    def write_back(self, grid, view):
        grid[self.rows, self.cols] = view
        return grid

    # One clockwise quarter turn of this face, done in place on grid
    def quarter_turn(self, grid):
        return self.write_back(grid, self.rotate(self.extract(grid)))


# one engine per face, they hold nothing but their index arrays
engines = {face: face_rotation(face) for face in Face}


def quarter_turn(grid, face):
    return engines[face].quarter_turn(grid)
