#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Cost to go estimate for the best first search.

An exact pattern database hit gives the true distance.  Otherwise a
composite guess is made from how many stickers are out of place and from
how the 8 corner and 12 edge cubies sit compared to their solved slots.
The estimate is not admissible, it is only used to order the search.
"""

import numpy as np
from cube_net import Color, Face, SOLVED_GRID, STICKER_MASK, face_block

O, W, R, G, B, Y = Color.O, Color.W, Color.R, Color.G, Color.B, Color.Y


def _table(entries):
    # split [(coords, colors), ...] into row, col and color arrays
    coords = np.array([e[0] for e in entries], dtype=np.intp)
    colors = np.array([[int(c) for c in e[1]] for e in entries], dtype=np.int8)
    return coords[:, :, 0], coords[:, :, 1], colors


def _score_cubies(grid, rows, cols, colors, twisted, misplaced):
    # 0 if the cubie sits in its slot the right way round, twisted if it is
    # in its slot the wrong way round, misplaced if another cubie is there
    found = grid[rows, cols]
    aligned = np.all(found == colors, axis=1)
    sameset = np.all(np.sort(found, axis=1) == np.sort(colors, axis=1), axis=1)
    return np.where(aligned, 0, np.where(sameset, twisted, misplaced))


class heuristic_estimate():

    # sticker coordinates and solved colors of the 8 corner slots
    corner_rows, corner_cols, corner_colors = _table([
        ([(2, 3), (3, 2), (3, 3)], (O, G, W)),
        ([(2, 5), (3, 5), (3, 6)], (O, W, B)),
        ([(0, 3), (3, 11), (3, 0)], (O, Y, G)),
        ([(0, 5), (3, 8), (3, 9)], (O, B, Y)),
        ([(6, 3), (5, 2), (5, 3)], (R, G, W)),
        ([(6, 5), (5, 5), (5, 6)], (R, W, B)),
        ([(8, 3), (5, 11), (5, 0)], (R, Y, G)),
        ([(8, 5), (5, 8), (5, 9)], (R, B, Y)),
    ])
    # ... and of the 12 edge slots
    edge_rows, edge_cols, edge_colors = _table([
        ([(2, 4), (3, 4)], (O, W)),
        ([(1, 5), (3, 7)], (O, B)),
        ([(0, 4), (3, 10)], (O, Y)),
        ([(1, 3), (3, 1)], (O, G)),
        ([(4, 2), (4, 3)], (G, W)),
        ([(4, 5), (4, 6)], (W, B)),
        ([(4, 11), (4, 0)], (Y, G)),
        ([(4, 8), (4, 9)], (B, Y)),
        ([(5, 4), (6, 4)], (W, R)),
        ([(5, 7), (7, 5)], (B, R)),
        ([(5, 10), (8, 4)], (Y, R)),
        ([(5, 1), (7, 3)], (G, R)),
    ])
    # the simple distance lists the bottom corners starting from the side faces
    simple_corner_rows, simple_corner_cols, simple_corner_colors = _table([
        ([(2, 3), (3, 2), (3, 3)], (O, G, W)),
        ([(2, 5), (3, 5), (3, 6)], (O, W, B)),
        ([(0, 3), (3, 11), (3, 0)], (O, Y, G)),
        ([(0, 5), (3, 8), (3, 9)], (O, B, Y)),
        ([(5, 2), (5, 3), (6, 3)], (G, W, R)),
        ([(5, 5), (5, 6), (6, 5)], (W, B, R)),
        ([(5, 11), (5, 0), (8, 3)], (Y, G, R)),
        ([(5, 8), (5, 9), (8, 5)], (B, Y, R)),
    ])

    CORNER_TWISTED = 2
    CORNER_MISPLACED = 4
    EDGE_FLIPPED = 1
    EDGE_MISPLACED = 2

    def __init__(self, pdb=None, mode='composite'):
        if mode not in ('composite', 'simple'):
            raise ValueError('Unknown heuristic mode {0!r}'.format(mode))
        self.pdb = pdb
        self.mode = mode

    def estimate(self, cube):
        if cube.is_solved():
            return 0
        if self.pdb is not None:
            entry = self.pdb.lookup(cube)
            if entry is not None:
                return entry.depth
        if self.mode == 'simple':
            return self.simple_estimate(cube)
        return self.composite_estimate(cube)

    __call__ = estimate

    def composite_estimate(self, cube):
        if cube.is_solved():
            return 0
        grid = cube.grid
        pattern_score = self.analyze_patterns(grid)
        if pattern_score >= 0:
            return pattern_score

        hcorners = self.corner_heuristic(grid)
        hedges = self.edge_heuristic(grid)
        total = max(hcorners, hedges)
        minval = min(hcorners, hedges)
        # both layers badly disrupted, push the guess up
        if hcorners >= 8 and hedges >= 8:
            total = total + minval // 3
        elif hcorners >= 5 and hedges >= 5:
            total = total + minval // 4
        return total

    # Quick score from the count of stickers off their solved color.
    # Returns -1 when the cube is too far gone for this to say anything.
    def analyze_patterns(self, grid):
        mismatches = int(np.count_nonzero((grid != SOLVED_GRID) & STICKER_MASK))
        if mismatches == 0:
            return 0
        if mismatches <= 3:
            return 1
        if mismatches <= 6:
            return 2
        if mismatches <= 9:
            return 3

        if np.all(grid[face_block(Face.U)] == O):
            bottom_errors = int(np.count_nonzero(grid[face_block(Face.D)] != R))
            return max(1, bottom_errors // 3)
        return -1

    def corner_heuristic(self, grid):
        scores = _score_cubies(grid, self.corner_rows, self.corner_cols, self.corner_colors,
                               self.CORNER_TWISTED, self.CORNER_MISPLACED)
        wrong_position = int(np.count_nonzero(scores >= self.CORNER_MISPLACED))
        wrong_orientation = int(np.count_nonzero((scores > 0) & (scores < self.CORNER_MISPLACED)))

        final_score = int(scores.sum()) // 4
        final_score = final_score + wrong_position
        if wrong_orientation >= 4:
            final_score = final_score + 2
        elif wrong_orientation >= 2:
            final_score = final_score + 1
        return final_score

    def edge_heuristic(self, grid):
        scores = _score_cubies(grid, self.edge_rows, self.edge_cols, self.edge_colors,
                               self.EDGE_FLIPPED, self.EDGE_MISPLACED)
        misplaced = int(np.count_nonzero(scores >= self.EDGE_MISPLACED))
        flipped = int(np.count_nonzero(scores == self.EDGE_FLIPPED))

        final_score = int(scores.sum()) // 4
        final_score = final_score + misplaced // 2
        if flipped >= 4:
            final_score = final_score + 2
        elif flipped >= 2:
            final_score = final_score + 1
        return final_score

    # Cheaper estimate: summed per cubie distances scaled down
    def simple_estimate(self, cube):
        if cube.is_solved():
            return 0
        grid = cube.grid
        csteps = _score_cubies(grid, self.simple_corner_rows, self.simple_corner_cols,
                               self.simple_corner_colors, 3, 5).sum()
        esteps = _score_cubies(grid, self.edge_rows, self.edge_cols, self.edge_colors,
                               3, 4).sum()
        return int(csteps + esteps) // 8
