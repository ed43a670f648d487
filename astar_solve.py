#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Best first (A* style) search from a scrambled cube back to solved.

Nodes are ranked by f = g + h, g the moves taken so far and h the heuristic
estimate.  Equal f values come out in the order they went in.  Revisits
are handled by lazy deletion: the closed dict keeps the best g known for a
state and stale queue entries are skipped when popped.  The search stops
on a solved cube, on any state in the pattern database (the inverted
database path finishes the solve), when the frontier runs dry, or when the
iteration budget is spent.
"""

import heapq
import itertools
from timeit import default_timer as timer
from rubiks_cube import SEARCH_MOVES, PATH_SEP, invert_path, is_redundant_move
from heuristic_estimate import heuristic_estimate

MAX_ITERATIONS = 7000
LOG_EVERY = 100

SOLVED = 'solved'
BUDGET_EXCEEDED = 'budget_exceeded'
EXHAUSTED = 'exhausted'


class search_node():

    __slots__ = ('state', 'path', 'g', 'h')

    def __init__(self, state, path, h):
        self.state = state
        self.path = path
        self.g = len(path)
        self.h = h

    @property
    def f(self):
        return self.g + self.h


class search_result():

    def __init__(self, status, moves=None, iterations=0, elapsed=0.0):
        self.status = status
        self.moves = moves
        self.iterations = iterations
        self.elapsed = elapsed

    @property
    def solved(self):
        return self.status == SOLVED

    # flat move string as written to the output file
    @property
    def solution(self):
        if self.moves is None:
            return None
        return ''.join(self.moves)

    def __repr__(self):
        return 'search_result({0}, moves={1!r}, iterations={2:d})'.format(self.status, self.solution, self.iterations)


class astar_solve():

    def __init__(self, pdb=None, heuristic=None, max_iterations=MAX_ITERATIONS,
                 log_every=LOG_EVERY, verbose=False):
        self.pdb = pdb
        if heuristic is None:
            heuristic = heuristic_estimate(pdb)
        self.heuristic = heuristic
        self.max_iterations = max_iterations
        self.log_every = log_every
        self.verbose = verbose

    def make_node(self, cube, path):
        return search_node(cube, path, self.heuristic.estimate(cube))

    def solve(self, cube):
        startts = timer()
        closed = {}
        frontier = []
        # insertion counter breaks ties between equal f first in first out
        order = itertools.count()

        root = self.make_node(cube.clone(), ())
        heapq.heappush(frontier, (root.f, next(order), root))
        closed[root.state.key()] = 0

        if self.verbose:
            print('A* search, step limit {0:d}'.format(self.max_iterations))

        iterations = 0
        while len(frontier) > 0:
            iterations = iterations + 1
            if iterations > self.max_iterations:
                if self.verbose:
                    print('Solver: Hit step limit ({0:d}). Aborting.'.format(self.max_iterations))
                return search_result(BUDGET_EXCEEDED, None, iterations, timer()-startts)

            f, seq, curnode = heapq.heappop(frontier)
            curkey = curnode.state.key()
            # a cheaper way here was already found, this entry is stale
            if curkey in closed and closed[curkey] < curnode.g:
                continue

            if self.verbose and self.log_every and iterations % self.log_every == 0:
                self.print_status(iterations, len(frontier), curnode)

            if self.pdb is not None:
                entry = self.pdb.lookup(curnode.state)
                if entry is not None:
                    # the stored path goes from solved to here, undo it
                    moves = curnode.path + invert_path(entry.path)
                    return self.success(moves, iterations, startts)

            if curnode.state.is_solved():
                return self.success(curnode.path, iterations, startts)

            closed[curkey] = curnode.g

            newg = curnode.g + 1
            for move in SEARCH_MOVES:
                if is_redundant_move(curnode.path, move):
                    continue
                newcube = curnode.state.after_move(move)
                newkey = newcube.key()
                if newkey not in closed or closed[newkey] > newg:
                    closed[newkey] = newg
                    newnode = self.make_node(newcube, curnode.path + (move,))
                    heapq.heappush(frontier, (newnode.f, next(order), newnode))

        if self.verbose:
            print('Solver: Frontier exhausted after {0:d} steps without a solution'.format(iterations))
        return search_result(EXHAUSTED, None, iterations, timer()-startts)

    def success(self, moves, iterations, startts):
        result = search_result(SOLVED, tuple(moves), iterations, timer()-startts)
        if self.verbose:
            print('Steps {0:d}'.format(iterations))
            print('Solution: {0}'.format(result.solution))
            print('Time: {0:.1f} ms'.format(result.elapsed*1000.0))
        return result

    def print_status(self, steps, queue_size, node):
        print('Steps: {0:d} | Queue: {1:d}'.format(steps, queue_size))
        print('   -> Path: {0}'.format(PATH_SEP.join(node.path)))
        print('   -> Cost (g/h/f): {0:d} / {1:d} / {2:d}'.format(node.g, node.h, node.f))
