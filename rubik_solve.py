#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Solve a scrambled cube read from a text net and write the moves to a file.

    rubik-solve scrambled.txt solution.txt

The input is the nine line unfolded net (see cube_net.py).  The output is a
single line of move letters with no separators, e.g. "FFFUU" for F' U2.
Nothing is written when the cube cannot be read or no solution is found.
"""

import argparse
import sys
from timeit import default_timer as timer
from cube_net import CubeFormatError, write_solution
from rubiks_cube import rubiks_cube
from pattern_db import pattern_db, PDB_MAX_DEPTH, DEFAULT_PDB_CACHE
from heuristic_estimate import heuristic_estimate
from astar_solve import astar_solve, MAX_ITERATIONS, LOG_EVERY


def make_parser():
    parser = argparse.ArgumentParser(prog='rubik-solve',
            description='Solve a 3x3 cube with a pattern database guided best first search')
    parser.add_argument(action='store', dest='input_file', help='text file holding the scrambled cube net')
    parser.add_argument(action='store', dest='output_file', help='file the move string is written to')
    parser.add_argument('--pdb-cache', action='store', default=DEFAULT_PDB_CACHE,
            help='pattern database cache file, built and saved if missing (default %(default)s)')
    parser.add_argument('--no-cache', action='store_true',
            help='always build the pattern database and do not save it')
    parser.add_argument('--max-iterations', action='store', type=int, default=MAX_ITERATIONS,
            help='search step limit (default %(default)d)')
    parser.add_argument('--heuristic', action='store', choices=['composite', 'simple'],
            default='composite', help='fallback estimate for states outside the pattern database')
    parser.add_argument('--log-every', action='store', type=int, default=LOG_EVERY,
            help='print search progress every N steps, 0 turns it off (default %(default)d)')
    parser.add_argument('-q', '--quiet', action='store_true', help='only print errors')
    return parser


def main(argv=None):
    args = make_parser().parse_args(argv)
    verbose = not args.quiet
    startts = timer()

    try:
        cube = rubiks_cube.from_file(args.input_file)
    except CubeFormatError as err:
        print('Error: Invalid file format. {0}'.format(err), file=sys.stderr)
        return 1
    except OSError as err:
        print('Error: Could not read input file. {0}'.format(err), file=sys.stderr)
        return 1

    cachefile = None if args.no_cache else args.pdb_cache
    pdb = pattern_db(PDB_MAX_DEPTH, verbose=verbose).load_or_build(cachefile)
    if verbose:
        print('Elapsed time for setup (s) {0:.1f}'.format(timer()-startts))
        print('-' * 78)
        print('A* search for {0}:'.format(args.output_file))

    solver = astar_solve(pdb, heuristic_estimate(pdb, args.heuristic),
                         max_iterations=args.max_iterations,
                         log_every=args.log_every, verbose=verbose)
    result = solver.solve(cube)
    if not result.solved:
        print('No solution: {0} after {1:d} steps, nothing written'.format(result.status, result.iterations), file=sys.stderr)
        return 2

    try:
        write_solution(args.output_file, result.solution)
    except OSError as err:
        print('Error: Could not write output file. {0}'.format(err), file=sys.stderr)
        return 1
    if verbose:
        print('Output in: {0}'.format(args.output_file))
        print('Elapsed time including setup (s) {0:.1f}'.format(timer()-startts))
    return 0


if __name__ == '__main__':
    sys.exit(main())
