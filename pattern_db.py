#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pattern database of every cube state within PDB_MAX_DEPTH moves of solved.

Built with a breadth first search from the solved cube, so the first path
found to a state is a shortest one.  Each entry holds the depth and the path
of moves from solved to the state.  Since the move set is closed under
inversion, the depth is also the number of moves needed to solve the state,
and inverting the path solves it.

The table can be cached on disk as a compressed numpy archive.
"""

import os
import sys
import zipfile
import zlib
import numpy as np
from collections import deque as dq
from collections import namedtuple
from timeit import default_timer as timer
from rubiks_cube import (rubiks_cube, PDB_MOVES, PATH_SEP, is_redundant_move,
                         check_move)
from cube_net import NROWS, NCOLS, GRID_DTYPE

PDB_MAX_DEPTH = 4
DEFAULT_PDB_CACHE = 'rubik_pdb_depth4.npz'
KEY_SIZE = NROWS * NCOLS * np.dtype(GRID_DTYPE).itemsize

pdb_entry = namedtuple('pdb_entry', ['depth', 'path'])


class PatternCacheError(Exception):
    pass


class pattern_db():

    def __init__(self, max_depth=PDB_MAX_DEPTH, verbose=False):
        self.max_depth = max_depth
        self.verbose = verbose
        self.db = {}

    def __len__(self):
        return len(self.db)

    def __contains__(self, cube):
        return cube.key() in self.db

    def build(self):
        startts = timer()
        if self.verbose:
            print('PDB: Depth {0:d}'.format(self.max_depth))
        begcube = rubiks_cube()
        db = {begcube.key(): pdb_entry(0, ())}
        # initialize neighbor list
        nlist = dq([(begcube, ())])
        while len(nlist) > 0:
            curcube, curpath = nlist.popleft()
            curlevel = len(curpath) + 1
            for move in PDB_MOVES:
                if is_redundant_move(curpath, move):
                    continue
                newcube = curcube.after_move(move)
                newkey = newcube.key()
                # first visit is the shortest, never overwrite it
                if newkey in db:
                    continue
                newpath = curpath + (move,)
                db[newkey] = pdb_entry(curlevel, newpath)
                if curlevel < self.max_depth:
                    nlist.append((newcube, newpath))
        self.db = db
        if self.verbose:
            print('PDB ready. States: {0:d} (Time: {1:.1f}s)'.format(len(self.db), timer()-startts))
        return self

    # entry for the cube or None if it is not within max_depth of solved
    def lookup(self, cube):
        return self.db.get(cube.key())

    def depth_of(self, cube):
        entry = self.lookup(cube)
        if entry is None:
            return -1
        return entry.depth

    def path_of(self, cube):
        entry = self.lookup(cube)
        if entry is None:
            return None
        return entry.path

    def save(self, outfile):
        nent = len(self.db)
        keys = np.frombuffer(b''.join(self.db.keys()), dtype=np.uint8).reshape((nent, KEY_SIZE))
        depths = np.array([e.depth for e in self.db.values()], dtype=np.int8)
        paths = np.array([PATH_SEP.join(e.path) for e in self.db.values()], dtype=np.str_)
        # write through a file object so numpy does not append .npz
        with open(outfile, 'wb') as f:
            np.savez_compressed(f, keys=keys, depths=depths, paths=paths,
                                max_depth=np.array(self.max_depth))
        if self.verbose:
            print('PDB saved to disk: {0}'.format(outfile))

    def load(self, infile):
        try:
            with np.load(infile, allow_pickle=False) as data:
                keys = data['keys']
                depths = data['depths']
                paths = data['paths']
                max_depth = int(data['max_depth'])
        except (KeyError, ValueError, TypeError, EOFError, zipfile.BadZipFile, zlib.error) as err:
            raise PatternCacheError('Unreadable pattern database {0}: {1}'.format(infile, err)) from err

        if max_depth != self.max_depth:
            raise PatternCacheError('Pattern database {0} has depth {1:d}, wanted {2:d}'.format(infile, max_depth, self.max_depth))
        if keys.ndim != 2 or depths.ndim != 1 or paths.ndim != 1 or \
                keys.shape[1] != KEY_SIZE or \
                not keys.shape[0] == depths.shape[0] == paths.shape[0]:
            raise PatternCacheError('Pattern database {0} has inconsistent array shapes'.format(infile))
        # keys are raw grid bytes, any other dtype would never match a cube key
        if keys.dtype != np.uint8 or depths.dtype.kind not in 'iu':
            raise PatternCacheError('Pattern database {0} has wrong array types ({1}, {2})'.format(infile, keys.dtype, depths.dtype))

        db = {}
        for i in range(keys.shape[0]):
            path = tuple(m for m in str(paths[i]).split(PATH_SEP) if m)
            depth = int(depths[i])
            try:
                for move in path:
                    check_move(move)
            except ValueError as err:
                raise PatternCacheError('Bad move in pattern database {0}: {1}'.format(infile, err)) from err
            if depth != len(path) or depth > self.max_depth:
                raise PatternCacheError('Pattern database {0} entry {1:d} has depth {2:d} for a {3:d} move path'.format(infile, i, depth, len(path)))
            db[keys[i].tobytes()] = pdb_entry(depth, path)
        self.db = db
        if self.verbose:
            print('PDB loaded from disk. Size: {0:d}'.format(len(self.db)))
        return self

    def load_or_build(self, cachefile=None):
        """Load the cache if there is a usable one, else build the table.

        A rebuilt table is written back to cachefile so later runs can skip
        the search.  A cache that cannot be written is reported but the
        built table is still used.
        """
        if cachefile is not None and os.path.exists(cachefile):
            try:
                return self.load(cachefile)
            except (PatternCacheError, OSError) as err:
                print('PDB cache rejected, rebuilding: {0}'.format(err), file=sys.stderr)
        self.build()
        if cachefile is not None:
            try:
                self.save(cachefile)
            except OSError as err:
                print('Could not save PDB cache {0}: {1}'.format(cachefile, err), file=sys.stderr)
        return self
