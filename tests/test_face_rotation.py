import numpy as np
import pytest
import face_rotation as fr
from cube_net import Face, Color, SOLVED_GRID, STICKER_MASK, GRID_DTYPE


@pytest.mark.parametrize('face', list(Face))
def test_coord_table_covers_21_net_cells(face):
    cells = fr.coord_table[face]
    assert len(cells) == 21
    assert len(set(cells)) == 21
    for r, c in cells:
        assert STICKER_MASK[r, c]


@pytest.mark.parametrize('face', list(Face))
def test_four_quarter_turns_are_identity(face):
    grid = np.arange(108, dtype=GRID_DTYPE).reshape((9, 12))
    before = grid.copy()
    for i in range(4):
        fr.quarter_turn(grid, face)
    assert np.array_equal(grid, before)


@pytest.mark.parametrize('face', list(Face))
def test_quarter_turn_only_touches_its_cells(face):
    grid = np.arange(108, dtype=GRID_DTYPE).reshape((9, 12))
    before = grid.copy()
    fr.quarter_turn(grid, face)
    touched = np.zeros((9, 12), dtype=bool)
    for r, c in fr.coord_table[face]:
        touched[r, c] = True
    assert np.array_equal(grid[~touched], before[~touched])
    assert not np.array_equal(grid[touched], before[touched])


def test_rotate_local_view():
    grid = np.arange(108, dtype=GRID_DTYPE).reshape((9, 12))
    engine = fr.face_rotation(Face.F)
    old = engine.extract(grid)
    saved = old.copy()
    new = engine.rotate(old)
    # the extracted view and the grid are left alone
    assert np.array_equal(old, saved)
    assert np.array_equal(engine.extract(grid), saved)
    # block: (r, c) -> (c, 2-r)
    for r in range(3):
        for c in range(3):
            assert new[c, 2-r] == old[r, c]
    # strips advance one position, the last wraps to the first
    assert np.array_equal(new[4], old[3])
    assert np.array_equal(new[5], old[4])
    assert np.array_equal(new[6], old[5])
    assert np.array_equal(new[3], old[6])


def test_front_turn_on_solved_cube():
    grid = SOLVED_GRID.copy()
    fr.quarter_turn(grid, Face.F)
    assert np.all(grid[3:6, 3:6] == Color.W)
    # left face stickers slide up onto the bottom row of U, and so on round
    assert np.all(grid[2, 3:6] == Color.G)
    assert np.all(grid[3:6, 6] == Color.O)
    assert np.all(grid[6, 3:6] == Color.B)
    assert np.all(grid[3:6, 2] == Color.R)


def test_up_turn_on_solved_cube():
    grid = SOLVED_GRID.copy()
    fr.quarter_turn(grid, Face.U)
    # U clockwise: front top row goes to the left face
    assert np.all(grid[3, 0:3] == Color.W)
    assert np.all(grid[3, 3:6] == Color.B)
    assert np.all(grid[3, 6:9] == Color.Y)
    assert np.all(grid[3, 9:12] == Color.G)
    assert np.all(grid[4:6, :] == SOLVED_GRID[4:6, :])


def test_engines_keep_no_state_between_turns():
    grid = np.arange(108, dtype=GRID_DTYPE).reshape((9, 12))
    other = grid.copy()
    engine = fr.engines[Face.R]
    attrs = set(vars(engine))
    engine.quarter_turn(grid)
    fr.quarter_turn(other, Face.R)
    assert np.array_equal(grid, other)
    assert set(vars(engine)) == attrs == {'face', 'rows', 'cols'}
