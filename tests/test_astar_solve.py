import random
import pytest
from rubiks_cube import rubiks_cube, PDB_MOVES
from heuristic_estimate import heuristic_estimate
from astar_solve import (astar_solve, search_result, SOLVED, BUDGET_EXCEEDED,
                         MAX_ITERATIONS)


def replay_flat(cube, solution):
    # apply the written move string one letter at a time
    cube = cube.clone()
    for ch in solution:
        cube.apply_move(ch)
    return cube


def test_default_budget():
    assert MAX_ITERATIONS == 7000
    assert astar_solve().max_iterations == 7000


def test_solved_input_gives_empty_solution(full_pdb):
    result = astar_solve(full_pdb).solve(rubiks_cube())
    assert result.status == SOLVED
    assert result.solved
    assert result.moves == ()
    assert result.solution == ''
    assert result.iterations == 1


@pytest.mark.parametrize('move', ['F', 'B', 'L', 'R', 'U', 'D'])
def test_single_quarter_turn(full_pdb, move):
    cube = rubiks_cube().apply_move(move)
    result = astar_solve(full_pdb).solve(cube)
    assert result.solved
    assert result.moves == (move * 3,)
    assert result.solution == move * 3
    assert replay_flat(cube, result.solution).is_solved()


def test_pdb_hit_appends_inverted_path(full_pdb):
    cube = rubiks_cube().apply_moves(('F', 'RR', 'UUU'))
    result = astar_solve(full_pdb).solve(cube)
    assert result.solved
    assert result.iterations == 1
    assert len(result.moves) == 3
    assert replay_flat(cube, result.solution).is_solved()


@pytest.mark.parametrize('seed', range(5))
def test_five_move_scrambles_replay_to_solved(full_pdb, seed):
    rng = random.Random(100 + seed)
    scramble = [rng.choice(PDB_MOVES) for i in range(5)]
    cube = rubiks_cube().apply_moves(scramble)
    result = astar_solve(full_pdb).solve(cube)
    assert result.solved
    assert replay_flat(cube, result.solution).is_solved()


def test_results_are_reproducible(full_pdb):
    cube = rubiks_cube().apply_moves(('R', 'U', 'FFF', 'LL', 'D'))
    first = astar_solve(full_pdb).solve(cube)
    second = astar_solve(full_pdb).solve(cube)
    assert first.solution == second.solution
    assert first.iterations == second.iterations


def test_input_cube_is_not_modified(full_pdb):
    cube = rubiks_cube().apply_moves(('R', 'U', 'FFF', 'LL', 'D'))
    before = cube.key()
    astar_solve(full_pdb).solve(cube)
    assert cube.key() == before


def test_search_without_pdb():
    cube = rubiks_cube().apply_move('U')
    result = astar_solve(None).solve(cube)
    assert result.solved
    assert result.moves == ('UUU',)


def test_budget_exceeded():
    cube = rubiks_cube().apply_moves(('F', 'R', 'U'))
    result = astar_solve(None, max_iterations=1).solve(cube)
    assert result.status == BUDGET_EXCEEDED
    assert not result.solved
    assert result.moves is None
    assert result.solution is None


def test_zero_budget_stops_at_once(full_pdb):
    result = astar_solve(full_pdb, max_iterations=0).solve(rubiks_cube())
    assert result.status == BUDGET_EXCEEDED
    assert result.iterations == 1


class flat_heuristic():

    def estimate(self, cube):
        return 0


def test_unsolvable_cube_runs_out_of_budget():
    # one edge flipped in place, no sequence of turns fixes it
    cube = rubiks_cube()
    cube.grid[2, 4], cube.grid[3, 4] = cube.grid[3, 4], cube.grid[2, 4]
    solver = astar_solve(None, heuristic=flat_heuristic(), max_iterations=50)
    result = solver.solve(cube)
    assert result.status == BUDGET_EXCEEDED
    assert result.iterations == 51


def test_simple_heuristic_search(full_pdb):
    cube = rubiks_cube().apply_moves(('R', 'U', 'FFF', 'LL', 'D'))
    solver = astar_solve(full_pdb, heuristic_estimate(full_pdb, 'simple'))
    result = solver.solve(cube)
    assert result.solved
    assert replay_flat(cube, result.solution).is_solved()


def test_verbose_progress(full_pdb, capsys):
    cube = rubiks_cube().apply_move('F')
    astar_solve(full_pdb, verbose=True).solve(cube)
    out = capsys.readouterr().out
    assert 'Solution: FFF' in out


def test_status_log_every(capsys):
    cube = rubiks_cube().apply_moves(('F', 'R', 'U', 'B', 'L'))
    astar_solve(None, max_iterations=3, log_every=2, verbose=True).solve(cube)
    out = capsys.readouterr().out
    assert 'Steps: 2 | Queue:' in out
    assert 'Cost (g/h/f):' in out
    assert 'Hit step limit (3)' in out


def test_result_repr():
    result = search_result(SOLVED, ('FFF',), 1)
    assert 'FFF' in repr(result)
