import csv
import json

import pytest
from mastermind.engine import (
    GameConfig, InconsistentFeedbackError, ParseError, generate_universe, grade, parse_code,
)
from mastermind.harness import (
    apply_feedback, is_solved, new_game, next_guess, run_batch, run_case, write_csv, write_manifest,
)
from mastermind.harness.io import timestamp_id
from mastermind.solvers import create_solver

CFG = GameConfig(threads=2)


@pytest.mark.parametrize("secret", ["ADBC", "AAAA", "FFFF", "ABCD", "EEFA"])
def test_run_case_solves(secret):
    solver = create_solver("pairwise")
    code = parse_code(secret, CFG)
    r = run_case(solver, code, config=CFG, seed=42)
    assert r["success"] is True
    assert r["guesses"] <= CFG.universe_size
    last = r["history"][-1]
    assert last.guess == code and (last.exact, last.color) == (4, 0)


@pytest.mark.parametrize("solver_id", ["minimax", "random_consistent"])
def test_other_solvers_smoke(solver_id):
    solver = create_solver(solver_id)
    r = run_case(solver, parse_code("BFAD", CFG), config=CFG, seed=7)
    assert r["success"] is True


def test_run_case_is_reproducible():
    secret = parse_code("CEAB", CFG)
    r1 = run_case(create_solver("pairwise"), secret, config=CFG, seed=11)
    r2 = run_case(create_solver("pairwise"), secret, config=CFG, seed=11)
    assert r1["history"] == r2["history"]


def test_single_thread_matches_multi_thread():
    secret = parse_code("DDAF", CFG)
    one = run_case(create_solver("pairwise"), secret, config=GameConfig(threads=1), seed=3)
    many = run_case(create_solver("pairwise"), secret, config=GameConfig(threads=5), seed=3)
    assert one["history"] == many["history"]


def test_run_batch_small_board():
    cfg = GameConfig(size=3, num_colors=3, threads=3)
    universe = generate_universe(cfg)
    results = run_batch(create_solver("pairwise"), universe, config=cfg, seed=1)
    assert len(results) == 27
    assert all(r["success"] for r in results)
    assert all(r["solver_id"] == "pairwise" for r in results)


def test_game_api_loop():
    state = new_game(4, 6, seed=9)
    secret = parse_code("BACF", state.config)
    assert len(state.candidates) == 1296 and not is_solved(state)
    while not is_solved(state):
        before = len(state.candidates)
        guess = next_guess(state)
        state = apply_feedback(state, guess, *grade(guess, secret))
        assert len(state.candidates) <= before
        assert secret in state.candidates
    assert state.history[-1].guess == secret


def test_next_guess_reads_state_universe(monkeypatch):
    state = new_game(config=CFG)
    seen = {}

    def capture(s):
        seen.update(s)
        return s["candidates"][0]
    monkeypatch.setattr(state.solver, "next_guess", capture)
    next_guess(state)
    assert seen["universe"] is state.universe
    # same object as the solver's, so the packed universe cache is reused
    assert state.universe is state.solver.universe


def test_run_case_state_shares_solver_universe(monkeypatch):
    solver = create_solver("pairwise")
    seen = []
    real = solver.next_guess

    def capture(s):
        seen.append(s["universe"])
        return real(s)
    monkeypatch.setattr(solver, "next_guess", capture)
    run_case(solver, parse_code("ABCD", CFG), config=CFG, seed=1)
    assert seen and all(u is solver.universe for u in seen)


def test_apply_feedback_returns_new_state():
    state = new_game(config=CFG)
    guess = parse_code("AABB", CFG)
    nxt = apply_feedback(state, guess, 1, 1)
    assert state.history == () and len(nxt.history) == 1
    assert len(nxt.candidates) < len(state.candidates)


def test_inconsistent_feedback_raises():
    state = new_game(config=CFG)
    state = apply_feedback(state, parse_code("AAAA", CFG), 0, 0)
    with pytest.raises(InconsistentFeedbackError):
        apply_feedback(state, parse_code("AAAA", CFG), 1, 0)


def test_impossible_rating_rejected():
    state = new_game(config=CFG)
    with pytest.raises(ParseError):
        apply_feedback(state, parse_code("AAAA", CFG), 3, 2)


def test_new_game_rejects_bad_board():
    with pytest.raises(ValueError):
        new_game(0, 6)
    with pytest.raises(ValueError):
        new_game(4, 1)


def test_write_csv_and_manifest(tmp_path):
    cfg = GameConfig(size=3, num_colors=3, threads=2)
    results = run_batch(create_solver("pairwise"), generate_universe(cfg), config=cfg,
                        seed=5, sample=4)
    p = write_csv(results, str(tmp_path / "out" / "run.csv"), cfg)
    with open(p, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 4
    assert rows[0]["secret"] == "AAA"
    last = int(rows[0]["guesses"])
    assert rows[0][f"rating_{last}"] == "xxx"
    assert rows[0]["solver"] == "pairwise"

    m = write_manifest({"run_id": timestamp_id(), "num_cases": 4}, str(tmp_path / "m.json"))
    assert json.loads(open(m, encoding="utf-8").read())["num_cases"] == 4
