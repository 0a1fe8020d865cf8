import pytest
from mastermind.engine import GameConfig, generate_universe
from mastermind.solvers import REGISTRY, create_solver, get_solver_ids
from mastermind.solvers import pairwise as pairwise_mod

CFG = GameConfig(threads=2)
UNIVERSE = generate_universe(CFG)


def _solver(solver_id="pairwise", seed=1):
    s = create_solver(solver_id)
    s.reset(config=CFG, universe=UNIVERSE, seed=seed)
    return s


def _state(candidates):
    return {"turn": 2, "history": [], "candidates": list(candidates), "universe": UNIVERSE}


def test_registry_ids():
    assert get_solver_ids() == ["minimax", "pairwise", "random_consistent"]
    assert set(REGISTRY) == set(get_solver_ids())
    with pytest.raises(ValueError):
        create_solver("nope")


@pytest.mark.parametrize("solver_id", ["pairwise", "minimax"])
def test_single_candidate_returned_without_search(monkeypatch, solver_id):
    def boom(*a, **k):
        raise AssertionError("search must not run for one candidate")
    monkeypatch.setattr(pairwise_mod, "find_best_guess", boom)
    only = UNIVERSE[123]
    assert _solver(solver_id).next_guess(_state([only])) == only


@pytest.fixture
def recorded(monkeypatch):
    calls = []

    def fake(guesses, pool, config, **kwargs):
        calls.append((guesses, pool, kwargs))
        return pool[0]
    monkeypatch.setattr(pairwise_mod, "find_best_guess", fake)
    return calls


def test_small_set_searches_whole_universe(recorded):
    cands = UNIVERSE[:69]
    _solver().next_guess(_state(cands))
    guesses, pool, kwargs = recorded[0]
    assert len(guesses) == len(UNIVERSE) and pool == cands
    assert kwargs["scorer"] == "pairwise"


def test_medium_set_searches_candidates(recorded):
    cands = UNIVERSE[:70]
    _solver().next_guess(_state(cands))
    guesses, pool, _ = recorded[0]
    assert guesses == cands and pool == cands

    recorded.clear()
    cands = UNIVERSE[:1139]
    _solver().next_guess(_state(cands))
    assert recorded[0][0] == cands


def test_large_set_picks_random_candidate(recorded):
    cands = UNIVERSE[:1140]
    g1 = _solver(seed=5).next_guess(_state(cands))
    g2 = _solver(seed=5).next_guess(_state(cands))
    assert recorded == []
    assert g1 in cands and g1 == g2


def test_minimax_uses_its_scorer(recorded):
    _solver("minimax").next_guess(_state(UNIVERSE[:10]))
    assert recorded[0][2]["scorer"] == "minimax"


def test_thresholds_come_from_config(recorded):
    cfg = GameConfig(threads=2, loop_over_all_threshold=5, full_search_threshold=20)
    s = create_solver("pairwise")
    s.reset(config=cfg, universe=UNIVERSE, seed=3)
    s.next_guess(_state(UNIVERSE[:10]))
    assert recorded[0][0] == UNIVERSE[:10]
    s.next_guess(_state(UNIVERSE[:30]))
    assert len(recorded) == 1


def test_real_search_returns_universe_code():
    cands = UNIVERSE[:40]
    g = _solver().next_guess(_state(cands))
    assert g in UNIVERSE


def test_empty_candidates_rejected():
    with pytest.raises(ValueError):
        _solver().next_guess(_state([]))
    with pytest.raises(ValueError):
        _solver("random_consistent").next_guess(_state([]))
