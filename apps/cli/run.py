# apps/cli/run.py
"""
CLI entry point for mastermindAI.

Modes:
  auto     : the computer picks a random secret, guesses and grades itself
  computer : the computer guesses; you type the rating for your secret
             ('x' per right colour in the right place, '.' per right colour
             in the wrong place, e.g. "xx.")
  player   : you guess a random secret; the computer grades
  batch    : play many auto games and write CSV + JSON manifest

Examples:
  python -m apps.cli.run auto --seed 7
  python -m apps.cli.run computer --threads 4
  python -m apps.cli.run batch --sample 200 --outdir reports
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

# Optional rich progress bar
try:
    from tqdm import tqdm  # pip install tqdm
    _HAS_TQDM = True
except ImportError:
    _HAS_TQDM = False

from mastermind.engine import (
    GameConfig,
    InconsistentFeedbackError,
    ParseError,
    colorize,
    format_rating,
    generate_universe,
    grade,
    parse_code,
    parse_rating,
)
from mastermind.engine.config import DEFAULT_NUM_COLORS, DEFAULT_SIZE, DEFAULT_THREADS
from mastermind.harness import (
    apply_feedback,
    is_solved,
    new_game,
    next_guess,
    random_secret,
    setup_logging,
)
from mastermind.harness.core import run_case
from mastermind.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from mastermind.solvers import create_solver, get_solver_ids

MODES = {"a": "auto", "c": "computer", "p": "player", "b": "batch"}


def _play_computer(config: GameConfig, *, auto: bool, solver_id: str, seed: int | None) -> int:
    """
    The computer breaks a code. With auto=True it grades against its own
    random secret, otherwise the rating is read from stdin for each guess.
    """
    rng = random.Random(seed)
    secret = random_secret(config, rng)
    state = new_game(config=config, solver_id=solver_id, seed=seed)

    while True:
        guess = next_guess(state)
        print(f"{state.turn}. {colorize(guess, config)}", end=" ")
        if auto:
            exact, color = grade(guess, secret)
            print(format_rating(exact, color))
        else:
            while True:
                try:
                    exact, color = parse_rating(input(), config)
                    break
                except ParseError as e:
                    print(f"  {e}", file=sys.stderr)
                    print(f"{state.turn}. {colorize(guess, config)}", end=" ")
        try:
            state = apply_feedback(state, guess, exact, color)
        except InconsistentFeedbackError:
            print("no consistent candidates remain: you entered a bad rating somewhere")
            return 1
        if is_solved(state):
            print("solved")
            return 0


def _play_player(config: GameConfig, *, seed: int | None) -> int:
    """You guess; the computer keeps the secret and grades."""
    secret = random_secret(config, random.Random(seed))
    attempt = 1
    width = config.size + 1
    while True:
        try:
            guess = parse_code(input(), config)
        except ParseError as e:
            print(f"  {e}", file=sys.stderr)
            continue
        exact, color = grade(guess, secret)
        rating = format_rating(exact, color)
        print(f"{attempt:2d}. {colorize(guess, config)} {rating:<{width}}")
        if exact == config.size:
            print("solved")
            return 0
        attempt += 1


def _run_batch(config: GameConfig, args) -> int:
    """
    Run the solver against many secrets with a live progress indicator and
    write per-game CSV + JSON manifest.
    """
    universe = generate_universe(config)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(universe):
        cases = rng.sample(universe, args.sample)
    else:
        cases = list(universe)

    solver = create_solver(args.solver)
    mode = args.progress
    if mode == "auto":
        mode = "bar" if (_HAS_TQDM and sys.stderr.isatty()) else "plain"
    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    results = []
    total = len(cases)
    start = time.time()
    last_print = 0.0
    for idx, secret in enumerate(iterator, 1):
        per_seed = args.seed + idx * 1013904223  # LCG-ish stride to avoid collisions
        r = run_case(solver, secret, config=config, universe=universe, seed=per_seed)
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now
    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), config)
    guesses = [r["guesses"] for r in results]
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "num_cases": len(results),
        "solver_id": solver.id,
        "mean_guesses": sum(guesses) / max(1, len(guesses)),
        "max_guesses": max(guesses, default=0),
        "failures": sum(1 for r in results if not r["success"]),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="mastermindAI: Mastermind code breaker")
    ap.add_argument("mode", choices=sorted(set(MODES) | set(MODES.values())),
                    help="who's guessing: auto | computer | player | batch (or a/c/p/b)")
    ap.add_argument("--threads", type=int, default=DEFAULT_THREADS,
                    help=f"search workers (default {DEFAULT_THREADS})")
    ap.add_argument("--size", type=int, default=DEFAULT_SIZE, help="pegs per code")
    ap.add_argument("--colors", type=int, default=DEFAULT_NUM_COLORS, help="number of colours")
    ap.add_argument("--backend", choices=["thread", "process"], default="thread",
                    help="executor used by the parallel search")
    ap.add_argument("--solver", default="pairwise",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--seed", type=int, help="RNG seed for the secret and the solver")
    ap.add_argument("--sample", type=int, help="batch: number of random secrets")
    ap.add_argument("--outdir", default="reports", help="batch: directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="batch: progress display (auto=bar if tqdm available, else plain)")
    ap.add_argument("-v", "--verbose", action="store_true", help="log solver decisions")
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    setup_logging(args.verbose)
    try:
        config = GameConfig(size=args.size, num_colors=args.colors, threads=args.threads,
                            backend=args.backend)
        create_solver(args.solver)
    except ValueError as e:
        ap.error(str(e))

    mode = MODES.get(args.mode, args.mode)
    try:
        if mode == "player":
            return _play_player(config, seed=args.seed)
        if mode == "batch":
            if args.seed is None:
                args.seed = 123
            return _run_batch(config, args)
        return _play_computer(config, auto=(mode == "auto"), solver_id=args.solver,
                              seed=args.seed)
    except (EOFError, KeyboardInterrupt):
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())
