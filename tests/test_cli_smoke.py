import itertools
import logging
import random

import pytest
from apps.cli import run as cli
from mastermind.engine import GameConfig, format_code
from mastermind.harness import random_secret


@pytest.fixture(autouse=True)
def _restore_logging():
    logger = logging.getLogger("mastermind")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    logger.handlers, logger.level, logger.propagate = handlers, level, propagate


def _feed(monkeypatch, lines):
    it = iter(lines)
    monkeypatch.setattr("builtins.input", lambda *a: next(it))


def test_auto_mode_solves(capsys):
    assert cli.main(["auto", "--seed", "4", "--threads", "2"]) == 0
    assert capsys.readouterr().out.rstrip().endswith("solved")


def test_player_mode_grades(monkeypatch, capsys):
    cfg = GameConfig()
    secret = format_code(random_secret(cfg, random.Random(8)), cfg)
    _feed(monkeypatch, ["ZZ", "AAAA", secret.lower()])
    assert cli.main(["p", "--seed", "8"]) == 0
    out = capsys.readouterr()
    assert "solved" in out.out
    assert "expected 4 letters" in out.err


def test_computer_mode_reports_bad_rating(monkeypatch, capsys):
    _feed(monkeypatch, itertools.chain(["xq"], itertools.repeat("")))
    assert cli.main(["computer", "--seed", "2", "--threads", "2"]) == 1
    out = capsys.readouterr()
    assert "no consistent candidates remain" in out.out
    assert "unexpected character" in out.err


def test_batch_mode_writes_reports(tmp_path, capsys):
    rc = cli.main(["batch", "--sample", "3", "--size", "3", "--colors", "4", "--threads", "2",
                   "--outdir", str(tmp_path), "--progress", "off"])
    assert rc == 0
    assert len(list(tmp_path.glob("run_*.csv"))) == 1
    assert len(list(tmp_path.glob("run_*_manifest.json"))) == 1


def test_bad_config_is_rejected():
    with pytest.raises(SystemExit):
        cli.main(["auto", "--threads", "0"])


def test_parser_defaults_follow_game_config():
    args = cli.build_parser().parse_args(["auto"])
    cfg = GameConfig()
    assert (args.threads, args.size, args.colors) == (cfg.threads, cfg.size, cfg.num_colors)
