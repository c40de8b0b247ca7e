from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path

import pytest

from vault_digest.cli import canonical_date, main
from vault_digest.config import DigestConfig
from vault_digest.date import DateRange


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("VAULT_DIGEST_VAULT_DIR", raising=False)
    monkeypatch.delenv("VAULT_DIGEST_OUTPUT_FILE", raising=False)


def test_canonical_date_accepts_real_dates() -> None:
    assert canonical_date("2024-02-29") == "2024-02-29"
    assert canonical_date("") == ""


@pytest.mark.parametrize("bad", ["2024-1-2", "01/02/2024", "2023-02-29", "2024-01-02T00:00"])
def test_canonical_date_rejects(bad: str) -> None:
    with pytest.raises(argparse.ArgumentTypeError):
        canonical_date(bad)


def test_config_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    cfg = DigestConfig.from_env(today=date(2024, 1, 2))

    assert cfg.vault_dir == Path(".")
    assert cfg.output_file == Path("output.md")
    assert cfg.date_range == DateRange.single_day("2024-01-02")
    assert cfg.append is False


def test_config_env_and_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("VAULT_DIGEST_VAULT_DIR", str(tmp_path / "vault"))
    monkeypatch.setenv("VAULT_DIGEST_OUTPUT_FILE", str(tmp_path / "env-out.md"))

    cfg = DigestConfig.from_env(output_file="explicit.md", start_date="2024-01-01", today=date(2024, 3, 1))

    assert cfg.vault_dir == tmp_path / "vault"
    assert cfg.output_file == Path("explicit.md")
    assert cfg.date_range == DateRange(start="2024-01-01", end="2024-03-01")


def test_main_end_to_end(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    vault = tmp_path / "vault"
    vault.mkdir()
    (vault / "week.md").write_text("# Mon, Jan 1\nskip\n# Jan 3rd, 2024\nkeep\n", encoding="utf-8")
    out = tmp_path / "digest.md"

    main([
        "--vault-directory", str(vault),
        "--output-file", str(out),
        "--start-date", "2024-01-01",
        "--end-date", "2024-01-07",
    ])

    assert out.read_text(encoding="utf-8") == f"# {vault / 'week'}\nkeep\n\n\n"
    assert "DONE: scanned=1 matched=1 sections=1 failed=0" in capsys.readouterr().out


def test_main_missing_vault_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--vault-directory", str(tmp_path / "nope"), "--output-file", str(tmp_path / "o.md")])
    assert "Error while scanning directory" in str(exc.value)


def test_main_rejects_bad_date(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--output-file", str(tmp_path / "o.md"), "--start-date", "Jan 1 2024"])
    assert exc.value.code == 2
