from __future__ import annotations

import pytest

import cookbook.__main__ as runner

pytestmark = [pytest.mark.unit, pytest.mark.cookbook]


def test_list_shows_known_recipe_and_hides_helpers(
    capsys: pytest.CaptureFixture[str],
) -> None:
    code = runner.main(["--list"])
    assert code == 0
    out = capsys.readouterr().out
    assert "getting-started/safe-division" in out
    assert "start here" in out
    assert "utils/" not in out
    assert "templates/" not in out


def test_resolve_spec_accepts_various_forms() -> None:
    for spec in (
        "cookbook/getting-started/safe-division.py",
        "getting-started/safe-division.py",
        "getting-started/safe-division",
    ):
        resolved = runner.resolve_spec(spec)
        assert resolved.path.exists()
        assert resolved.display == "getting-started/safe-division.py"


def test_resolve_spec_rejects_helpers_and_missing_files() -> None:
    with pytest.raises(FileNotFoundError):
        runner.resolve_spec("nope/does-not-exist")
    with pytest.raises(FileNotFoundError):
        runner.resolve_spec("utils/presentation")


def test_main_returns_2_for_unknown_recipe(capsys: pytest.CaptureFixture[str]) -> None:
    assert runner.main(["nope/missing"]) == 2
    assert "Recipe not found" in capsys.readouterr().err


def test_main_runs_recipe_with_passthrough_args(
    capsys: pytest.CaptureFixture[str],
) -> None:
    code = runner.main(
        ["getting-started/safe-division", "--numerator", "9", "--denominator", "3"]
    )
    assert code == 0
    out = capsys.readouterr().out
    assert "Safe division" in out
    assert "Outcome: ok: 3.0" in out


def test_recipe_help_is_forwarded(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        runner.main(["getting-started/safe-division", "--help"])
    assert exc.value.code == 0
    assert "--denominator" in capsys.readouterr().out
