from __future__ import annotations

import math
import sys
from pathlib import Path

import pytest

# Ensure 'src' is importable without installing the package
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from axis_scale.cli import main  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)


def _lines(capsys: pytest.CaptureFixture[str]) -> list[str]:
    return capsys.readouterr().out.splitlines()


def test_to_data_linear(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--scale", "linear", "to-data", "0.25", "--range", "0", "100"]) == 0
    assert _lines(capsys) == ["25.0"]

    assert main(["--scale", "linear", "to-data", "0.25", "--range", "0", "100", "--invert"]) == 0
    assert _lines(capsys) == ["75.0"]


def test_to_relative_multiple_values(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["to-relative", "0", "50", "100", "--range", "0", "100"]) == 0
    assert _lines(capsys) == ["0.0", "0.5", "1.0"]


def test_to_data_logarithmic(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--scale", "logarithmic", "to-data", "0.5", "--range", "1", "100"]) == 0
    (line,) = _lines(capsys)
    assert float(line) == pytest.approx(10.0)


def test_to_relative_logarithmic_out_of_domain(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--scale", "logarithmic", "to-relative", "0", "--range", "1", "100"]) == 0
    (line,) = _lines(capsys)
    assert math.isnan(float(line))


def test_axis_scale_from_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg_file = tmp_path / "chart.yaml"
    cfg_file.write_text("axes:\n  y2: log\n", encoding="utf-8")

    assert main(["--config", str(cfg_file), "--axis", "y2", "to-relative", "10", "--range", "1", "100"]) == 0
    (line,) = _lines(capsys)
    assert float(line) == pytest.approx(0.5)


def test_check(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--scale", "logarithmic", "check", "--range", "1", "1000"]) == 0
    assert _lines(capsys) == ["ok"]

    assert main(["--scale", "logarithmic", "check", "--range", "-1", "10"]) == 1
    captured = capsys.readouterr()
    assert "cannot be represented" in captured.err

    assert main(["--scale", "linear", "check", "--range", "-1", "10"]) == 0


def test_invalid_config_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg_file = tmp_path / "chart.yaml"
    cfg_file.write_text("axes:\n  y: cubic\n", encoding="utf-8")

    assert main(["--config", str(cfg_file), "check", "--range", "1", "10"]) == 2
    assert "Invalid scale kinds" in capsys.readouterr().err
