"""End-to-end tests for the pipeline entry point."""

import logging

import pytest

from spacecurves.config import PipelineConfig
from spacecurves.main import main, run


def test_run_prints_blocks_and_total(capsys):
    summary = run(PipelineConfig(seed=42))
    out = capsys.readouterr().out.splitlines()

    assert len(out) == 10 * 4 + 1
    assert out[-1] == f"Total sum of radii of the circles: {summary.radius_sum:g}"
    for i in range(10):
        block = out[4 * i:4 * i + 4]
        assert block[0].split(" with ")[0] in {"Circle", "Ellipse", "Helix"}
        assert block[1].startswith("Point at t = PI / 4: (")
        assert block[2].startswith("Derivative at t = PI / 4: (")
        assert block[3] == ""


def test_run_is_reproducible_with_seed(capsys):
    run(PipelineConfig(seed=3))
    first = capsys.readouterr().out
    run(PipelineConfig(seed=3))
    assert capsys.readouterr().out == first


def test_run_sum_matches_circles(capsys):
    summary = run(PipelineConfig(size=200, seed=11, num_workers=3))
    capsys.readouterr()
    assert summary.radius_sum == pytest.approx(sum(c.radius() for c in summary.circles))
    radii = [c.radius() for c in summary.circles]
    assert radii == sorted(radii)


def test_run_empty_collection(capsys):
    summary = run(PipelineConfig(size=0, seed=1))
    assert capsys.readouterr().out == "Total sum of radii of the circles: 0\n"
    assert summary.radius_sum == 0.0


@pytest.fixture
def reset_package_logger():
    yield
    logger = logging.getLogger("spacecurves")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_main_keeps_logs_off_stdout(capsys, reset_package_logger):
    main(PipelineConfig(seed=5, log_level=logging.DEBUG))
    captured = capsys.readouterr()
    assert captured.out.splitlines()[-1].startswith("Total sum of radii of the circles: ")
    assert "Logging initialized." not in captured.out


@pytest.mark.parametrize(
    "kwargs",
    [
        {"size": -1},
        {"num_workers": 0},
        {"parameter_range": (5.0, 5.0)},
        {"step_range": (10.0, 1.0)},
    ],
)
def test_config_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        PipelineConfig(**kwargs)


def test_main_writes_log_file(tmp_path, capsys, reset_package_logger):
    log_file = tmp_path / "spacecurves.log"
    main(PipelineConfig(seed=5, log_level=logging.INFO, log_file=str(log_file)))
    capsys.readouterr()

    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "Selected" in text


def test_label_follows_parameter():
    assert PipelineConfig().t_label == "PI / 4"
    assert PipelineConfig(t=1.0).t_label == "1"
    assert PipelineConfig(t=1.0, t_label="one").t_label == "one"


def test_run_prints_label_of_custom_parameter(capsys):
    run(PipelineConfig(size=1, seed=2, t=0.5))
    lines = capsys.readouterr().out.splitlines()
    assert lines[1].startswith("Point at t = 0.5: (")
    assert lines[2].startswith("Derivative at t = 0.5: (")
