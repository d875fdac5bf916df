import pytest

from eldertheory.cli import main, run_analysis, run_simulation, run_training


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_root_command_prints_banner(capsys):
    assert main([]) == 0
    lines = _lines(capsys)
    assert lines[0] == "Elder Theory Hierarchical AI System"
    assert "--help" in lines[1]


def test_simulate_command(capsys):
    assert main(["simulate"]) == 0
    lines = _lines(capsys)
    assert lines[0] == "Starting Elder Theory simulation..."
    assert lines[1] == "Initializing Elder entities..."
    assert lines[-1] == "Simulation completed successfully!"
    assert len(lines) == 5


def test_train_command(capsys):
    assert main(["train"]) == 0
    lines = _lines(capsys)
    assert lines[0] == "Starting hierarchical training..."
    assert "Training Mentor entities across domains..." in lines
    assert lines[-1] == "Training completed successfully!"


def test_analyze_command(capsys):
    assert main(["analyze"]) == 0
    lines = _lines(capsys)
    assert lines[0] == "Starting system analysis..."
    assert "Checking conservation laws..." in lines
    assert lines[-1] == "Analysis completed successfully!"


@pytest.mark.parametrize(
    "func, last",
    [
        (run_simulation, "Simulation completed successfully!"),
        (run_training, "Training completed successfully!"),
        (run_analysis, "Analysis completed successfully!"),
    ],
)
def test_run_functions_finish_with_success(capsys, func, last):
    func()
    assert _lines(capsys)[-1] == last


def test_unknown_command_fails():
    with pytest.raises(SystemExit) as excinfo:
        main(["bogus"])
    assert excinfo.value.code != 0


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "simulate" in out and "train" in out and "analyze" in out