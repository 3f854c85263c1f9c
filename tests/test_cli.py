import pytest

from tdmm.cli import main


def test_main_reports_each_allocation(capsys):
    assert main(["--count", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["SUCCESS at 0", "SUCCESS at 1", "SUCCESS at 2"]


@pytest.mark.parametrize("strategy", ["first-fit", "best-fit", "worst-fit", "buddy"])
def test_main_runs_every_strategy(capsys, strategy):
    assert main(["--strategy", strategy, "--count", "600", "--size", "28"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 600
    assert lines[-1] == "SUCCESS at 599"


def test_main_zero_count_prints_nothing(capsys):
    assert main(["--count", "0"]) == 0
    assert capsys.readouterr().out == ""


def test_main_rejects_unknown_strategy():
    with pytest.raises(SystemExit):
        main(["--strategy", "random"])


def test_main_negative_size_raises():
    with pytest.raises(ValueError):
        main(["--count", "1", "--size", "-4"])