import numpy as np
import pytest

from warmbench import inputs
from warmbench.sorts import insertion_sort, is_sorted
from warmbench.tools import sort_cli


@pytest.mark.parametrize("data", [[], [1], [3, 1, 2], [5, 4, 3, 2, 1], [2, 2, 1, 1]])
def test_insertion_sort_lists(data):
    a = list(data)
    assert insertion_sort(a) is None
    assert a == sorted(data)


def test_insertion_sort_subrange():
    a = np.array([9, 5, 4, 3, 0])
    insertion_sort(a, 1, 4)
    assert a.tolist() == [9, 3, 4, 5, 0]


def test_is_sorted():
    assert is_sorted([])
    assert is_sorted([1, 1, 2])
    assert not is_sorted(np.array([2, 1]))


def test_generators():
    rng = np.random.default_rng(0)
    assert inputs.ordered(4).tolist() == [0, 1, 2, 3]
    assert inputs.reversed_order(4).tolist() == [3, 2, 1, 0]

    partial = inputs.partially_ordered(10, rng)
    assert partial[5:].tolist() == [5, 6, 7, 8, 9]
    assert ((partial[:5] >= 0) & (partial[:5] < 5)).all()

    rand = inputs.random_order(50, rng)
    assert rand.dtype == np.int64
    assert len(rand) == 50
    assert ((rand >= 0) & (rand < 50)).all()


def test_generators_handle_empty():
    for generator in inputs.GENERATORS.values():
        assert len(generator.make(0, np.random.default_rng(1))) == 0


def test_cli_prints_one_line_per_configuration(capsys):
    status = sort_cli.main(["--size", "30", "--runs", "1", "3", "--order", "reversed", "--seed", "7"])
    out = capsys.readouterr().out

    assert status == 0
    lines = [line for line in out.splitlines() if line.startswith("Reversed")]
    assert len(lines) == 2
    assert "m=1" in lines[0] and "m=3" in lines[1]
    assert out.rstrip().endswith("Done")


def test_cli_all_orders(capsys):
    assert sort_cli.main(["--size", "20", "--runs", "2", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    for generator in inputs.GENERATORS.values():
        assert f"{generator.label} " in out


def test_cli_continues_after_failed_configuration(capsys):
    status = sort_cli.main(["--size", "10", "--runs", "0", "2", "--order", "ordered"])
    out = capsys.readouterr().out

    assert status == 1
    assert "m=2" in out
    assert "1 configuration(s) failed" in out


def test_benchmark_order_detects_broken_sort(monkeypatch):
    monkeypatch.setattr(sort_cli, "insertion_sort", lambda a: a.__setitem__(0, 10 ** 6))
    results, failures = sort_cli.benchmark_order("ordered", 5, [2], np.random.default_rng(0))
    assert results == []
    assert failures == 1


def test_cli_rejects_unknown_log_level(capsys):
    with pytest.raises(SystemExit) as excinfo:
        sort_cli.main(["--log-level", "chatty"])
    assert excinfo.value.code == 2
    assert "chatty" in capsys.readouterr().err
