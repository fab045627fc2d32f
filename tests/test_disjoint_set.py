import io

import pytest

from dsworkbench.disjoint_set import DisjointSet, main, run_commands


def test_initially_separate():
    dsu = DisjointSet(4)
    assert [dsu.find(i) for i in range(4)] == list(range(4))
    assert not dsu.connected(0, 1)


def test_union_connects():
    dsu = DisjointSet(5)
    assert dsu.union(0, 1) is True
    assert dsu.connected(0, 1)
    assert dsu.union(1, 0) is False


def test_transitive():
    dsu = DisjointSet(6)
    dsu.union(0, 1)
    dsu.union(2, 3)
    dsu.union(1, 3)
    assert dsu.connected(0, 2)
    assert not dsu.connected(0, 4)


def test_union_by_rank_keeps_taller_root():
    dsu = DisjointSet(4)
    dsu.union(0, 1)
    root = dsu.find(0)
    dsu.union(2, 0)
    assert dsu.find(2) == root


def test_path_compression():
    dsu = DisjointSet(8)
    for i in range(7):
        dsu.union(i, i + 1)
    root = dsu.find(7)
    assert all(dsu.parent[i] == root for i in range(8) if i == 7 or dsu.find(i) == root)
    assert dsu.parent[7] == root


def test_out_of_range():
    dsu = DisjointSet(3)
    with pytest.raises(IndexError):
        dsu.find(3)
    with pytest.raises(IndexError):
        dsu.union(-1, 0)


def test_negative_size():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_run_commands():
    text = "5 4\n0 1 2\n1 1 2\n1 1 3\n2 0 0\n"
    assert run_commands(text) == ["Yes", "No"]


def test_run_commands_truncated():
    with pytest.raises(ValueError):
        run_commands("3 2\n0 1 2\n")


def test_run_commands_bad_token():
    with pytest.raises(ValueError):
        run_commands("3 1\n0 x 2\n")


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n0 0 2\n1 2 0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.split() == ["Yes"]