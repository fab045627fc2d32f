import pytest

from dsworkbench.bstree import (
    DEFAULT_VALUES,
    BSTree,
    format_report,
    format_traversal,
    main,
)


def test_inorder_is_sorted_unique():
    values = [7, 3, 9, 3, 1, 8, 7, 12]
    tree = BSTree(values)
    assert tree.inorder() == sorted(set(values))
    assert len(tree) == len(set(values))


def test_duplicate_insert_returns_false():
    tree = BSTree([4])
    assert tree.insert(4) is False
    assert tree.insert(5) is True
    assert len(tree) == 2


def test_contains():
    tree = BSTree([10, 5, 20])
    assert 5 in tree
    assert 20 in tree
    assert 6 not in tree


def test_source_example_preorder():
    tree = BSTree(DEFAULT_VALUES)
    assert tree.preorder() == [10, 5, 20, 15, 30, 25]


def test_source_example_postorder():
    tree = BSTree(DEFAULT_VALUES)
    assert tree.postorder() == [5, 15, 25, 30, 20, 10]


def test_source_example_level_order():
    tree = BSTree(DEFAULT_VALUES)
    assert tree.level_order() == [10, 5, 20, 15, 30, 25]


@pytest.mark.parametrize("values", [[1, 2, 3, 4], [4, 3, 2, 1], [5, 2, 8, 1, 9]])
def test_traversals_share_elements_and_root(values):
    tree = BSTree(values)
    assert tree.preorder()[0] == values[0]
    assert tree.postorder()[-1] == values[0]
    assert tree.level_order()[0] == values[0]
    assert sorted(tree.preorder()) == sorted(tree.postorder()) == tree.inorder()


def test_empty_tree():
    tree = BSTree()
    assert tree.preorder() == tree.inorder() == tree.postorder() == tree.level_order() == []
    assert len(tree) == 0


def test_format_traversal_round_trip():
    values = [3, 1, 4]
    text = format_traversal(values)
    assert text.split("->")[1:] == [str(v) for v in values]


def test_format_report_lines():
    tree = BSTree(DEFAULT_VALUES)
    lines = format_report(tree).split("\n")
    assert len(lines) == 4
    assert lines[0] == "先序遍历:" + format_traversal(tree.preorder())
    assert lines[1] == "中序遍历:" + format_traversal(tree.inorder())
    assert lines[2] == "后序遍历:" + format_traversal(tree.postorder())
    assert lines[3] == "层序遍历:" + format_traversal(tree.level_order())


def test_main_default(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "中序遍历:" + format_traversal(sorted(DEFAULT_VALUES)) in out


def test_main_with_values(capsys):
    assert main(["3", "1", "2"]) == 0
    out = capsys.readouterr().out
    assert "中序遍历:" + format_traversal([1, 2, 3]) in out