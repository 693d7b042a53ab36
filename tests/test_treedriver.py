import io

from dsalab.nodedata import NodeData
from dsalab.treedriver import (
    build_tree,
    main,
    read_trees,
    report_removals,
    report_tree,
)


def test_read_trees_splits_on_terminator():
    stream = io.StringIO("b a c $$\nx y $$\n")
    assert list(read_trees(stream)) == [["b", "a", "c"], ["x", "y"]]


def test_read_trees_drops_unterminated_tail():
    stream = io.StringIO("one two $$\nthree four\n")
    assert list(read_trees(stream)) == [["one", "two"]]


def test_build_tree_skips_duplicates():
    tree = build_tree(["m", "a", "m", "z", "a"])
    assert [item.data for item in tree] == ["a", "m", "z"]


def test_report_tree_lookups_and_family():
    tree = build_tree(["not", "and", "sss"])
    out = io.StringIO()
    report_tree(tree, out)
    text = out.getvalue()
    assert text.startswith("Tree Inorder:\nand not sss \n")
    assert "Retrieve --> and:  found\n" in text
    assert "Retrieve --> not:  found\n" in text
    assert "Sibling of and:  sss\n" in text
    assert "Sibling of not:  notFound\n" in text
    assert "Parent of sss:  not\n" in text
    assert "Parent of not:  notFound\n" in text
    assert "T == T2?     equal\n" in text
    assert "T != first?  equal\n" in text


def test_report_tree_missing_words():
    tree = build_tree(["x", "y"])
    out = io.StringIO()
    report_tree(tree, out)
    text = out.getvalue()
    assert "Retrieve --> sss:  not found\n" in text
    assert "Parent of and:  notFound\n" in text


def test_report_tree_keeps_items():
    words = ["e", "d", "c", "b", "a"]
    tree = build_tree(words)
    report_tree(tree, io.StringIO())
    assert [item.data for item in tree] == sorted(words)
    assert tree.get_parent(NodeData("a")) is not None


def test_report_removals_empties_tree():
    tree = build_tree(["b", "a", "c", "iii"])
    out = io.StringIO()
    report_removals(tree, out)
    text = out.getvalue()
    assert "remove --> and:  not found\n" in text
    assert "remove --> iii:  found\n" in text
    assert "remove --> r  :  not found\n" in text
    assert "remove --> a  :  found\n" in text
    assert tree.is_empty()
    assert text.endswith("Tree Inorder:\n\n")


def test_main_runs_over_file(tmp_path, capsys):
    data = tmp_path / "data.txt"
    data.write_text("not and sss $$\nq r $$\n", encoding="utf-8")
    assert main([str(data)]) == 0
    captured = capsys.readouterr().out
    assert "Initial data:\n  not and sss $$ \n" in captured
    assert "T != first?  not equal\n" in captured


def test_main_remove_mode(tmp_path, capsys):
    data = tmp_path / "data.txt"
    data.write_text("a b c $$\n", encoding="utf-8")
    assert main([str(data), "--remove"]) == 0
    assert "remove --> c  :  found" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "File could not be opened." in capsys.readouterr().out