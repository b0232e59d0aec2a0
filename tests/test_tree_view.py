"""
Tests for the rich tree rendering.
"""

from rich.console import Console

from fs_transcript.ui.tree_view import build_tree_view, print_tree
from fs_transcript.use_cases.transcript.build_tree import BuildTreeUseCase


class TestTreeView:
    """Test cases for the tree view."""

    def test_build_tree_view_structure(self, example_lines, mock_logger):
        tree = BuildTreeUseCase(logger=mock_logger).execute(example_lines)

        view = build_tree_view(tree, tree.directory_sizes(), threshold=100_000)

        assert view.label.plain == "/ (48381165)"
        assert [child.label.plain for child in view.children] == [
            "a/ (94853)",
            "b.txt (14848514)",
            "c.dat (8504156)",
            "d/ (24933642)",
        ]
        a_node = view.children[0]
        assert a_node.children[0].label.plain == "e/ (584)"
        assert a_node.children[0].children[0].label.plain == "i (584)"

    def test_print_tree(self, small_lines, mock_logger):
        tree = BuildTreeUseCase(logger=mock_logger).execute(small_lines)
        console = Console(file=None, record=True, width=80)

        print_tree(tree, tree.directory_sizes(), console=console)

        text = console.export_text()
        assert "/ (14877630)" in text
        assert "a/ (29116)" in text
        assert "f (29116)" in text
