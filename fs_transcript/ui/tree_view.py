"""Rich rendering of a reconstructed filesystem tree with directory sizes."""

from typing import Optional

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from fs_transcript.entities.entry import Directory
from fs_transcript.entities.filesystem import FileSystemTree


def _directory_label(directory: Directory, size: int, threshold: Optional[int]) -> Text:
    label = Text(directory.name if directory.is_root else f"{directory.name}/", style="bold blue")
    style = "green" if threshold is not None and size <= threshold else "dim"
    label.append(f" ({size})", style=style)
    return label


def build_tree_view(
    tree: FileSystemTree, sizes: dict[int, int], threshold: Optional[int] = None
) -> Tree:
    """
    Build a rich Tree mirroring the filesystem.

    Directories show their recursive size, highlighted in green when it does
    not exceed `threshold`. Entries keep transcript order.
    """
    view = Tree(_directory_label(tree.root, sizes[tree.root.id], threshold), guide_style="dim")
    # (directory, rich node) pairs still to expand; avoids recursion on deep trees
    pending: list[tuple[Directory, Tree]] = [(tree.root, view)]
    while pending:
        directory, node = pending.pop()
        for entry in directory.contents:
            if isinstance(entry, Directory):
                child = node.add(_directory_label(entry, sizes[entry.id], threshold))
                pending.append((entry, child))
            else:
                node.add(Text(f"{entry.name} ({entry.size})"))
    return view


def print_tree(
    tree: FileSystemTree,
    sizes: dict[int, int],
    threshold: Optional[int] = None,
    console: Optional[Console] = None,
) -> None:
    # Enable soft wrapping so long names are not truncated.
    console = console or Console(soft_wrap=True)
    console.print(build_tree_view(tree, sizes, threshold))
