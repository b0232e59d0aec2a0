"""
Directory and file domain entities reconstructed from a transcript.
"""

from typing import Optional, Union


class File:
    """
    File entry that lives inside exactly one directory of the tree.
    """

    def __init__(self, name: str, size: int, parent_id: int):
        """
        Initialize the File entity.

        Args:
            name: File name, unique among its siblings
            size: Size in bytes
            parent_id: Identifier of the owning directory in the tree's node table

        Raises:
            ValueError: If name is empty or size is negative
        """
        if not name:
            raise ValueError("File name must be a non-empty string")
        if size < 0:
            raise ValueError(f"File size must be non-negative, got {size}")

        self.name = name
        self.size = size
        self.parent_id = parent_id

    def __str__(self) -> str:
        """String representation of the File."""
        return f"File(name='{self.name}', size={self.size})"

    def __repr__(self) -> str:
        """Detailed string representation of the File."""
        return f"File(name='{self.name}', size={self.size}, parent_id={self.parent_id})"


class Directory:
    """
    Directory entry. Owns its contents; refers to its parent only by id.
    """

    def __init__(self, id: int, name: str, parent_id: Optional[int] = None):
        """
        Initialize the Directory entity.

        Args:
            id: Index of this directory in the tree's node table
            name: Directory name, unique among its siblings
            parent_id: Identifier of the parent directory, None for the root

        Raises:
            ValueError: If name is empty
        """
        if not name:
            raise ValueError("Directory name must be a non-empty string")

        self.id = id
        self.name = name
        self.parent_id = parent_id
        self.contents: list[Entry] = []
        # name -> entry, kept in step with contents
        self._children_by_name: dict[str, Entry] = {}

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    def add_entry(self, entry: "Entry") -> bool:
        """
        Append `entry` unless a child with the same name already exists.

        Returns:
            True if the entry was added, False if its name was taken
        """
        if entry.name in self._children_by_name:
            return False
        self._children_by_name[entry.name] = entry
        self.contents.append(entry)
        return True

    def find_child(self, name: str) -> Optional["Entry"]:
        """Return the immediate child called `name`, whatever its kind."""
        return self._children_by_name.get(name)

    def has_child(self, name: str) -> bool:
        return name in self._children_by_name

    def files(self) -> list[File]:
        return [entry for entry in self.contents if isinstance(entry, File)]

    def __str__(self) -> str:
        """String representation of the Directory."""
        return f"Directory(name='{self.name}', entries={len(self.contents)})"

    def __repr__(self) -> str:
        """Detailed string representation of the Directory."""
        return f"Directory(id={self.id}, name='{self.name}', parent_id={self.parent_id})"


Entry = Union[Directory, File]
