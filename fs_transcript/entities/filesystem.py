"""
Filesystem tree entity: a node table of directories rooted at `/`.
"""

from typing import Iterator, Optional

from fs_transcript.entities.entry import Directory, Entry, File

ROOT_NAME = "/"


def _join(parent_path: str, name: str) -> str:
    if parent_path == ROOT_NAME:
        return ROOT_NAME + name
    return f"{parent_path}/{name}"


class FileSystemTree:
    """
    In-memory directory tree reconstructed from a transcript.

    Directories are stored in a flat node table indexed by their id. Parents
    own their children through `Directory.contents`; children only keep the
    id of their parent, so the ownership graph stays acyclic.
    """

    def __init__(self):
        self._directories: list[Directory] = [Directory(0, ROOT_NAME)]
        # absolute path of each directory, indexed like _directories
        self._paths: list[str] = [ROOT_NAME]

    @property
    def root(self) -> Directory:
        return self._directories[0]

    @property
    def directories(self) -> list[Directory]:
        """Every directory in creation order, root first."""
        return list(self._directories)

    def get_directory(self, directory_id: int) -> Directory:
        """
        Look up a directory by id.

        Raises:
            KeyError: If no directory has this id
        """
        if not 0 <= directory_id < len(self._directories):
            raise KeyError(f"Unknown directory id: {directory_id}")
        return self._directories[directory_id]

    def parent_of(self, entry: Entry) -> Optional[Directory]:
        if entry.parent_id is None:
            return None
        return self.get_directory(entry.parent_id)

    def add_directory(self, parent: Directory, name: str) -> Optional[Directory]:
        """
        Create an empty directory under `parent`.

        Args:
            parent: Directory that will own the new entry
            name: Name of the new directory

        Returns:
            The new Directory, or None if `parent` already has an entry with
            this name (of either kind)
        """
        if parent.has_child(name):
            return None
        directory = Directory(len(self._directories), name, parent.id)
        parent.add_entry(directory)
        self._directories.append(directory)
        self._paths.append(_join(self._paths[parent.id], name))
        return directory

    def add_file(self, parent: Directory, name: str, size: int) -> Optional[File]:
        """
        Create a file under `parent`.

        Returns:
            The new File, or None if `parent` already has an entry with this name
        """
        if parent.has_child(name):
            return None
        file = File(name, size, parent.id)
        parent.add_entry(file)
        return file

    def iter_files(self) -> Iterator[File]:
        for directory in self._directories:
            yield from directory.files()

    def path_of(self, entry: Entry) -> str:
        """Absolute slash-separated path of an entry; the root is `/`."""
        if isinstance(entry, Directory):
            return self._paths[entry.id]
        return _join(self._paths[entry.parent_id], entry.name)

    def directory_size(self, directory: Directory) -> int:
        """Total size of every file transitively contained in `directory`."""
        return sum(
            self.directory_size(entry) if isinstance(entry, Directory) else entry.size
            for entry in directory.contents
        )

    def directory_sizes(self) -> dict[int, int]:
        """
        Compute the size of every directory in one pass.

        Children always get a larger id than their parent, so walking the node
        table backwards sees every subdirectory before its parent.

        Returns:
            Mapping of directory id to recursive size
        """
        sizes: dict[int, int] = {}
        for directory in reversed(self._directories):
            sizes[directory.id] = sum(
                sizes[entry.id] if isinstance(entry, Directory) else entry.size
                for entry in directory.contents
            )
        return sizes

    def __len__(self) -> int:
        return len(self._directories)

    def __repr__(self) -> str:
        return f"FileSystemTree(directories={len(self._directories)})"
