"""Single-pass enumeration of a directory's subdirectories."""

from pathlib import Path


class TraversalFrame:
    """Traversal stage: a directory and a cursor over its subdirectories.

    Subdirectories are listed and sorted by name once, when the frame is
    created. The frame is forward-only; each subdirectory is returned at most
    once. Call has_next() before next().
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self._subdirs = self._list_subdirs(self.directory)
        self._cursor = 0

    def has_next(self) -> bool:
        return self._cursor < len(self._subdirs)

    def next(self) -> Path:
        """Return the next subdirectory and advance.

        Raises:
            IndexError: If the frame is exhausted
        """
        if not self.has_next():
            raise IndexError(f"No subdirectories left in {self.directory}")
        subdir = self._subdirs[self._cursor]
        self._cursor += 1
        return subdir

    @staticmethod
    def _list_subdirs(directory: Path) -> list[Path]:
        """Return the subdirectories of directory, sorted lexicographically.

        Raises:
            OSError: If the directory cannot be listed
        """
        subdirs = [entry for entry in directory.iterdir() if entry.is_dir()]
        subdirs.sort(key=lambda entry: entry.name)
        return subdirs

    def __repr__(self) -> str:
        last = self._subdirs[self._cursor - 1].name if self._cursor else None
        return (
            f"TraversalFrame({str(self.directory)!r}, last={last!r}, "
            f"has_next={self.has_next()})"
        )
