# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Directory-listing sources for manifest completion.

Completion only ever asks one question: which names are in this directory,
relative to the manifest? `AbstractFilesystem` is that question as a
protocol, so the answer may come from disk, a tarball listing, a git tree
or a test stub.
"""

from __future__ import annotations

import errno
import os
from collections.abc import Iterable, Mapping
from pathlib import Path, PurePosixPath
from typing import Protocol, runtime_checkable

from cargo_manifest.compat import Self, override

# Nested mapping of entry names; `None` marks a file.
TreeMapping = Mapping[str, "TreeMapping | None"]


@runtime_checkable
class AbstractFilesystem(Protocol):
    """Anything that can list a directory relative to the manifest root."""

    def file_names_in(self, rel_path: str) -> set[str]:
        """Return the names of files and subdirectories in `rel_path`.

        Raises:
            FileNotFoundError: If `rel_path` does not exist.
            OSError: For any other failure (including ``NotADirectoryError``
                when `rel_path` is a file).
        """
        ...


class Filesystem:
    """Lists directories on disk, relative to `root`."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = Path(root)

    def file_names_in(self, rel_path: str) -> set[str]:
        return {entry.name for entry in (self.root / rel_path).iterdir()}

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.root)!r})"


class MemoryFilesystem:
    """A read-only directory tree built from a list of relative file paths.

    Directories exist implicitly as parents of the given files. Paths use
    ``/`` separators and are relative to the manifest root; ``.`` names the
    root itself.

    Example:
        >>> fs = MemoryFilesystem(["Cargo.toml", "src/lib.rs", "src/bin/tool.rs"])
        >>> sorted(fs.file_names_in("src"))
        ['bin', 'lib.rs']
    """

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._dirs: dict[PurePosixPath, set[str]] = {PurePosixPath("."): set()}
        self._files: set[PurePosixPath] = set()
        for raw in paths:
            self._add_file(PurePosixPath(raw))

    @classmethod
    def from_mapping(cls, tree: TreeMapping) -> Self:
        """Build a filesystem from a nested mapping.

        Args:
            tree: Directory name to sub-mapping, file name to ``None``,
                e.g. ``{"src": {"lib.rs": None, "bin": {}}}``. An empty
                mapping creates an empty directory.

        Returns:
            A new in-memory filesystem.
        """
        fs = cls()
        fs._add_tree(PurePosixPath("."), tree)
        return fs

    def _add_tree(self, base: PurePosixPath, tree: TreeMapping) -> None:
        self._ensure_dir(base)
        for name, child in tree.items():
            path = base / name
            if child is None:
                self._add_file(path)
            else:
                self._add_tree(path, child)

    def _ensure_dir(self, path: PurePosixPath) -> None:
        if path in self._dirs:
            return
        if path in self._files:
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(path))
        self._ensure_dir(path.parent)
        self._dirs[path.parent].add(path.name)
        self._dirs[path] = set()

    def _add_file(self, path: PurePosixPath) -> None:
        if path in self._dirs:
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(path))
        self._ensure_dir(path.parent)
        self._dirs[path.parent].add(path.name)
        self._files.add(path)

    def file_names_in(self, rel_path: str) -> set[str]:
        path = PurePosixPath(rel_path)
        if path in self._files:
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), rel_path)
        try:
            return set(self._dirs[path])
        except KeyError:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), rel_path) from None


__all__ = ["AbstractFilesystem", "Filesystem", "MemoryFilesystem", "TreeMapping"]
