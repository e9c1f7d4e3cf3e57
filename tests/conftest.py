"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules, including an
in-memory FileSystem used to simulate listing failures, permission errors
and concurrent modification deterministically.
"""

import posixpath
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest


class MemoryFileSystem:
    """In-memory FileSystem with failure injection.

    Directories map to None, files to their byte length. Children are
    listed in insertion order.
    """

    def __init__(self, cwd: str = "/work") -> None:
        self.cwd = cwd
        self.nodes: dict[str, int | None] = {"/": None}
        self.unlistable: set[str] = set()
        self.undeletable: set[str] = set()
        self.unresolvable: set[str] = set()
        self.listing_hooks: dict[str, Callable[[], None]] = {}
        self.removed: list[str] = []
        self.listed: list[str] = []

    # -- tree construction --

    def add_dir(self, path: str) -> str:
        path = self.absolute(path)
        parent = posixpath.dirname(path)
        if parent not in self.nodes:
            self.add_dir(parent)
        self.nodes.setdefault(path, None)
        return path

    def add_file(self, path: str, size: int = 0) -> str:
        path = self.absolute(path)
        self.add_dir(posixpath.dirname(path))
        self.nodes[path] = size
        return path

    # -- FileSystem protocol --

    def exists(self, path: str) -> bool:
        return self.absolute(path) in self.nodes

    def is_dir(self, path: str) -> bool:
        path = self.absolute(path)
        return path in self.nodes and self.nodes[path] is None

    def is_link(self, path: str) -> bool:
        return False

    def size(self, path: str) -> int:
        return self.nodes.get(self.absolute(path)) or 0

    def list_dir(self, path: str) -> list[str] | None:
        path = self.absolute(path)
        self.listed.append(path)
        if path in self.unlistable:
            return None
        children = [p for p in self.nodes if p != "/" and posixpath.dirname(p) == path]
        hook = self.listing_hooks.pop(path, None)
        if hook is not None:
            hook()
        return children

    def remove_file(self, path: str) -> None:
        path = self.absolute(path)
        if path not in self.nodes:
            raise FileNotFoundError(path)
        if path in self.undeletable:
            raise PermissionError(f"Permission denied: '{path}'")
        del self.nodes[path]
        self.removed.append(path)

    def remove_dir(self, path: str) -> None:
        path = self.absolute(path)
        if path not in self.nodes:
            raise FileNotFoundError(path)
        if path in self.undeletable:
            raise PermissionError(f"Permission denied: '{path}'")
        if any(posixpath.dirname(p) == path for p in self.nodes if p != "/"):
            raise OSError(f"Directory not empty: '{path}'")
        del self.nodes[path]
        self.removed.append(path)

    def resolve(self, path: str) -> str:
        path = self.absolute(path)
        if path in self.unresolvable:
            raise OSError(f"Cannot resolve: '{path}'")
        return posixpath.normpath(path)

    def absolute(self, path: str) -> str:
        if path.startswith("/"):
            return path
        return posixpath.join(self.cwd, path)


@pytest.fixture
def memfs() -> MemoryFileSystem:
    """Empty in-memory filesystem."""
    return MemoryFileSystem()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Real directory tree with empty and non-empty files at two levels.

    Layout::

        root/
            a.txt       (0 bytes)
            b.txt       (10 bytes)
            notes.MD    (5 bytes)
            sub/
                c.txt   (0 bytes)
                d.log   (3 bytes)
                deeper/
                    e.txt (0 bytes)
    """
    root = tmp_path / "root"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "a.txt").write_bytes(b"")
    (root / "b.txt").write_bytes(b"0123456789")
    (root / "notes.MD").write_bytes(b"notes")
    (root / "sub" / "c.txt").write_bytes(b"")
    (root / "sub" / "d.log").write_bytes(b"log")
    (root / "sub" / "deeper" / "e.txt").write_bytes(b"")
    return root


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Iterator[Path]:
    """Point XDG_CONFIG_HOME at an empty temporary directory."""
    config_home = tmp_path_factory.mktemp("xdg_config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    yield config_home
