from dataclasses import dataclass
import os
from datetime import datetime
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_CHUNK_SIZE = 1024 * 1024
DEFAULT_PROGRESS_INTERVAL = 3.0
SYMLINK_POLICIES = ("skip", "follow")


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class FileRecord:
    """
    One entry of the walked tree.

    `relative_path` always uses forward slashes, whatever the
    platform separator is.
    """
    relative_path: str
    size: int
    modified_at: datetime
    is_directory: bool = False


@dataclass(frozen=True)
class DirectoryInventory:
    """
    Sorted, immutable snapshot of a directory tree.

    Used for:
    - the single digest pass (regular files, in order)
    - the [directory] and [files] sections of the manifest
    - the archive member list
    """
    root: Path
    records: Tuple[FileRecord, ...]
    total_files: int
    total_directories: int
    total_size_bytes: int
    captured_at: datetime

    @classmethod
    def from_records(
        cls,
        root: Path,
        records: List[FileRecord],
        captured_at: datetime,
    ) -> "DirectoryInventory":
        ordered = tuple(sorted(records, key=lambda r: r.relative_path))
        files = [r for r in ordered if not r.is_directory]
        return cls(
            root=root,
            records=ordered,
            total_files=len(files),
            total_directories=len(ordered) - len(files),
            total_size_bytes=sum(r.size for r in files),
            captured_at=captured_at,
        )

    def regular_files(self) -> Iterator[FileRecord]:
        return (r for r in self.records if not r.is_directory)

    def path_of(self, record: FileRecord) -> Path:
        return self.root.joinpath(*record.relative_path.split("/"))


class DigestResult(Mapping[str, str]):
    """
    Read-only mapping of algorithm name -> hex digest.
    Iteration follows the order the values were produced in.
    """

    def __init__(self, values: Mapping[str, str], categories: Optional[Mapping[str, str]] = None):
        self._values = MappingProxyType(dict(values))
        self._categories = MappingProxyType(dict(categories or {}))

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self):
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"DigestResult({dict(self._values)!r})"

    def category_of(self, name: str) -> Optional[str]:
        return self._categories.get(name)

    def by_category(self) -> Dict[str, Dict[str, str]]:
        grouped: Dict[str, Dict[str, str]] = {}
        for name, value in self._values.items():
            category = self._categories.get(name, "other")
            grouped.setdefault(category, {})[name] = value
        return grouped


@dataclass(frozen=True)
class RunOptions:
    """
    Everything a single pipeline run needs to know.

    Built once from settings + command line flags and passed down
    explicitly; nothing in the pipeline reads global state.
    """
    root: Path
    verbose: bool = False
    progress: bool = True

    # Signing
    key_path: Optional[Path] = None
    key_store: Optional[Path] = None
    export_public_key: bool = False
    identity_name: str = "Dir Hasher"
    identity_comment: str = "Directory Hasher"

    # Walk / hashing
    symlinks: str = "skip"
    chunk_size: int = DEFAULT_CHUNK_SIZE
    progress_interval: float = DEFAULT_PROGRESS_INTERVAL

    # Fixed clock for reproducible manifests (None = now)
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        if self.symlinks not in SYMLINK_POLICIES:
            raise ValueError(
                f"Unknown symlink policy {self.symlinks!r}; "
                f"expected one of {', '.join(SYMLINK_POLICIES)}"
            )
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")

    @property
    def manifest_path(self) -> Path:
        return _adjacent(self.root, ".toml")

    @property
    def archive_path(self) -> Path:
        return _adjacent(self.root, ".zip")

    @property
    def public_key_path(self) -> Path:
        return _adjacent(self.root, ".pub.pem")


@dataclass(frozen=True)
class RunSummary:
    manifest_path: Path
    archive_path: Path
    digests: DigestResult
    key_id: str
    elapsed_seconds: float
    public_key_path: Optional[Path] = None


def directory_display_name(root: Path) -> str:
    """
    Name used for the manifest. Falls back to the resolved directory
    when the given path has no usable final component ('.', '..', '/').
    """
    name = root.name
    if name in {"", ".", ".."}:
        name = root.resolve().name
    return name or str(root)


def portable_name(name: str) -> str:
    """
    Text form of a path that is always valid UTF-8.

    Bytes the filesystem encoding could not decode (surrogate escapes)
    are written as \\xNN; every other name is returned unchanged.
    """
    return os.fsencode(name).decode("utf-8", "backslashreplace")


def _adjacent(root: Path, suffix: str) -> Path:
    resolved = root.resolve()
    return resolved.parent / f"{directory_display_name(root)}{suffix}"
