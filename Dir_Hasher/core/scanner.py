import os
import stat
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Set, Tuple

from Dir_Hasher.core.errors import RootNotFoundError, WalkEntryError
from Dir_Hasher.core.logger import log
from Dir_Hasher.core.models import (
    SYMLINK_POLICIES,
    DirectoryInventory,
    FileRecord,
    portable_name,
)


# ============================================================
# Entry helpers
# ============================================================

def _stat_entry(path: Path, follow: bool) -> os.stat_result:
    return path.stat() if follow else path.lstat()


def _list_directory(directory: Path) -> List[Path]:
    return list(directory.iterdir())


def _report(error: WalkEntryError) -> None:
    log("WARNING", "scanner", f"Skipping entry: {error}")


# ============================================================
# Walk
# ============================================================

def build_inventory(
    root: Path,
    *,
    symlinks: str = "skip",
    captured_at: Optional[datetime] = None,
) -> DirectoryInventory:
    """
    Walk `root` and return a sorted DirectoryInventory.

    - Records every directory and regular file below root (root excluded)
    - Per-entry failures are logged and skipped, the walk continues
    - symlinks="skip" omits links; "follow" follows them and breaks cycles
    """
    if symlinks not in SYMLINK_POLICIES:
        raise ValueError(f"Unknown symlink policy: {symlinks!r}")

    root = Path(root)
    try:
        root_stat = root.stat()
    except OSError as exc:
        raise RootNotFoundError(
            f"Directory does not exist or is not accessible: {exc.strerror or exc}",
            path=str(root),
        ) from exc

    if not stat.S_ISDIR(root_stat.st_mode):
        raise RootNotFoundError("Path is not a directory", path=str(root))

    captured_at = captured_at or datetime.now()
    follow = symlinks == "follow"
    records: List[FileRecord] = []

    # (st_dev, st_ino) of the directories on the current descent path
    ancestors: Set[Tuple[int, int]] = {(root_stat.st_dev, root_stat.st_ino)}

    def walk(directory: Path, prefix: str) -> None:
        try:
            children = _list_directory(directory)
        except OSError as exc:
            _report(WalkEntryError(f"cannot list directory: {exc.strerror or exc}", path=portable_name(prefix) or "."))
            return

        for child in children:
            rel = f"{prefix}/{child.name}" if prefix else child.name
            shown = portable_name(rel)

            try:
                is_link = child.is_symlink()
                if is_link and not follow:
                    log("INFO", "scanner", f"Skipping symbolic link: {shown}")
                    continue
                st = _stat_entry(child, follow)
            except OSError as exc:
                _report(WalkEntryError(f"cannot stat entry: {exc.strerror or exc}", path=shown))
                continue

            try:
                modified = datetime.fromtimestamp(st.st_mtime)
            except (OSError, ValueError, OverflowError) as exc:
                _report(WalkEntryError(f"unusable modification time: {exc}", path=shown))
                continue

            if stat.S_ISDIR(st.st_mode):
                key = (st.st_dev, st.st_ino)
                if key in ancestors:
                    log("WARNING", "scanner", f"Skipping directory cycle: {shown}")
                    continue

                records.append(FileRecord(rel, 0, modified, is_directory=True))
                ancestors.add(key)
                try:
                    walk(child, rel)
                finally:
                    ancestors.discard(key)

            elif stat.S_ISREG(st.st_mode):
                records.append(FileRecord(rel, st.st_size, modified))

            else:
                log("WARNING", "scanner", f"Skipping special file: {shown}")

    walk(root, "")

    inventory = DirectoryInventory.from_records(root, records, captured_at)

    log(
        "INFO",
        "scanner",
        (
            f"Inventory complete: {inventory.total_files} files, "
            f"{inventory.total_directories} directories, "
            f"{inventory.total_size_bytes / (1024 * 1024):.2f} MB total"
        ),
    )
    return inventory
