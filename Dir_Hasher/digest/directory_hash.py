from pathlib import Path
import time
from typing import Callable, Dict, List, Optional

from Dir_Hasher.core.errors import ReadError
from Dir_Hasher.core.logger import log
from Dir_Hasher.core.models import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_PROGRESS_INTERVAL,
    DigestResult,
    DirectoryInventory,
    portable_name,
)
from Dir_Hasher.digest.accumulators import (
    IncrementalDigest,
    algorithm_names,
    create_accumulators,
    get_algorithm,
)

MB = 1024 * 1024


# ============================================================
# Progress
# ============================================================

class ProgressReporter:
    """
    Logs hashing progress at most once per `interval` seconds of
    wall-clock time, as a share of the inventory's total bytes.
    """

    def __init__(
        self,
        total_bytes: int,
        *,
        enabled: bool = True,
        interval: float = DEFAULT_PROGRESS_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.total_bytes = total_bytes
        self.enabled = enabled
        self.interval = interval
        self.clock = clock
        self.processed = 0
        self._last_update = clock()

    def percent(self) -> float:
        if self.total_bytes <= 0:
            return 100.0
        return min(100.0, self.processed / self.total_bytes * 100)

    def advance(self, count: int) -> None:
        self.processed += count

        if not self.enabled:
            return

        now = self.clock()
        if now - self._last_update < self.interval:
            return

        log(
            "INFO",
            "digest",
            (
                f"Hashing progress: {self.percent():.1f}% complete "
                f"({self.processed / MB:.2f} MB / {self.total_bytes / MB:.2f} MB)"
            ),
        )
        self._last_update = now

    def finish(self) -> None:
        if self.enabled:
            log(
                "INFO",
                "digest",
                f"Hashing progress: 100.0% complete ({self.total_bytes / MB:.2f} MB)",
            )


# ============================================================
# Single read pass
# ============================================================

def _feed_file(
    path: Path,
    accumulators: List[IncrementalDigest],
    chunk_size: int,
    progress: ProgressReporter,
) -> None:
    with open(path, "rb") as handle:
        while True:
            chunk = handle.read(chunk_size)
            if not chunk:
                break
            for accumulator in accumulators:
                accumulator.update(chunk)
            progress.advance(len(chunk))


def compute_directory_digests(
    inventory: DirectoryInventory,
    *,
    algorithms: Optional[List[str]] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    progress: bool = True,
    progress_interval: float = DEFAULT_PROGRESS_INTERVAL,
    verbose: bool = False,
    clock: Callable[[], float] = time.monotonic,
) -> DigestResult:
    """
    Hash the concatenated content of every regular file in inventory
    order with all registered algorithms, reading each file once.

    Any open/read failure raises ReadError; nothing partial is returned.
    """
    names = algorithms if algorithms is not None else algorithm_names()
    accumulators: Dict[str, IncrementalDigest] = create_accumulators(names)
    fan_out = list(accumulators.values())

    reporter = ProgressReporter(
        inventory.total_size_bytes,
        enabled=progress,
        interval=progress_interval,
        clock=clock,
    )

    for record in inventory.regular_files():
        shown = portable_name(record.relative_path)
        if verbose:
            log("INFO", "digest", f"Processing file: {shown}")

        path = inventory.path_of(record)
        try:
            _feed_file(path, fan_out, chunk_size, reporter)
        except OSError as exc:
            raise ReadError(
                f"Error reading file: {exc.strerror or exc}",
                path=shown,
            ) from exc

    reporter.finish()

    values = {name: acc.finish().hex() for name, acc in accumulators.items()}
    categories = {name: get_algorithm(name).category for name in names}
    return DigestResult(values, categories)
