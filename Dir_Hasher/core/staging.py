import os
from pathlib import Path
from typing import Iterable

PARTIAL_SUFFIX = ".partial"


class StagedArtifact:
    """
    An output file written under a temporary name and only moved to
    its final path by commit(). discard() removes whatever was staged.
    """

    def __init__(self, target: Path):
        self.target = Path(target)
        self.partial = self.target.with_name(self.target.name + PARTIAL_SUFFIX)
        self.committed = False

    def commit(self) -> Path:
        os.replace(self.partial, self.target)
        self.committed = True
        return self.target

    def discard(self) -> None:
        self.partial.unlink(missing_ok=True)
        if self.committed:
            self.target.unlink(missing_ok=True)
            self.committed = False


def commit_all(artifacts: Iterable[StagedArtifact]) -> None:
    """
    Promote every staged artifact, or none of them.
    """
    artifacts = list(artifacts)
    try:
        for artifact in artifacts:
            artifact.commit()
    except OSError:
        discard_all(artifacts)
        raise


def discard_all(artifacts: Iterable[StagedArtifact]) -> None:
    for artifact in artifacts:
        artifact.discard()
