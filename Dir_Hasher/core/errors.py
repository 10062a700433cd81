from typing import Optional


# ============================================================
# Error taxonomy
# ============================================================

class DirHasherError(Exception):
    """
    Base class for every failure the pipeline reports.

    `phase` names the pipeline step that failed so the CLI can
    tell the operator where the run stopped.
    """
    phase = "pipeline"

    def __init__(self, message: str, *, path: Optional[str] = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        message = super().__str__()
        if self.path:
            return f"{message} ({self.path})"
        return message


class SettingsError(DirHasherError):
    phase = "configuration"


class RootNotFoundError(DirHasherError):
    phase = "inventory"


class WalkEntryError(DirHasherError):
    """
    Per-entry stat/list failure. Never fatal: the walker logs it
    and moves on to the next entry.
    """
    phase = "inventory"


class ReadError(DirHasherError):
    phase = "digest"


class KeyLoadError(DirHasherError):
    phase = "signing"


class KeyGenError(DirHasherError):
    phase = "signing"


class SignError(DirHasherError):
    phase = "signing"


class ManifestWriteError(DirHasherError):
    phase = "manifest"


class ManifestFormatError(DirHasherError):
    phase = "verify"


class ArchiveWriteError(DirHasherError):
    phase = "archive"


ArchiveError = ArchiveWriteError
