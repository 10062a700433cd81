# Auto-generated __init__.py

from . import archive
from .archive import archive_directory
from . import errors
from .errors import ArchiveError
from .errors import ArchiveWriteError
from .errors import DirHasherError
from .errors import KeyGenError
from .errors import KeyLoadError
from .errors import ManifestFormatError
from .errors import ManifestWriteError
from .errors import ReadError
from .errors import RootNotFoundError
from .errors import SettingsError
from .errors import SignError
from .errors import WalkEntryError
from . import logger
from .logger import configure_logging
from .logger import log
from . import models
from .models import DigestResult
from .models import DirectoryInventory
from .models import FileRecord
from .models import RunOptions
from .models import RunSummary
from .models import directory_display_name
from .models import format_timestamp
from .models import portable_name
from . import scanner
from .scanner import build_inventory
from . import staging
from .staging import StagedArtifact
from .staging import commit_all
from .staging import discard_all

__all__ = [
    "archive",
    "errors",
    "logger",
    "models",
    "scanner",
    "staging",
    "ArchiveError",
    "ArchiveWriteError",
    "DigestResult",
    "DirHasherError",
    "DirectoryInventory",
    "FileRecord",
    "KeyGenError",
    "KeyLoadError",
    "ManifestFormatError",
    "ManifestWriteError",
    "ReadError",
    "RootNotFoundError",
    "RunOptions",
    "RunSummary",
    "SettingsError",
    "SignError",
    "StagedArtifact",
    "WalkEntryError",
    "archive_directory",
    "build_inventory",
    "commit_all",
    "configure_logging",
    "directory_display_name",
    "discard_all",
    "format_timestamp",
    "log",
    "portable_name",
]
