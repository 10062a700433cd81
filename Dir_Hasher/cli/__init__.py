# Auto-generated __init__.py

from . import key_resolution
from .key_resolution import resolve_signing_identity
from .key_resolution import save_identity
from .key_resolution import write_public_key
from . import hasher
from .hasher import build_options
from .hasher import load_settings
from .hasher import run

__all__ = [
    "hasher",
    "key_resolution",
    "build_options",
    "load_settings",
    "resolve_signing_identity",
    "run",
    "save_identity",
    "write_public_key",
]
