# Auto-generated __init__.py

from . import identity
from .identity import SigningIdentity
from .identity import compute_key_id
from .identity import default_email
from .identity import load_public_key
from .identity import pem_blocks
from .identity import verify_signature

__all__ = [
    "identity",
    "SigningIdentity",
    "compute_key_id",
    "default_email",
    "load_public_key",
    "pem_blocks",
    "verify_signature",
]
