# Auto-generated __init__.py

from . import manifest
from .manifest import compose_manifest
from .manifest import signing_payload
from .manifest import write_manifest
from . import manifest_sections
from .manifest_sections import signed_block
from .manifest_sections import toml_string
from . import manifest_verify
from .manifest_verify import VerificationReport
from .manifest_verify import read_manifest
from .manifest_verify import verify_manifest

__all__ = [
    "manifest",
    "manifest_sections",
    "manifest_verify",
    "VerificationReport",
    "compose_manifest",
    "read_manifest",
    "signed_block",
    "signing_payload",
    "toml_string",
    "verify_manifest",
    "write_manifest",
]
