from datetime import datetime
from pathlib import Path
from typing import Dict, Tuple

from Dir_Hasher.core.errors import ManifestWriteError
from Dir_Hasher.core.models import (
    DigestResult,
    DirectoryInventory,
    format_timestamp,
    portable_name,
)
from Dir_Hasher.docs.manifest_sections import signed_block, toml_string

BANNER = r"""
 ____  _        _   _           _
|  _ \(_)_ __  | | | | __ _ ___| |__   ___ _ __
| | | | | '__| | |_| |/ _` / __| '_ \ / _ \ '__|
| |_| | | |    |  _  | (_| \__ \ | | |  __/ |
|____/|_|_|    |_| |_|\__,_|___/_| |_|\___|_|
"""


def _banner_lines():
    return [f"# {line}".rstrip() for line in BANNER.strip("\n").splitlines()]


def manifest_fields(
    inventory: DirectoryInventory,
    digests: DigestResult,
    directory_name: str,
) -> Tuple[Dict[str, object], Dict[str, str]]:
    directory = {
        "name": portable_name(directory_name),
        "total_files": inventory.total_files,
        "total_directories": inventory.total_directories,
        "total_size_bytes": inventory.total_size_bytes,
        "inventory_date": format_timestamp(inventory.captured_at),
    }
    return directory, dict(digests)


def signing_payload(
    inventory: DirectoryInventory,
    digests: DigestResult,
    directory_name: str,
) -> bytes:
    directory, hashes = manifest_fields(inventory, digests, directory_name)
    return signed_block(directory, hashes).encode("utf-8")


def compose_manifest(
    inventory: DirectoryInventory,
    digests: DigestResult,
    *,
    signature: str,
    key_id: str,
    algorithm: str,
    signer: str,
    generated_at: datetime,
    directory_name: str,
) -> str:
    """
    Serialize a run into manifest text.

    Section order: banner, generation time, [directory], [hashes],
    [signature], [files]. Records are written exactly as the inventory
    holds them; nothing is reordered or filtered here.
    """
    directory, hashes = manifest_fields(inventory, digests, directory_name)

    lines = _banner_lines()
    lines.append("")
    lines.append(f"# Generated on: {format_timestamp(generated_at)}")
    lines.append("")

    out = "\n".join(lines) + "\n"
    out += signed_block(directory, hashes)

    out += "\n[signature]\n"
    out += f"key_id = {toml_string(key_id)}\n"
    out += f"algorithm = {toml_string(algorithm)}\n"
    out += f"signer = {toml_string(signer)}\n"
    out += f"signature = {toml_string(signature)}\n"

    out += "\n[files]\n"
    for record in inventory.regular_files():
        out += (
            f"\n[files.{toml_string(portable_name(record.relative_path))}]\n"
            f"size = {record.size}\n"
            f"modified = {toml_string(format_timestamp(record.modified_at))}\n"
        )

    return out


def write_manifest(path: Path, text: str) -> Path:
    path = Path(path)
    try:
        path.write_text(text, encoding="utf-8", newline="\n")
    except (OSError, UnicodeEncodeError) as exc:
        raise ManifestWriteError(f"Failed to write manifest: {exc}", path=str(path)) from exc
    return path
