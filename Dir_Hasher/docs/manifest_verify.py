from dataclasses import dataclass, field
from pathlib import Path
import tomllib
from typing import Dict, List, Optional

from Dir_Hasher.core.errors import ManifestFormatError
from Dir_Hasher.core.logger import log
from Dir_Hasher.core.scanner import build_inventory
from Dir_Hasher.digest.accumulators import get_algorithm
from Dir_Hasher.digest.directory_hash import compute_directory_digests
from Dir_Hasher.docs.manifest_sections import DIRECTORY_FIELDS, signed_block
from Dir_Hasher.signing.identity import verify_signature


@dataclass
class VerificationReport:
    manifest_path: Path
    key_id: str
    signature_valid: bool
    digests_checked: bool = False
    mismatched: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.signature_valid and not self.mismatched


def read_manifest(path: Path) -> Dict:
    path = Path(path)
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except OSError as exc:
        raise ManifestFormatError(f"Cannot read manifest: {exc.strerror or exc}", path=str(path)) from exc
    except tomllib.TOMLDecodeError as exc:
        raise ManifestFormatError(f"Manifest is not valid TOML: {exc}", path=str(path)) from exc

    for section in ("directory", "hashes", "signature"):
        if not isinstance(data.get(section), dict):
            raise ManifestFormatError(f"Manifest has no [{section}] section", path=str(path))

    missing = [name for name in DIRECTORY_FIELDS if name not in data["directory"]]
    if missing:
        raise ManifestFormatError(
            f"[directory] is missing: {', '.join(missing)}",
            path=str(path),
        )

    signature = data["signature"]
    if not isinstance(signature.get("signature"), str):
        raise ManifestFormatError("[signature] has no signature value", path=str(path))

    return data


def verify_manifest(
    manifest_path: Path,
    public_material,
    *,
    root: Optional[Path] = None,
    symlinks: str = "skip",
) -> VerificationReport:
    """
    Check the manifest signature and, when `root` is given, recompute
    the digests of that tree and compare them to the recorded ones.
    """
    data = read_manifest(manifest_path)
    hashes = data["hashes"]

    payload = signed_block(data["directory"], hashes).encode("utf-8")
    report = VerificationReport(
        manifest_path=Path(manifest_path),
        key_id=str(data["signature"].get("key_id", "")),
        signature_valid=verify_signature(
            payload,
            data["signature"]["signature"],
            public_material,
        ),
    )

    if root is not None:
        known = []
        for name in hashes:
            try:
                get_algorithm(name)
            except KeyError:
                log("WARNING", "verify", f"Unknown digest algorithm in manifest: {name}")
                report.mismatched.append(name)
                continue
            known.append(name)

        inventory = build_inventory(Path(root), symlinks=symlinks)
        current = compute_directory_digests(inventory, algorithms=known, progress=False)
        report.mismatched.extend(name for name in known if current[name] != hashes[name])
        report.digests_checked = True

    log(
        "INFO",
        "verify",
        (
            f"Signature {'valid' if report.signature_valid else 'INVALID'} "
            f"for key {report.key_id}; "
            f"{len(report.mismatched)} digest mismatch(es)"
        ),
    )
    return report
