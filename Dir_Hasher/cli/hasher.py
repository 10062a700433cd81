import asyncio
from datetime import datetime
import json
import os
from pathlib import Path
import time
from typing import Any, Dict, Optional

from Dir_Hasher.cli.key_resolution import resolve_signing_identity, write_public_key
from Dir_Hasher.core.archive import archive_directory
from Dir_Hasher.core.errors import ManifestWriteError, SettingsError
from Dir_Hasher.core.logger import log
from Dir_Hasher.core.models import (
    DirectoryInventory,
    RunOptions,
    RunSummary,
    directory_display_name,
)
from Dir_Hasher.core.scanner import build_inventory
from Dir_Hasher.core.staging import StagedArtifact, commit_all, discard_all
from Dir_Hasher.digest.directory_hash import compute_directory_digests
from Dir_Hasher.docs.manifest import compose_manifest, signing_payload, write_manifest


# ----------------------------
# Settings
# ----------------------------

SETTINGS_ENV = "DIR_HASHER_SETTINGS"
DEFAULT_SETTINGS_PATH = Path.home() / ".config" / "dir_hasher" / "settings.json"

DEFAULT_SETTINGS = {
    "hashing": {
        "chunk_size": 1024 * 1024,
        "progress_interval_seconds": 3.0,
    },
    "walk": {"symlinks": "skip"},
    "signing": {
        "identity_name": "Dir Hasher",
        "identity_comment": "Directory Hasher",
        "key_path": None,
        "key_store": None,  # 👈 set to reuse one identity across runs
        "export_public_key": False,
    },
    "logging": {"verbose": False, "progress": True},
}


def load_settings(settings_path=None) -> Dict[str, Any]:
    path = settings_path or os.getenv(SETTINGS_ENV) or DEFAULT_SETTINGS_PATH
    path = Path(path).expanduser()

    merged = json.loads(json.dumps(DEFAULT_SETTINGS))

    if not path.exists():
        return merged

    try:
        with open(path, "r", encoding="utf-8") as f:
            user_settings = json.load(f)
    except (OSError, ValueError) as exc:
        raise SettingsError(f"Cannot read settings: {exc}", path=str(path)) from exc

    if not isinstance(user_settings, dict):
        raise SettingsError("Settings file must contain a JSON object", path=str(path))

    for k, v in user_settings.items():
        if k in DEFAULT_SETTINGS and not isinstance(v, dict):
            raise SettingsError(
                f'Settings section "{k}" must be a JSON object, got {type(v).__name__}',
                path=str(path),
            )
        if isinstance(v, dict) and k in merged:
            merged[k].update(v)
        else:
            merged[k] = v

    return merged


def _optional_path(value) -> Optional[Path]:
    if value in (None, ""):
        return None
    return Path(value).expanduser()


def build_options(
    root,
    settings: Optional[Dict[str, Any]] = None,
    *,
    verbose: Optional[bool] = None,
    progress: Optional[bool] = None,
    key_path=None,
    key_store=None,
    export_public_key: Optional[bool] = None,
    symlinks: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> RunOptions:
    """
    Turn settings + command line overrides into one immutable RunOptions.
    Overrides left as None keep the settings value.
    """
    settings = settings if settings is not None else json.loads(json.dumps(DEFAULT_SETTINGS))
    hashing = settings.get("hashing", {})
    walk = settings.get("walk", {})
    signing = settings.get("signing", {})
    logging_cfg = settings.get("logging", {})

    def pick(override, section, key, default):
        if override is not None:
            return override
        return section.get(key, default)

    try:
        return RunOptions(
            root=Path(root).expanduser(),
            verbose=bool(pick(verbose, logging_cfg, "verbose", False)),
            progress=bool(pick(progress, logging_cfg, "progress", True)),
            key_path=_optional_path(pick(key_path, signing, "key_path", None)),
            key_store=_optional_path(pick(key_store, signing, "key_store", None)),
            export_public_key=bool(pick(export_public_key, signing, "export_public_key", False)),
            identity_name=signing.get("identity_name", "Dir Hasher"),
            identity_comment=signing.get("identity_comment", "Directory Hasher"),
            symlinks=pick(symlinks, walk, "symlinks", "skip"),
            chunk_size=int(hashing.get("chunk_size", 1024 * 1024)),
            progress_interval=float(hashing.get("progress_interval_seconds", 3.0)),
            timestamp=timestamp,
        )
    except (TypeError, ValueError) as exc:
        raise SettingsError(f"Invalid settings: {exc}") from exc


# ----------------------------
# Pipeline
# ----------------------------

def _fingerprint_and_sign(
    options: RunOptions,
    inventory: DirectoryInventory,
    manifest: StagedArtifact,
    public_key: Optional[StagedArtifact],
    generated_at: datetime,
):
    digests = compute_directory_digests(
        inventory,
        chunk_size=options.chunk_size,
        progress=options.progress,
        progress_interval=options.progress_interval,
        verbose=options.verbose,
    )
    log("INFO", "hasher", "Hash generation complete")

    identity = resolve_signing_identity(options)
    directory_name = directory_display_name(options.root)
    signature = identity.sign(signing_payload(inventory, digests, directory_name))

    text = compose_manifest(
        inventory,
        digests,
        signature=signature,
        key_id=identity.key_id,
        algorithm=identity.algorithm,
        signer=identity.user_id,
        generated_at=generated_at,
        directory_name=directory_name,
    )
    write_manifest(manifest.partial, text)

    if public_key is not None:
        write_public_key(identity, public_key.partial)

    return digests, identity


async def run(options: RunOptions) -> RunSummary:
    """
    Walk, fingerprint, sign and archive `options.root`.

    The digest/sign/manifest chain and the archiver run as two worker
    threads over the same inventory. Outputs are staged and only
    promoted when both succeed.
    """
    started = time.monotonic()
    log("INFO", "hasher", f"Starting directory hashing for: {options.root}")

    generated_at = options.timestamp or datetime.now()
    inventory = build_inventory(
        options.root,
        symlinks=options.symlinks,
        captured_at=options.timestamp,
    )

    manifest = StagedArtifact(options.manifest_path)
    archive = StagedArtifact(options.archive_path)
    public_key = StagedArtifact(options.public_key_path) if options.export_public_key else None
    staged = [a for a in (manifest, archive, public_key) if a is not None]

    results = await asyncio.gather(
        asyncio.to_thread(
            _fingerprint_and_sign,
            options,
            inventory,
            manifest,
            public_key,
            generated_at,
        ),
        asyncio.to_thread(archive_directory, inventory, archive.partial),
        return_exceptions=True,
    )

    failures = [r for r in results if isinstance(r, BaseException)]
    if failures:
        discard_all(staged)
        raise failures[0]

    try:
        commit_all(staged)
    except OSError as exc:
        raise ManifestWriteError(f"Failed to finalize outputs: {exc}") from exc

    digests, identity = results[0]
    elapsed = time.monotonic() - started

    log("INFO", "hasher", f"Manifest written: {manifest.target}")
    log("INFO", "hasher", f"Archive written: {archive.target}")
    log("INFO", "hasher", f"All operations completed in {elapsed:.2f}s")

    return RunSummary(
        manifest_path=manifest.target,
        archive_path=archive.target,
        digests=digests,
        key_id=identity.key_id,
        elapsed_seconds=elapsed,
        public_key_path=public_key.target if public_key else None,
    )
