import os
from pathlib import Path

from Dir_Hasher.core.errors import KeyGenError, ManifestWriteError
from Dir_Hasher.core.models import RunOptions
from Dir_Hasher.signing.identity import SigningIdentity, default_email


def save_identity(identity: SigningIdentity, path: Path) -> Path:
    """
    Persist secret key + certificate, readable by the owner only.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="ascii") as f:
            f.write(identity.export_secret_key())
    except OSError as exc:
        raise KeyGenError(
            f"Could not persist generated key: {exc.strerror or exc}",
            path=str(path),
        ) from exc
    return path


def write_public_key(identity: SigningIdentity, path: Path) -> Path:
    path = Path(path)
    try:
        path.write_text(identity.export_public_key(), encoding="ascii")
    except OSError as exc:
        raise ManifestWriteError(
            f"Failed to write public key: {exc.strerror or exc}",
            path=str(path),
        ) from exc
    return path


def resolve_signing_identity(options: RunOptions) -> SigningIdentity:
    """
    Pick the signer for a run:

    1. an explicit key file
    2. the configured key store, when it already holds a key
    3. a fresh key, saved to the key store when one is configured
    4. a fresh ephemeral key
    """
    from Dir_Hasher.core.logger import log

    if options.key_path:
        identity = SigningIdentity.load(options.key_path)
        log("INFO", "signing", f"Loaded signing key {identity.key_id} from {options.key_path}")
        return identity

    store = options.key_store
    if store and Path(store).exists():
        identity = SigningIdentity.load(store)
        log("INFO", "signing", f"Reusing stored signing key {identity.key_id}")
        return identity

    log("INFO", "signing", "No signing key provided, generating a new one...")
    identity = SigningIdentity.generate(
        options.identity_name,
        default_email(),
        options.identity_comment,
    )

    if store:
        save_identity(identity, store)
        log("INFO", "signing", f"Saved new signing key {identity.key_id} to {store}")
    else:
        log(
            "WARNING",
            "signing",
            (
                f"Using ephemeral signing key {identity.key_id} ({identity.user_id}); "
                "signatures from separate runs will not share a signer. "
                "Set signing.key_store to reuse one identity."
            ),
        )

    return identity
