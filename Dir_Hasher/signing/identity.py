"""
Signing identity: one asymmetric key plus a self-signed X.509
certificate that binds it to a name and e-mail address.

Keys are exchanged as PEM text (PKCS#8 secret key, optionally
followed by the certificate). Signatures are detached and returned
base64-encoded so they can be embedded in the manifest as plain text.
"""

import base64
import binascii
from datetime import datetime, timedelta, timezone
import hashlib
import re
import socket
from pathlib import Path
from typing import Dict

from cryptography import x509
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, padding, rsa
from cryptography.x509.oid import NameOID

from Dir_Hasher.core.errors import KeyGenError, KeyLoadError, SignError

DEFAULT_NAME = "Dir Hasher"
DEFAULT_COMMENT = "Directory Hasher"
CERTIFICATE_DAYS = 365 * 5
PRIVATE_KEY_LABELS = ("PRIVATE KEY", "RSA PRIVATE KEY", "EC PRIVATE KEY")

SUPPORTED_KEY_TYPES = (
    ed25519.Ed25519PrivateKey,
    rsa.RSAPrivateKey,
    ec.EllipticCurvePrivateKey,
)

_KEY_ERRORS = (ValueError, TypeError, UnsupportedAlgorithm)

_PEM_BLOCK_RE = re.compile(
    r"-----BEGIN (?P<label>[A-Z0-9 ]+)-----\r?\n"
    r".*?"
    r"-----END (?P=label)-----",
    re.DOTALL,
)


# ============================================================
# Helpers
# ============================================================

def default_email() -> str:
    try:
        hostname = socket.gethostname()
    except OSError:
        hostname = ""
    return f"dir-hasher@{hostname or 'unknown'}"


def _spki(public_key) -> bytes:
    return public_key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def compute_key_id(public_key) -> str:
    """
    0x-prefixed low 64 bits of SHA-256 over the SubjectPublicKeyInfo.
    """
    return "0x" + hashlib.sha256(_spki(public_key)).digest()[-8:].hex().upper()


def pem_blocks(text: str) -> Dict[str, str]:
    """
    Map each PEM label in `text` to the first block carrying it.
    A key file holds the secret key and, optionally, its certificate.
    """
    blocks: Dict[str, str] = {}
    for match in _PEM_BLOCK_RE.finditer(text):
        blocks.setdefault(match.group("label"), match.group(0) + "\n")
    return blocks


def _algorithm_name(key) -> str:
    if isinstance(key, (ed25519.Ed25519PrivateKey, ed25519.Ed25519PublicKey)):
        return "ed25519"
    if isinstance(key, (rsa.RSAPrivateKey, rsa.RSAPublicKey)):
        return "rsa-pkcs1v15-sha256"
    return "ecdsa-sha256"


def _certificate_hash(key):
    if isinstance(key, ed25519.Ed25519PrivateKey):
        return None
    return hashes.SHA256()


def _self_sign(private_key, name: str, email: str, comment: str) -> x509.Certificate:
    attributes = [x509.NameAttribute(NameOID.COMMON_NAME, name)]
    if comment:
        attributes.append(x509.NameAttribute(NameOID.ORGANIZATIONAL_UNIT_NAME, comment))
    attributes.append(x509.NameAttribute(NameOID.EMAIL_ADDRESS, email))
    subject = x509.Name(attributes)

    now = datetime.now(timezone.utc)
    builder = (
        x509.CertificateBuilder()
        .subject_name(subject)
        .issuer_name(subject)
        .public_key(private_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(minutes=5))
        .not_valid_after(now + timedelta(days=CERTIFICATE_DAYS))
        .add_extension(x509.SubjectAlternativeName([x509.RFC822Name(email)]), critical=False)
        .add_extension(x509.BasicConstraints(ca=False, path_length=None), critical=True)
    )
    return builder.sign(private_key, _certificate_hash(private_key))


def load_public_key(material):
    """
    Accept an exported certificate, a PEM public key, or a key object.
    """
    if not isinstance(material, (str, bytes)):
        return material

    text = material.decode("ascii", errors="replace") if isinstance(material, bytes) else material
    blocks = pem_blocks(text)

    try:
        if "CERTIFICATE" in blocks:
            return x509.load_pem_x509_certificate(blocks["CERTIFICATE"].encode("ascii")).public_key()
        if "PUBLIC KEY" in blocks:
            return serialization.load_pem_public_key(blocks["PUBLIC KEY"].encode("ascii"))
    except _KEY_ERRORS as exc:
        raise KeyLoadError(f"Malformed public key material: {exc}") from exc

    raise KeyLoadError("No certificate or public key found in public key material")


def verify_signature(data: bytes, signature: str, public_material) -> bool:
    """
    Check a detached base64 signature over `data`.

    Returns False for a wrong or malformed signature; raises
    KeyLoadError when the public material itself cannot be read.
    """
    public_key = load_public_key(public_material)

    try:
        raw = base64.b64decode(signature, validate=True)
    except (binascii.Error, ValueError, TypeError):
        return False

    try:
        if isinstance(public_key, ed25519.Ed25519PublicKey):
            public_key.verify(raw, data)
        elif isinstance(public_key, rsa.RSAPublicKey):
            public_key.verify(raw, data, padding.PKCS1v15(), hashes.SHA256())
        elif isinstance(public_key, ec.EllipticCurvePublicKey):
            public_key.verify(raw, data, ec.ECDSA(hashes.SHA256()))
        else:
            return False
        return True
    except InvalidSignature:
        return False


# ============================================================
# Identity
# ============================================================

class SigningIdentity:
    def __init__(self, private_key, certificate: x509.Certificate):
        self._private_key = private_key
        self.certificate = certificate
        self.key_id = compute_key_id(private_key.public_key())
        self.algorithm = _algorithm_name(private_key)

    def __repr__(self) -> str:
        return f"SigningIdentity(key_id={self.key_id!r}, algorithm={self.algorithm!r})"

    # ----------------------------
    # Construction
    # ----------------------------

    @classmethod
    def generate(
        cls,
        name: str = DEFAULT_NAME,
        email: str | None = None,
        comment: str = DEFAULT_COMMENT,
    ) -> "SigningIdentity":
        try:
            private_key = ed25519.Ed25519PrivateKey.generate()
            certificate = _self_sign(private_key, name, email or default_email(), comment)
        except _KEY_ERRORS as exc:
            raise KeyGenError(f"Failed to generate signing key: {exc}") from exc
        return cls(private_key, certificate)

    @classmethod
    def from_pem(cls, material: str | bytes) -> "SigningIdentity":
        if isinstance(material, bytes):
            try:
                material = material.decode("ascii")
            except UnicodeDecodeError as exc:
                raise KeyLoadError("Key material is not PEM text") from exc

        blocks = pem_blocks(material)
        if "ENCRYPTED PRIVATE KEY" in blocks:
            raise KeyLoadError("Password-protected secret keys are not supported")

        key_block = next(
            (blocks[label] for label in PRIVATE_KEY_LABELS if label in blocks),
            None,
        )
        if key_block is None:
            raise KeyLoadError("No PEM PRIVATE KEY block found")

        try:
            private_key = serialization.load_pem_private_key(
                key_block.encode("ascii"),
                password=None,
            )
        except _KEY_ERRORS as exc:
            raise KeyLoadError(f"Malformed secret key: {exc}") from exc

        if not isinstance(private_key, SUPPORTED_KEY_TYPES):
            raise KeyLoadError(f"Unsupported key type: {type(private_key).__name__}")

        cert_block = blocks.get("CERTIFICATE")
        if cert_block is None:
            try:
                certificate = _self_sign(private_key, DEFAULT_NAME, default_email(), DEFAULT_COMMENT)
            except _KEY_ERRORS as exc:
                raise KeyLoadError(f"Failed to self-sign loaded key: {exc}") from exc
            return cls(private_key, certificate)

        try:
            certificate = x509.load_pem_x509_certificate(cert_block.encode("ascii"))
        except _KEY_ERRORS as exc:
            raise KeyLoadError(f"Malformed identity certificate: {exc}") from exc

        if _spki(certificate.public_key()) != _spki(private_key.public_key()):
            raise KeyLoadError("Identity certificate does not match the secret key")

        return cls(private_key, certificate)

    @classmethod
    def load(cls, path: Path) -> "SigningIdentity":
        path = Path(path)
        try:
            material = path.read_bytes()
        except OSError as exc:
            raise KeyLoadError(
                f"Error reading key file: {exc.strerror or exc}",
                path=str(path),
            ) from exc

        try:
            return cls.from_pem(material)
        except KeyLoadError as exc:
            raise KeyLoadError(str(exc), path=str(path)) from exc

    # ----------------------------
    # Identity details
    # ----------------------------

    def _subject(self, oid) -> str | None:
        values = self.certificate.subject.get_attributes_for_oid(oid)
        return values[0].value if values else None

    @property
    def name(self) -> str | None:
        return self._subject(NameOID.COMMON_NAME)

    @property
    def email(self) -> str | None:
        return self._subject(NameOID.EMAIL_ADDRESS)

    @property
    def user_id(self) -> str:
        comment = self._subject(NameOID.ORGANIZATIONAL_UNIT_NAME)
        label = f"{self.name} ({comment})" if comment else f"{self.name}"
        return f"{label} <{self.email}>"

    # ----------------------------
    # Export
    # ----------------------------

    def export_public_key(self) -> str:
        return self.certificate.public_bytes(serialization.Encoding.PEM).decode("ascii")

    def export_secret_key(self) -> str:
        key_pem = self._private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        ).decode("ascii")
        return key_pem + self.export_public_key()

    # ----------------------------
    # Signing
    # ----------------------------

    def sign(self, data: bytes) -> str:
        key = self._private_key
        try:
            if isinstance(key, ed25519.Ed25519PrivateKey):
                raw = key.sign(data)
            elif isinstance(key, rsa.RSAPrivateKey):
                raw = key.sign(data, padding.PKCS1v15(), hashes.SHA256())
            else:
                raw = key.sign(data, ec.ECDSA(hashes.SHA256()))
        except _KEY_ERRORS as exc:
            raise SignError(f"Failed to sign data: {exc}") from exc

        return base64.b64encode(raw).decode("ascii")

    def verify(self, data: bytes, signature: str) -> bool:
        return verify_signature(data, signature, self.certificate.public_key())
