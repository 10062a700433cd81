from datetime import datetime
import os
from pathlib import Path
import pytest

from Dir_Hasher.signing.identity import SigningIdentity


FIXED_TIME = datetime(2025, 7, 20, 12, 0, 0)


@pytest.fixture
def fixed_time():
    return FIXED_TIME


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    release/
        a.txt            "hello"
        b.txt            "world"
        docs/
            guide.md     "# Guide"
        empty/
    """
    root = tmp_path / "release"
    root.mkdir()
    (root / "a.txt").write_text("hello")
    (root / "b.txt").write_text("world")
    (root / "docs").mkdir()
    (root / "docs" / "guide.md").write_text("# Guide")
    (root / "empty").mkdir()
    return root


@pytest.fixture(scope="session")
def identity() -> SigningIdentity:
    return SigningIdentity.generate("Test Signer", "test@example.invalid")


@pytest.fixture
def key_file(tmp_path: Path, identity: SigningIdentity) -> Path:
    path = tmp_path / "signer.pem"
    path.write_text(identity.export_secret_key())
    return path


@pytest.fixture
def undecodable_tree(tmp_path: Path) -> Path:
    """
    raw/
        bad\\xff.bin     "bytes"   (name is not valid UTF-8)
        ok.txt           "fine"
    """
    root = tmp_path / "raw"
    root.mkdir()
    try:
        with open(os.path.join(os.fsencode(root), b"bad\xff.bin"), "wb") as f:
            f.write(b"bytes")
    except (OSError, UnicodeError):
        pytest.skip("filesystem rejects non-UTF-8 names")
    (root / "ok.txt").write_text("fine")
    return root
