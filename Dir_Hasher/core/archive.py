from pathlib import Path
import zipfile

from Dir_Hasher.core.errors import ArchiveWriteError
from Dir_Hasher.core.logger import log
from Dir_Hasher.core.models import DirectoryInventory, portable_name


def archive_directory(
    inventory: DirectoryInventory,
    destination: Path,
) -> Path:
    """
    Write every inventory entry into a deflated ZIP at `destination`.

    - Member names are relative, forward-slash separated
    - Directories (including empty ones) become "name/" members
    - The root directory itself is never a member
    - Undecodable name bytes are written as \\xNN, as in the manifest

    On failure nothing is left at `destination`.
    """
    destination = Path(destination)

    try:
        with zipfile.ZipFile(
            destination,
            "w",
            compression=zipfile.ZIP_DEFLATED,
            strict_timestamps=False,
        ) as zf:
            for record in inventory.records:
                source = inventory.path_of(record)
                arcname = portable_name(record.relative_path)

                if record.is_directory:
                    zf.write(source, arcname + "/")
                    continue

                zf.write(source, arcname)
    except (OSError, UnicodeError, zipfile.BadZipFile, zipfile.LargeZipFile) as exc:
        destination.unlink(missing_ok=True)
        raise ArchiveWriteError(
            f"Failed to write archive: {exc}",
            path=str(destination),
        ) from exc

    log(
        "INFO",
        "archive",
        f"Archived {len(inventory.records)} entries into {destination.name}",
    )
    return destination
