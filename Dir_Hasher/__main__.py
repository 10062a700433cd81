import argparse
import asyncio
from pathlib import Path
import sys

import Dir_Hasher.cli.hasher as hasher_cli
from Dir_Hasher.core.errors import DirHasherError
from Dir_Hasher.core.logger import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dir-hasher",
        description="Fingerprint, sign and archive a directory.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    hash_cmd = commands.add_parser("hash", help="write <dir>.toml and <dir>.zip next to a directory")
    hash_cmd.add_argument("directory", type=Path, help="directory to hash and zip")
    hash_cmd.add_argument("--verbose", action="store_true", default=None, help="log every processed file")
    hash_cmd.add_argument(
        "--no-progress",
        dest="progress",
        action="store_false",
        default=None,
        help="do not report hashing progress",
    )
    hash_cmd.add_argument("--key", type=Path, help="PEM secret key (and certificate) to sign with")
    hash_cmd.add_argument(
        "--key-store",
        type=Path,
        help="reuse the key stored here, or generate and save one",
    )
    hash_cmd.add_argument(
        "--export-public-key",
        action="store_true",
        default=None,
        help="also write <dir>.pub.pem",
    )
    hash_cmd.add_argument(
        "--follow-symlinks",
        dest="symlinks",
        action="store_const",
        const="follow",
        help="follow symbolic links instead of skipping them",
    )
    hash_cmd.add_argument("--settings", type=Path, help="settings.json to use")

    verify_cmd = commands.add_parser("verify", help="check a manifest signature (and digests)")
    verify_cmd.add_argument("manifest", type=Path)
    verify_cmd.add_argument("--public-key", type=Path, required=True, help="exported certificate or PEM public key")
    verify_cmd.add_argument("--dir", type=Path, dest="root", help="recompute digests for this directory")

    return parser


def _hash(args) -> int:
    settings = hasher_cli.load_settings(args.settings)
    options = hasher_cli.build_options(
        args.directory,
        settings,
        verbose=args.verbose,
        progress=args.progress,
        key_path=args.key,
        key_store=args.key_store,
        export_public_key=args.export_public_key,
        symlinks=args.symlinks,
    )
    configure_logging(options.verbose)

    summary = asyncio.run(hasher_cli.run(options))

    print(f"✅ Manifest: {summary.manifest_path}")
    print(f"✅ Archive:  {summary.archive_path}")
    if summary.public_key_path:
        print(f"✅ Public key: {summary.public_key_path}")
    print(f"   Signed by {summary.key_id}")
    return 0


def _verify(args) -> int:
    from Dir_Hasher.docs.manifest_verify import verify_manifest

    try:
        public_material = args.public_key.read_text(encoding="ascii")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"❌ verify failed: cannot read public key: {exc}", file=sys.stderr)
        return 1

    report = verify_manifest(args.manifest, public_material, root=args.root)

    print(f"Signature: {'valid' if report.signature_valid else 'INVALID'} ({report.key_id})")
    if report.digests_checked:
        if report.mismatched:
            print(f"Digest mismatches: {', '.join(report.mismatched)}")
        else:
            print("Digests: all match")

    return 0 if report.ok else 1


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        if args.command == "verify":
            return _verify(args)
        return _hash(args)
    except DirHasherError as exc:
        print(f"❌ {exc.phase} failed: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
