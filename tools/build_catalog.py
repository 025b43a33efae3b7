#!/usr/bin/env python3
"""
build_catalog.py - Encrypt plaintext JSON question catalogs.

Usage with key file:
    python tools/build_catalog.py --in catalog.json --out catalogs/catalog.enc --key-file QUIZ.key

Usage with password:
    python tools/build_catalog.py --in catalog.json --out catalogs/catalog.enc --password

Export the built-in catalog as JSON:
    python tools/build_catalog.py --export-builtin catalog.json

Generate a key file:
    python tools/build_catalog.py --generate-key QUIZ.key
"""

import argparse
import getpass
import hashlib
import json
import sys
from pathlib import Path

from cryptography.fernet import Fernet

sys.path.insert(0, str(Path(__file__).parent.parent))

from codequiz.catalog import builtin_catalog_dict, encrypt_catalog  # noqa: E402
from codequiz.models import QuestionCatalog  # noqa: E402


def generate_key(output_file: str) -> None:
    """Generate a new Fernet key and save it to file."""
    key = Fernet.generate_key()
    with open(output_file, 'wb') as f:
        f.write(key)
    print(f"[OK] Success: Encryption key generated")
    print(f"  Output: {output_file}")
    print(f"\n[!] SECURITY: Store this key securely. Never commit to version control.")


def export_builtin(output_file: str) -> None:
    with open(output_file, 'w', encoding='utf-8') as f:
        json.dump(builtin_catalog_dict(), f, indent=2)
    print(f"[OK] Built-in catalog written to {output_file}")


def build_catalog(in_file: str, out_file: str, key_file: str = None, use_password: bool = False) -> None:
    """Encrypt a plaintext JSON question catalog."""
    try:
        with open(in_file, 'rb') as f:
            plaintext = f.read()

        try:
            catalog = QuestionCatalog.from_dict(json.loads(plaintext))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            print(f"[ERROR] Invalid catalog in input file: {e}", file=sys.stderr)
            sys.exit(1)

        print(f"[OK] Input catalog validated")
        print(f"  Version: {catalog.version}")
        print(f"  Languages: {', '.join(catalog.languages())}")
        print(f"  Questions: {len(catalog.mcq)} multiple-choice, {len(catalog.coding)} coding")

        if use_password:
            password = getpass.getpass("Enter encryption password: ")
            if password != getpass.getpass("Confirm password: "):
                print("[ERROR] Passwords do not match", file=sys.stderr)
                sys.exit(1)
            if len(password) < 8:
                print("[ERROR] Password must be at least 8 characters", file=sys.stderr)
                sys.exit(1)
            final_data = encrypt_catalog(plaintext, password=password)
        else:
            with open(key_file, 'rb') as f:
                final_data = encrypt_catalog(plaintext, key=f.read().strip())

        Path(out_file).parent.mkdir(parents=True, exist_ok=True)
        with open(out_file, 'wb') as f:
            f.write(final_data)

        print(f"\n[OK] Success: Catalog encrypted")
        print(f"  Output: {out_file} ({len(final_data)} bytes)")
        print(f"  Method: {'Password-based' if use_password else 'Key file'}")
        print(f"  SHA256: {hashlib.sha256(final_data).hexdigest()}")

    except FileNotFoundError as e:
        print(f"[ERROR] File not found: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"[ERROR] Error encrypting catalog: {e}", file=sys.stderr)
        sys.exit(1)


def main():
    parser = argparse.ArgumentParser(
        description="Encrypt a plaintext JSON question catalog.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--in", dest="in_file", help="Input plaintext JSON catalog")
    parser.add_argument("--out", help="Output encrypted catalog file (.enc)")
    parser.add_argument("--key-file", help="File containing the encryption key")
    parser.add_argument("--password", action="store_true",
                        help="Use password-based encryption instead of key file")
    parser.add_argument("--generate-key", metavar="PATH", help="Write a new Fernet key to PATH and exit")
    parser.add_argument("--export-builtin", metavar="PATH", help="Write the built-in catalog as JSON and exit")

    args = parser.parse_args()

    if args.generate_key:
        generate_key(args.generate_key)
        return
    if args.export_builtin:
        export_builtin(args.export_builtin)
        return

    if not args.in_file or not args.out:
        parser.error("--in and --out are required")
    if args.password == bool(args.key_file):
        parser.error("Specify exactly one of --password or --key-file")

    build_catalog(args.in_file, args.out, args.key_file, args.password)


if __name__ == "__main__":
    main()
