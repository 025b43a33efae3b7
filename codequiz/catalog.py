"""
Question catalog loading.

The catalog holds correct answers and sample solutions, so it can be shipped
encrypted. Supported sources:
- the built-in catalog (catalog_data.py)
- a plaintext ``.json`` file
- a Fernet-encrypted file, keyed either by a Fernet key or by a password
  (password-derived files start with ``SALT`` followed by a 16-byte salt)
"""

import base64
import json
import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from . import catalog_data
from .models import CodingQuestion, QuestionCatalog

logger = logging.getLogger(__name__)

SALT_PREFIX = b'SALT'
SALT_LENGTH = 16


def derive_key_from_password(password: str, salt: bytes) -> bytes:
    """Derive a Fernet key from a password using PBKDF2."""
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=salt,
        iterations=480000,  # OWASP recommendation for 2024
    )
    key_material = kdf.derive(password.encode())
    return base64.urlsafe_b64encode(key_material)


def builtin_catalog_dict() -> dict:
    return {
        "version": catalog_data.CATALOG_VERSION,
        "mcq": catalog_data.MCQ_QUESTIONS,
        "coding": catalog_data.CODING_QUESTIONS,
    }


def encrypt_catalog(plaintext: bytes, key: Optional[bytes] = None, password: Optional[str] = None) -> bytes:
    """
    Encrypt a JSON catalog with a Fernet key or a password.

    Raises:
        ValueError: If neither or both of key and password are given,
                    or the plaintext is not valid JSON
    """
    if (key is None) == (password is None):
        raise ValueError("Specify exactly one of key or password")

    try:
        json.loads(plaintext)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in catalog: {e}")

    if password is not None:
        salt = os.urandom(SALT_LENGTH)
        encrypted = Fernet(derive_key_from_password(password, salt)).encrypt(plaintext)
        return SALT_PREFIX + salt + encrypted
    return Fernet(key).encrypt(plaintext)


def decrypt_catalog(data: bytes, key: Union[str, bytes]) -> bytes:
    """
    Decrypt catalog bytes; ``key`` is a password for salted files, a Fernet key otherwise.

    Raises:
        ValueError: If the key is wrong or the data is corrupted
    """
    if isinstance(key, bytes):
        key_text = key.decode('utf-8')
    else:
        key_text = key

    if data.startswith(SALT_PREFIX):
        salt = data[len(SALT_PREFIX):len(SALT_PREFIX) + SALT_LENGTH]
        data = data[len(SALT_PREFIX) + SALT_LENGTH:]
        fernet_key = derive_key_from_password(key_text, salt)
    else:
        fernet_key = key_text.strip().encode('utf-8')

    try:
        return Fernet(fernet_key).decrypt(data)
    except (InvalidToken, ValueError) as e:
        raise ValueError("Failed to decrypt catalog: invalid key/password or corrupted file") from e


def load_catalog(path: Optional[Path] = None, key: Optional[Union[str, bytes]] = None) -> QuestionCatalog:
    """
    Load the question catalog.

    Args:
        path: Catalog file; None selects the built-in catalog
        key: Password or Fernet key for encrypted files

    Returns:
        QuestionCatalog

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file can't be decrypted or parsed
    """
    if path is None:
        return QuestionCatalog.from_dict(builtin_catalog_dict())

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog file '{path}' not found")

    raw = path.read_bytes()
    if path.suffix.lower() != '.json':
        if key is None:
            raise ValueError(f"Catalog '{path.name}' is encrypted; a key or password is required")
        raw = decrypt_catalog(raw, key)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in catalog: {e}")

    try:
        catalog = QuestionCatalog.from_dict(data)
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid catalog schema: missing or malformed field {e}")

    logger.info(f"Loaded catalog {catalog.version}: {len(catalog.mcq)} MCQ, {len(catalog.coding)} coding")
    return catalog


def language_hints(question: CodingQuestion) -> List[str]:
    """Hints for a coding question: its own, else the language's, else generic ones."""
    if question.hints:
        return list(question.hints)
    if question.language in catalog_data.LANGUAGE_HINTS:
        return list(catalog_data.LANGUAGE_HINTS[question.language])
    return list(catalog_data.GENERIC_HINTS)
