"""Backup document parsing and required-field checks.

The document is decoded into plain dicts and lists without binding it to a
schema, so fields added by newer app versions are ignored rather than
rejected.
"""

import json
import logging
from pathlib import Path
from typing import BinaryIO, Union

from .errors import EmptyBackup, MalformedDocument, MissingCriticalData
from .schemas import MANGAS, VERSION

logger = logging.getLogger(__name__)

DocumentInput = Union[BinaryIO, bytes, str]


def _reject_constant(name: str):
    raise MalformedDocument(f"Backup file is not valid JSON: {name} is not a valid JSON value")


def parse_document(source: DocumentInput) -> dict:
    """Parse a backup document into a JSON object tree.

    Args:
        source: Binary stream (read to exhaustion), raw bytes, or text

    Returns:
        Top-level JSON object as a dict

    Raises:
        MalformedDocument: If the input is not valid UTF-8 JSON or the
            top-level value is not an object
    """
    if isinstance(source, (bytes, bytearray)):
        raw = bytes(source)
    elif isinstance(source, str):
        raw = source.encode("utf-8")
    else:
        raw = source.read()

    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedDocument(f"Backup file is not valid UTF-8: {e}") from e

    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise MalformedDocument(
            f"Backup file is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno})"
        ) from e
    except RecursionError as e:
        raise MalformedDocument("Backup file is not valid JSON: nesting is too deep") from e

    if not isinstance(document, dict):
        raise MalformedDocument(
            f"Backup file must contain a JSON object, got {type(document).__name__}"
        )

    logger.debug("Parsed backup document with fields: %s", sorted(document))
    return document


def load_document(path: Path) -> dict:
    """Read and parse a backup document from disk."""
    with open(path, "rb") as f:
        return parse_document(f)


def require_critical_fields(document: dict) -> list:
    """Check that the document can be restored at all.

    Args:
        document: Parsed backup document

    Returns:
        The manga records list

    Raises:
        MissingCriticalData: If the version or manga field is absent
        MalformedDocument: If the manga field is not a list
        EmptyBackup: If the manga list is empty
    """
    if VERSION not in document or MANGAS not in document:
        missing = [name for name in (VERSION, MANGAS) if name not in document]
        logger.debug("Backup is missing critical fields: %s", missing)
        raise MissingCriticalData()

    records = document[MANGAS]
    if not isinstance(records, list):
        raise MalformedDocument(
            f"Backup field '{MANGAS}' must be a list, got {type(records).__name__}"
        )

    if len(records) == 0:
        raise EmptyBackup()

    return records
