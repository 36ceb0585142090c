"""Source mapping extraction from the backup's extensions list.

Backups list the sources they reference as compact ``"<id>:<name>"`` strings.
"""

import re

from .errors import MalformedSourceMapping
from .schemas import EXTENSION_SEPARATOR, EXTENSIONS

_SOURCE_ID = re.compile(r"[+-]?[0-9]+")

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1


def decode_extension_entry(entry: str) -> tuple[int, str]:
    """Decode one ``"<id>:<name>"`` entry.

    The name is everything after the first separator, so names may contain
    colons themselves.

    Raises:
        MalformedSourceMapping: If the entry has no separator or the id is
            not a 64-bit integer
    """
    if not isinstance(entry, str):
        raise MalformedSourceMapping(entry, reason="expected a string")

    raw_id, separator, name = entry.partition(EXTENSION_SEPARATOR)
    if not separator:
        raise MalformedSourceMapping(entry, reason="missing ':' separator")

    if not _SOURCE_ID.fullmatch(raw_id):
        raise MalformedSourceMapping(entry, reason=f"source id {raw_id!r} is not a number")

    source_id = int(raw_id)
    if not LONG_MIN <= source_id <= LONG_MAX:
        raise MalformedSourceMapping(entry, reason="source id out of range")

    return source_id, name


def get_source_mapping(document: dict) -> dict[int, str]:
    """Build the source id to name mapping declared by a backup.

    Older backups have no extensions list; that yields an empty mapping.
    Repeated ids keep the last name seen.

    Args:
        document: Parsed backup document

    Returns:
        Mapping of source id to display name

    Raises:
        MalformedSourceMapping: If the extensions field or any entry is invalid
    """
    extensions = document.get(EXTENSIONS)
    if extensions is None:
        return {}

    if not isinstance(extensions, list):
        raise MalformedSourceMapping(extensions, reason=f"'{EXTENSIONS}' must be a list")

    mapping: dict[int, str] = {}
    for index, entry in enumerate(extensions):
        try:
            source_id, name = decode_extension_entry(entry)
        except MalformedSourceMapping as e:
            raise MalformedSourceMapping(entry, index=index, reason=e.reason) from e
        mapping[source_id] = name

    return mapping

