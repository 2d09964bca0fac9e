"""Settings-document parsing.

Theme files are Apple property lists. This module turns the raw bytes of one
into a generic settings tree: nested dicts and lists of plain scalars, with no
theme semantics applied yet.
"""

import plistlib
from datetime import datetime
from typing import Any, BinaryIO, Dict, List, Union
from xml.parsers.expat import ExpatError

from .exceptions import SettingsError

SettingsTree = Union[Dict[str, Any], List[Any], str, int, float, bool, bytes, datetime]


def read_plist(stream: BinaryIO) -> SettingsTree:
    """Parse a property list from a binary stream.

    Both XML and binary property lists are accepted.

    Args:
        stream: Readable binary stream positioned at the document start

    Returns:
        The parsed settings tree

    Raises:
        SettingsError: If the stream does not hold a valid property list
    """
    try:
        return plistlib.load(stream)
    except ExpatError as e:
        raise SettingsError(
            f"Malformed XML at line {e.lineno}, column {e.offset}: {e}",
            details={"line": e.lineno, "column": e.offset},
        ) from e
    except plistlib.InvalidFileException as e:
        raise SettingsError(f"Not a property list: {e}") from e
    except (ValueError, TypeError, KeyError, AttributeError, IndexError, OverflowError) as e:
        raise SettingsError(f"Invalid property list content: {e}") from e
