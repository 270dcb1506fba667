"""Pull the edited file path out of a hook payload.

Hook payloads look like ``{"tool_input": {"file_path": "..."}}`` but only that one
key matters, so this is a scanner for a single key rather than a JSON parser. The
rest of the payload may be malformed without affecting the result.
"""

from pathlib import Path
from typing import Final


FILE_PATH_KEY: Final[str] = '"file_path"'


def extract_file_path(raw_input: str) -> Path | None:
    """Extract the ``file_path`` value from a hook payload.

    The value must be a quoted string. It is captured up to the next quote
    character and then only ``\\"`` and ``\\\\`` are unescaped; any other escape
    sequence is kept as written.

    :param str raw_input: The raw text read from the hook's stdin.
    :return: The extracted path, or ``None`` when the key is missing, the value is
        not a string, or the value is empty.
    :rtype: Path | None
    """
    start = raw_input.find(FILE_PATH_KEY)
    if start < 0:
        return None

    rest = raw_input[start + len(FILE_PATH_KEY) :].lstrip()
    if not rest.startswith(":"):
        return None
    rest = rest[1:].lstrip()
    if not rest.startswith('"'):
        return None
    rest = rest[1:]

    # Naive scan: an escaped quote still terminates the value.
    end = rest.find('"')
    if end < 0:
        return None

    value = rest[:end].replace('\\"', '"').replace("\\\\", "\\")
    if not value:
        return None
    return Path(value)
