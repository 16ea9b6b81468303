"""
Reading video public IDs from arguments and text files.

Files hold one ID per line; blank lines and lines starting with '#' are skipped.
"""
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..core.exceptions import IdentifierFileError, NoIdentifiersError
from ..logging import get_logger

logger = get_logger("input")


def parse_identifiers(text: str) -> List[str]:
    """
    Extract identifiers from line-oriented text.

    Args:
        text: File contents

    Returns:
        Trimmed, non-empty, non-comment lines in order
    """
    identifiers = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            identifiers.append(line)
    return identifiers


def read_identifiers_file(file_path: Union[str, Path]) -> List[str]:
    """
    Read identifiers from a file.

    Raises:
        IdentifierFileError: If the file cannot be read
    """
    path = Path(file_path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise IdentifierFileError(str(path), str(e)) from e

    identifiers = parse_identifiers(content)
    logger.debug(f"Read {len(identifiers)} video IDs from {path}")
    return identifiers


def collect_identifiers(
    positional: Iterable[str],
    file_path: Optional[Union[str, Path]] = None,
) -> List[str]:
    """
    Combine command-line identifiers with those read from a file.

    Args:
        positional: IDs given directly, kept first
        file_path: Optional file with more IDs

    Returns:
        All identifiers, duplicates preserved

    Raises:
        IdentifierFileError: If the file cannot be read
        NoIdentifiersError: If nothing is left to process
    """
    identifiers = [video_id for video_id in positional if video_id]
    if file_path is not None:
        identifiers.extend(read_identifiers_file(file_path))

    if not identifiers:
        raise NoIdentifiersError()
    return identifiers
