"""
Loader for generated trait implementor fragments (trait.impl/**/*.js).

A fragment wraps its table in ``Object.fromEntries([...])`` and ends with a
``//{"start":..., "fragment_lengths":[...]}`` comment that records where each
per-crate piece sits inside the file. The loader extracts both and checks that
they agree; it never interprets the rendered entries.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from interfaces import ImplementorTable

logger = logging.getLogger(__name__)

TABLE_MARKER = "Object.fromEntries("
METADATA_PREFIX = "//"


class FragmentFormatError(ValueError):
    """Raised when a fragment file cannot be decoded into an implementor table."""


@dataclass
class FragmentMetadata:
    """Byte layout of the per-crate pieces inside a fragment file."""
    start: int
    fragment_lengths: List[int] = field(default_factory=list)


@dataclass
class ImplementorFragment:
    """A decoded fragment file."""
    trait_path: str
    table: ImplementorTable
    metadata: Optional[FragmentMetadata] = None

    @property
    def entry_count(self) -> int:
        return sum(len(entries) for entries in self.table.values())


def _decode_table(text: str) -> Tuple[ImplementorTable, int, int]:
    """Decode the array literal. Returns the table and its character span."""
    marker = text.find(TABLE_MARKER)
    if marker < 0:
        raise FragmentFormatError("No Object.fromEntries table found")

    array_start = marker + len(TABLE_MARKER)
    if text[array_start:array_start + 1] != "[":
        raise FragmentFormatError("Expected an array literal after Object.fromEntries(")

    try:
        pairs, array_end = json.JSONDecoder().raw_decode(text, array_start)
    except json.JSONDecodeError as e:
        raise FragmentFormatError(f"Invalid table literal: {e}") from e

    table: ImplementorTable = {}
    for pair in pairs:
        if not (isinstance(pair, list) and len(pair) == 2
                and isinstance(pair[0], str) and isinstance(pair[1], list)):
            raise FragmentFormatError(f"Malformed table entry: {pair!r}")
        group, entries = pair
        if group in table:
            raise FragmentFormatError(f"Duplicate group key: {group}")
        table[group] = entries

    return table, array_start, array_end


def _parse_metadata(text: str) -> Optional[FragmentMetadata]:
    """Parse the trailing layout comment, if the fragment has one."""
    for line in reversed(text.splitlines()):
        line = line.strip()
        if not line:
            continue
        if not line.startswith(METADATA_PREFIX + "{"):
            return None
        try:
            raw = json.loads(line[len(METADATA_PREFIX):])
        except json.JSONDecodeError as e:
            raise FragmentFormatError(f"Invalid metadata comment: {e}") from e
        try:
            return FragmentMetadata(
                start=int(raw["start"]),
                fragment_lengths=[int(n) for n in raw["fragment_lengths"]]
            )
        except (KeyError, TypeError, ValueError) as e:
            raise FragmentFormatError(f"Incomplete metadata comment: {raw!r}") from e
    return None


def _check_layout(text: str, array_start: int, table: ImplementorTable,
                  metadata: FragmentMetadata) -> None:
    """Check the recorded byte spans against the decoded table."""
    data = text.encode("utf-8")
    expected_start = len(text[:array_start + 1].encode("utf-8"))
    if metadata.start != expected_start:
        raise FragmentFormatError(
            f"Metadata start {metadata.start} does not match table offset {expected_start}"
        )

    if len(metadata.fragment_lengths) != len(table):
        raise FragmentFormatError(
            f"Metadata lists {len(metadata.fragment_lengths)} fragments for {len(table)} groups"
        )

    # Every fragment after the first carries its leading comma in its length
    position = metadata.start
    groups = list(table.items())
    for index, length in enumerate(metadata.fragment_lengths):
        piece = data[position:position + length]
        if index > 0:
            if piece[:1] != b",":
                raise FragmentFormatError(f"Fragment {index} does not start with ',' at offset {position}")
            piece = piece[1:]
        try:
            decoded = json.loads(piece.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise FragmentFormatError(f"Fragment {index} does not decode at offset {position}") from e
        if decoded != list(groups[index]):
            raise FragmentFormatError(f"Fragment {index} does not match group {groups[index][0]}")
        position += length

    if data[position:position + 1] != b"]":
        raise FragmentFormatError(f"Table does not close at offset {position}")


def parse_fragment(text: str, trait_path: str) -> ImplementorFragment:
    """
    Decode fragment source into an implementor fragment.

    Args:
        text: Fragment file contents
        trait_path: Trait the fragment belongs to, e.g. std/io/trait.Read

    Returns:
        Decoded fragment

    Raises:
        FragmentFormatError: If the table or its metadata is malformed
    """
    table, array_start, _ = _decode_table(text)
    metadata = _parse_metadata(text)
    if metadata is not None:
        _check_layout(text, array_start, table, metadata)
    return ImplementorFragment(trait_path=trait_path, table=table, metadata=metadata)


def trait_path_for(path: Union[str, Path], root: Optional[Union[str, Path]] = None) -> str:
    """Trait path for a fragment file: relative to root without the .js suffix."""
    path = Path(path)
    if root is not None:
        try:
            return path.relative_to(root).with_suffix("").as_posix()
        except ValueError:
            logger.debug(f"{path} is outside {root}, using file stem")
    return path.stem


def load_fragment(path: Union[str, Path], root: Optional[Union[str, Path]] = None) -> ImplementorFragment:
    """
    Load a fragment file from disk.

    Args:
        path: Path to the .js fragment
        root: trait.impl directory the trait path is computed against

    Returns:
        Decoded fragment

    Raises:
        FragmentFormatError: If the file is unreadable or malformed
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FragmentFormatError(f"Cannot read fragment {path}: {e}") from e

    fragment = parse_fragment(text, trait_path_for(path, root))
    logger.info(f"Loaded fragment {fragment.trait_path}: {len(fragment.table)} groups, "
                f"{fragment.entry_count} entries")
    return fragment


def discover_fragments(root: Union[str, Path]) -> List[Path]:
    """
    Find every fragment file below a directory.

    Args:
        root: Directory to search

    Returns:
        Sorted fragment paths
    """
    root = Path(root)
    if not root.is_dir():
        logger.warning(f"Fragment root not found: {root}")
        return []
    return sorted(root.rglob("*.js"))
