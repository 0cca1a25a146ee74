"""Binary and CSV persistence for game-length histograms.

Binary layout (network byte order):

    header  !4sBI   magic b"WARH", format version, entry count
    entry   !IQ     game length in turns, number of games

Entries are written in ascending length order.
"""

from __future__ import annotations

import logging
import struct
from pathlib import Path
from typing import Union

from warsim.histogram.state import TurnHistogram

logger = logging.getLogger(__name__)

# Binary format version
HISTOGRAM_VERSION = 1
HISTOGRAM_MAGIC = b"WARH"

HEADER_FORMAT = "!4sBI"
ENTRY_FORMAT = "!IQ"
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)
ENTRY_SIZE = struct.calcsize(ENTRY_FORMAT)

STATE_BINARY_NAME = "state.bin"
STATE_CSV_NAME = "state.csv"
CSV_HEADER = "length, count"


class HistogramFormatError(Exception):
    """Stored histogram bytes could not be decoded."""

    pass


def encode_histogram(histogram: TurnHistogram) -> bytes:
    """Serialize a histogram to the compact binary form."""
    items = histogram.items()
    result = struct.pack(HEADER_FORMAT, HISTOGRAM_MAGIC, HISTOGRAM_VERSION, len(items))
    for length, count in items:
        result += struct.pack(ENTRY_FORMAT, length, count)
    return result


def decode_histogram(data: bytes) -> TurnHistogram:
    """Parse the binary form back into a histogram.

    Raises:
        HistogramFormatError: On bad magic, unknown version, or a size that
            does not match the declared entry count
    """
    if len(data) < HEADER_SIZE:
        raise HistogramFormatError(
            f"Histogram data too short: {len(data)} bytes, need at least {HEADER_SIZE}"
        )

    magic, version, entry_count = struct.unpack(HEADER_FORMAT, data[:HEADER_SIZE])
    if magic != HISTOGRAM_MAGIC:
        raise HistogramFormatError(f"Bad histogram magic: {magic!r}")
    if version != HISTOGRAM_VERSION:
        raise HistogramFormatError(f"Unsupported histogram version: {version}")

    expected_size = HEADER_SIZE + entry_count * ENTRY_SIZE
    if len(data) != expected_size:
        raise HistogramFormatError(
            f"Histogram size mismatch: {len(data)} bytes for {entry_count} entries "
            f"(expected {expected_size})"
        )

    histogram = TurnHistogram()
    for length, count in struct.iter_unpack(ENTRY_FORMAT, data[HEADER_SIZE:]):
        histogram.add(length, count)
    return histogram


def histogram_to_csv(histogram: TurnHistogram) -> str:
    """Human-readable table, one ``length, count`` row per game length."""
    lines = [CSV_HEADER]
    for length, count in histogram.items():
        lines.append(f"{length}, {count}")
    return "\n".join(lines) + "\n"


def load_state(directory: Union[str, Path]) -> TurnHistogram:
    """Load the accumulated histogram from ``directory``.

    A missing or unreadable state file starts a fresh, empty histogram.
    """
    path = Path(directory) / STATE_BINARY_NAME
    if not path.exists():
        logger.info(f"No saved state at {path}, starting fresh")
        return TurnHistogram()

    try:
        histogram = decode_histogram(path.read_bytes())
    except (OSError, HistogramFormatError) as e:
        logger.warning(f"Failed to load {path}: {e}. Starting fresh")
        return TurnHistogram()

    logger.info(f"Loaded {histogram.total_games()} games from {path}")
    return histogram


def _replace_file(path: Path, data: bytes) -> None:
    """Write ``data`` beside ``path`` and move it into place."""
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        tmp_path.write_bytes(data)
        tmp_path.replace(path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise


def save_state(histogram: TurnHistogram, directory: Union[str, Path]) -> Path:
    """Write the histogram as binary and CSV into ``directory``.

    Each file is written to a temporary sibling first and then renamed,
    so an interrupted save leaves the previous state readable.

    Returns:
        Path of the binary state file
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    csv_path = directory / STATE_CSV_NAME
    _replace_file(csv_path, histogram_to_csv(histogram).encode())

    binary_path = directory / STATE_BINARY_NAME
    _replace_file(binary_path, encode_histogram(histogram))

    logger.info(f"Saved {histogram.total_games()} games to {binary_path} and {csv_path}")
    return binary_path
