"""Terminal rendering and binary frame output for simulation fields."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

import numpy as np

CURSOR_HOME = "\033[H"
RESET = "\033[0m"
FIRST_COLOR = 16
COLOR_SPAN = 215
FRAME_DTYPE = np.dtype(np.float32)
TIMESTAMP_FORMAT = "%d_%m_%Y_%Hh%Mm%Ss"


def _cell(color: int) -> str:
    return f"\033[48;5;{color}m {RESET}"


def render_colored_field(field, step=4, stream: TextIO | None = None) -> None:
    """Draw a field with values in [0, 1] as coloured cells on a terminal.

    Values are clipped to [0, 1] and mapped onto the 216-colour ANSI cube.
    Every ``step``-th point is drawn. Each printed line holds one x index,
    so the picture appears transposed, which suits tall terminals.
    """
    field = np.asarray(field)
    if field.ndim != 2:
        raise ValueError(f"field must be a 2-D array, got shape {field.shape}")
    if step < 1:
        raise ValueError(f"step must be a positive integer, got {step}")
    out = sys.stdout if stream is None else stream

    values = np.asarray(field.T[::step, ::step], dtype=np.float32)
    clipped = np.fmax(np.float32(0.0), np.fmin(np.float32(1.0), values))
    colors = FIRST_COLOR + (clipped * np.float32(COLOR_SPAN)).astype(np.int64)

    lines = ["".join(_cell(c) for c in row) + "\n" for row in colors.tolist()]
    out.write(CURSOR_HOME + "".join(lines))
    out.flush()


def init_binary_output_file(
    dim1, dim2, nof_frames, base_filename, output_directory="outputs"
) -> Path:
    """Create a zero-filled binary file sized for ``nof_frames`` float32 frames.

    The file name is ``<base_filename>_<timestamp>.bin`` inside
    ``output_directory``, so earlier outputs are not overwritten.
    Returns the path of the new file.
    """
    if dim1 <= 0 or dim2 <= 0 or nof_frames <= 0:
        raise ValueError(
            f"dimensions and frame count must be positive, got {dim1}, {dim2}, {nof_frames}"
        )
    size = nof_frames * dim1 * dim2 * FRAME_DTYPE.itemsize
    timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
    path = Path(output_directory) / f"{base_filename}_{timestamp}.bin"

    with path.open("wb") as handle:
        handle.seek(size - 1)
        handle.write(b"\0")

    print(f"Simulation output file relative path: {path}")
    return path


def write_array_to_binary(array, current_frame_idx, filename) -> None:
    """Write ``array`` as float32 frame number ``current_frame_idx`` of ``filename``.

    The file must already exist, as made by :func:`init_binary_output_file`.
    """
    if current_frame_idx < 0:
        raise ValueError(f"frame index must not be negative, got {current_frame_idx}")
    data = np.ascontiguousarray(array, dtype=FRAME_DTYPE)
    with open(filename, "r+b") as handle:
        handle.seek(current_frame_idx * data.nbytes)
        handle.write(data.tobytes())