"""Four dye blobs pushed together, simulated at several viscosities."""

from __future__ import annotations

import argparse
import time

import numpy as np

from stamfluid.fluid_solver import evolve_dye_field, evolve_velocity_field
from stamfluid.grid import Grid
from stamfluid.output import (
    init_binary_output_file,
    render_colored_field,
    write_array_to_binary,
)

VISCOSITIES = (1.0, 0.1, 0.001)
BLOBS = ((0.2, 0.2), (0.2, 0.8), (0.8, 0.8), (0.8, 0.2))
BLOB_SIGMA = 0.05
BLOB_AMPLITUDE = 0.5
FORCE_AMPLITUDE = 5.0
FORCE_X_SIGNS = (1.0, 1.0, -1.0, -1.0)
FORCE_Y_SIGNS = (1.0, -1.0, -1.0, 1.0)
FORCED_STEPS = 100
FRAME_DELAY = 0.033
RENDER_STEP = 4


def add_gaussian(field, x_center, y_center, amplitude, sigma):
    """Return ``field`` plus a 2-D Gaussian blob centred at ``(x_center, y_center)``.

    Coordinates are cell centres on the unit square.
    """
    field = np.asarray(field)
    if field.ndim != 2 or field.shape[0] != field.shape[1]:
        raise ValueError(f"field must be a square 2-D array, got shape {field.shape}")
    n = field.shape[0]
    centres = (np.arange(n) + 0.5) / n
    x = centres[np.newaxis, :]
    y = centres[:, np.newaxis]
    r2 = (x - x_center) ** 2 + (y - y_center) ** 2
    blob = amplitude * np.exp(-r2 / (2 * sigma * sigma))
    dtype = np.result_type(field, np.float32)
    return (field + blob).astype(dtype)


def _forcing(n: int) -> tuple[np.ndarray, np.ndarray]:
    force_x = np.zeros((n, n), dtype=np.float32)
    force_y = np.zeros((n, n), dtype=np.float32)
    sigma = 1.5 * BLOB_SIGMA
    for (bx, by), sx, sy in zip(BLOBS, FORCE_X_SIGNS, FORCE_Y_SIGNS):
        force_x = add_gaussian(force_x, bx, by, sx * FORCE_AMPLITUDE, sigma)
        force_y = add_gaussian(force_y, bx, by, sy * FORCE_AMPLITUDE, sigma)
    return force_x, force_y


def simulation(
    visc,
    base_filename,
    n=500,
    total_steps=200,
    dt=0.01,
    render_to_terminal=True,
    output_directory="outputs",
):
    """Simulate four blobs driven towards each other and return the final grid."""
    grid = Grid.create(n)
    for bx, by in BLOBS:
        grid.dye = add_gaussian(grid.dye, bx, by, BLOB_AMPLITUDE, BLOB_SIGMA)
    force_x, force_y = _forcing(n)

    filename = None
    if not render_to_terminal:
        filename = init_binary_output_file(n, n, total_steps, base_filename, output_directory)

    for step in range(total_steps):
        if step < FORCED_STEPS:
            grid.f_x[...] = force_x
            grid.f_y[...] = force_y
        else:
            grid.f_x.fill(0.0)
            grid.f_y.fill(0.0)

        grid.u, grid.v = evolve_velocity_field(grid.u, grid.v, grid.f_x, grid.f_y, visc, dt)
        grid.dye = evolve_dye_field(grid.u, grid.v, grid.dye, dt)

        if filename is None:
            render_colored_field(grid.dye, RENDER_STEP)
            time.sleep(FRAME_DELAY)
        else:
            write_array_to_binary(grid.dye, step, filename)

    return grid


def main(argv=None):
    """Command-line entry point: run the simulation once per viscosity."""
    parser = argparse.ArgumentParser(description="Compare blob interaction across viscosities.")
    parser.add_argument("--size", type=int, default=500, help="grid size n")
    parser.add_argument("--steps", type=int, default=200, help="number of timesteps")
    parser.add_argument("--dt", type=float, default=0.01, help="timestep")
    parser.add_argument(
        "--viscosity",
        type=float,
        nargs="+",
        default=list(VISCOSITIES),
        help="viscosities to simulate",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="write frames to binary files in this directory instead of the terminal",
    )
    args = parser.parse_args(argv)

    for visc in args.viscosity:
        simulation(
            visc,
            f"viscosity_investigation_visc_{visc:.4f}",
            n=args.size,
            total_steps=args.steps,
            dt=args.dt,
            render_to_terminal=args.output_dir is None,
            output_directory=args.output_dir if args.output_dir is not None else "outputs",
        )
    return 0