"""Kelvin-Helmholtz instability: a dye interface disturbed by a shear force."""

from __future__ import annotations

import argparse
import time

import numpy as np

from stamfluid.fluid_solver import evolve_dye_field, evolve_velocity_field
from stamfluid.grid import FIELD_DTYPE, Grid
from stamfluid.output import (
    init_binary_output_file,
    render_colored_field,
    write_array_to_binary,
)

BASE_FILENAME = "kelvin_helmholtz_instability"
FORCED_STEPS = 10
FRAME_DELAY = 0.011
RENDER_STEP = 4


def _centres(n: int) -> np.ndarray:
    return ((np.arange(n) + 0.5) / n).astype(FIELD_DTYPE)


def initial_dye(n):
    """Return a dye field of 1 where ``y <= 1/2`` and 0 elsewhere."""
    y = _centres(n)
    column = np.where(y <= 0.5, 1.0, 0.0).astype(FIELD_DTYPE)
    return np.repeat(column[:, np.newaxis], n, axis=1)


def shear_force(n, u0=5.0, delta=0.025, amplitude=1.0, sigma=0.02, k=4):
    """Return the ``(f_x, f_y)`` force that drives the shear layer.

    ``f_x`` is a tanh shear profile across ``y = 1/2``; ``f_y`` is a sinusoidal
    disturbance in x of ``k`` periods, confined near the interface by a Gaussian.
    """
    x = _centres(n).astype(np.float64)[np.newaxis, :]
    y = _centres(n).astype(np.float64)[:, np.newaxis]
    f_x = u0 * np.tanh((y - 0.5) / delta) * np.ones_like(x)
    f_y = (
        amplitude
        * np.sin(2 * np.pi * k * x)
        * np.exp(-(y - 0.5) * (y - 0.5) / (2 * sigma * sigma))
    )
    return f_x.astype(FIELD_DTYPE), f_y.astype(FIELD_DTYPE)


def run(
    n=500,
    total_steps=700,
    dt=0.01,
    visc=0.001,
    render_to_terminal=True,
    output_directory="outputs",
):
    """Run the simulation and return the final grid.

    Frames are drawn on the terminal, or written to a binary file in
    ``output_directory`` when ``render_to_terminal`` is false.
    """
    grid = Grid.create(n)
    grid.dye = initial_dye(n)
    force_x, force_y = shear_force(n)

    filename = None
    if not render_to_terminal:
        filename = init_binary_output_file(n, n, total_steps, BASE_FILENAME, output_directory)

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

    if filename is not None:
        print(f"Filename stored to {filename}")
    return grid


def main(argv=None):
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Simulate the Kelvin-Helmholtz instability.")
    parser.add_argument("--size", type=int, default=500, help="grid size n")
    parser.add_argument("--steps", type=int, default=700, help="number of timesteps")
    parser.add_argument("--dt", type=float, default=0.01, help="timestep")
    parser.add_argument("--viscosity", type=float, default=0.001, help="kinematic viscosity")
    parser.add_argument(
        "--output-dir",
        default=None,
        help="write frames to a binary file in this directory instead of the terminal",
    )
    args = parser.parse_args(argv)
    run(
        n=args.size,
        total_steps=args.steps,
        dt=args.dt,
        visc=args.viscosity,
        render_to_terminal=args.output_dir is None,
        output_directory=args.output_dir if args.output_dir is not None else "outputs",
    )
    return 0