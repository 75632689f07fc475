"""Spectral stable-fluids solver for a periodic 2D grid, with terminal rendering and binary frame output."""

__version__ = "0.1.0"
__all__ = ["fluid_solver", "grid", "kelvin_helmholtz", "output", "viscosity_investigation"]