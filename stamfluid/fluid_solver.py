"""Stable-fluids solver on a periodic square grid.

Fields are two-dimensional arrays indexed ``field[j, i]`` with ``i`` along x
and ``j`` along y. Diffusion and projection are carried out in Fourier space.
"""

from __future__ import annotations

import numpy as np


def _result_dtype(*arrays: np.ndarray) -> np.dtype:
    return np.result_type(*arrays, np.float32)


def _check_square(name: str, array: np.ndarray) -> int:
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ValueError(f"{name} must be a square 2-D array, got shape {array.shape}")
    return array.shape[0]


def _check_same_shape(**arrays: np.ndarray) -> int:
    items = list(arrays.items())
    first_name, first = items[0]
    n = _check_square(first_name, first)
    for name, array in items[1:]:
        if array.shape != first.shape:
            raise ValueError(
                f"{name} has shape {array.shape}, expected {first.shape} like {first_name}"
            )
    return n


def apply_forces(u, v, f_x, f_y, dt):
    """Return the velocity after adding ``dt`` times the force field."""
    u, v, f_x, f_y = (np.asarray(a) for a in (u, v, f_x, f_y))
    _check_same_shape(u=u, v=v, f_x=f_x, f_y=f_y)
    dtype = _result_dtype(u, v, f_x, f_y)
    return (u + dt * f_x).astype(dtype), (v + dt * f_y).astype(dtype)


def advect_scalar_field(u, v, field, dt):
    """Advect ``field`` by the velocity ``(u, v)`` over one timestep.

    Each cell is traced back along the velocity by ``dt`` and takes the
    bilinearly interpolated value of ``field`` at the departure point, with
    periodic boundaries.
    """
    u, v, field = (np.asarray(a) for a in (u, v, field))
    n = _check_same_shape(u=u, v=v, field=field)

    centres = (np.arange(n) + 0.5) / n
    x0 = n * (centres[np.newaxis, :] - dt * u) - 0.5
    y0 = n * (centres[:, np.newaxis] - dt * v) - 0.5

    i0f = np.floor(x0)
    s = x0 - i0f
    i0 = i0f.astype(np.int64) % n
    i1 = (i0 + 1) % n

    j0f = np.floor(y0)
    t = y0 - j0f
    j0 = j0f.astype(np.int64) % n
    j1 = (j0 + 1) % n

    src = field.astype(np.float64)
    out = (1 - s) * ((1 - t) * src[j0, i0] + t * src[j1, i0]) + s * (
        (1 - t) * src[j0, i1] + t * src[j1, i1]
    )
    return out.astype(_result_dtype(field))


def _wavenumbers(n: int, columns: int) -> tuple[np.ndarray, np.ndarray]:
    kx = np.arange(columns, dtype=np.float64)[np.newaxis, :]
    rows = np.arange(n)
    ky = np.where(rows > n // 2, rows - n, rows).astype(np.float64)[:, np.newaxis]
    return kx, ky


def diffuse_and_project(u_hat, v_hat, visc, dt):
    """Apply viscous decay and divergence-free projection in Fourier space.

    ``u_hat`` and ``v_hat`` are real-to-complex transforms of shape
    ``(n, n // 2 + 1)``. Each mode is multiplied by ``exp(-k^2 dt visc)`` and
    the component along the wave vector is removed. The zero mode is left
    unchanged. New arrays are returned.
    """
    u_hat = np.asarray(u_hat)
    v_hat = np.asarray(v_hat)
    if u_hat.ndim != 2 or u_hat.shape != v_hat.shape:
        raise ValueError(
            f"transformed fields must be 2-D with equal shapes, got {u_hat.shape} and {v_hat.shape}"
        )
    n, columns = u_hat.shape
    if columns != n // 2 + 1:
        raise ValueError(
            f"transformed field shape {u_hat.shape} does not match a real transform of size {n}"
        )

    x, l = _wavenumbers(n, columns)
    r = x * x + l * l
    nonzero = r != 0.0
    safe_r = np.where(nonzero, r, 1.0)
    f = np.exp(-r * dt * visc)

    uu = 1 - x * x / safe_r
    uv = -x * l / safe_r
    vv = 1 - l * l / safe_r

    new_u = f * (uu * u_hat + uv * v_hat)
    new_v = f * (uv * u_hat + vv * v_hat)

    new_u = np.where(nonzero, new_u, u_hat)
    new_v = np.where(nonzero, new_v, v_hat)
    return new_u, new_v


def evolve_velocity_field(u, v, f_x, f_y, visc, dt):
    """Advance the velocity by one timestep and return the new ``(u, v)``.

    Forces are applied, the velocity is self-advected, and diffusion and the
    incompressibility projection are applied in Fourier space.
    """
    u, v, f_x, f_y = (np.asarray(a) for a in (u, v, f_x, f_y))
    n = _check_same_shape(u=u, v=v, f_x=f_x, f_y=f_y)
    dtype = _result_dtype(u, v, f_x, f_y)

    forced_u, forced_v = apply_forces(u, v, f_x, f_y, dt)
    advected_u = advect_scalar_field(forced_u, forced_v, forced_u, dt)
    advected_v = advect_scalar_field(forced_u, forced_v, forced_v, dt)

    u_hat = np.fft.rfft2(advected_u.astype(np.float64))
    v_hat = np.fft.rfft2(advected_v.astype(np.float64))
    u_hat, v_hat = diffuse_and_project(u_hat, v_hat, visc, dt)

    new_u = np.fft.irfft2(u_hat, s=(n, n))
    new_v = np.fft.irfft2(v_hat, s=(n, n))
    return new_u.astype(dtype), new_v.astype(dtype)


def evolve_dye_field(u, v, dye, dt):
    """Return the dye field advected by the velocity over one timestep."""
    return advect_scalar_field(u, v, dye, dt)