# stamfluid

A small two-dimensional incompressible fluid solver on a periodic unit square,
using the spectral "stable fluids" method: forces are applied, the velocity
field is advected semi-Lagrangianly, and viscous diffusion and projection onto
the divergence-free part are done in Fourier space. A passive dye field is
carried along by the flow.

Results can be drawn straight into a terminal with 256-colour ANSI codes, or
written frame by frame into a preallocated binary file of 32-bit floats.

## Installation

```
pip install .
```

NumPy is the only runtime dependency.

## Ready-made simulations

Two demonstrations come with the package.

Kelvin–Helmholtz instability: the dye is 1 in the lower half of the domain
(`y <= 1/2`) and 0 above it. A tanh shear force with a small sinusoidal
disturbance near the interface is applied for the first ten steps, rolling the
interface up into vortices.

```
stamfluid-kelvin-helmholtz
```

Options: `--size` (grid size, default 500), `--steps` (default 700), `--dt`
(default 0.01), `--viscosity` (default 0.001) and `--output-dir`.

Viscosity investigation: four Gaussian dye blobs are pushed towards each other
by Gaussian forces for the first 100 steps, and the run is repeated for each
viscosity in turn (1.0, 0.1 and 0.001 by default).

```
stamfluid-viscosity
```

Options: `--size` (default 500), `--steps` (default 200), `--dt` (default
0.01), `--viscosity` (one or more values) and `--output-dir`.

Both render into the terminal by default, drawing every fourth grid point with
a short pause between frames; zoom the terminal out so the frame fits. Given
`--output-dir`, they write frames to a binary file in that directory instead.
The directory must already exist.

## Using the solver

The solver functions do not modify their inputs; they return new arrays.

```python
from stamfluid.grid import Grid
from stamfluid.fluid_solver import evolve_velocity_field, evolve_dye_field
from stamfluid.viscosity_investigation import add_gaussian

grid = Grid.create(128)
grid.dye = add_gaussian(grid.dye, 0.5, 0.5, 1.0, 0.05)
grid.f_x = add_gaussian(grid.f_x, 0.5, 0.5, 5.0, 0.075)

for _ in range(50):
    grid.u, grid.v = evolve_velocity_field(grid.u, grid.v, grid.f_x, grid.f_y, visc=0.001, dt=0.01)
    grid.dye = evolve_dye_field(grid.u, grid.v, grid.dye, dt=0.01)
```

Fields are square NumPy arrays indexed `[j, i]`, with `i` the x index and `j`
the y index; cell centres sit at `(i + 0.5) / n`.

- `Grid.create(n)` makes an `n` by `n` grid with zeroed `u`, `v`, `f_x`, `f_y`
  and `dye` fields (float32); `Grid.clear()` zeroes them again.
- `apply_forces`, `advect_scalar_field`, `diffuse_and_project`,
  `evolve_velocity_field` and `evolve_dye_field` in `stamfluid.fluid_solver`
  make up the time step. `diffuse_and_project` works on `numpy.fft.rfft2`
  transforms of shape `(n, n // 2 + 1)`.
- `render_colored_field(field, step=4, stream=None)`,
  `init_binary_output_file` and `write_array_to_binary` in `stamfluid.output`
  handle display and file output. The terminal picture is drawn transposed:
  each printed line holds one x index.
- `stamfluid.kelvin_helmholtz.run` and
  `stamfluid.viscosity_investigation.simulation` run the demonstrations with
  any grid size, step count and output choice, and return the final grid.
  `initial_dye`, `shear_force` and `add_gaussian` build their initial fields
  and forces.

## Binary output format

`init_binary_output_file(dim1, dim2, nof_frames, base_filename, output_directory="outputs")`
creates `<output_directory>/<base_filename>_<dd_mm_YYYY_HHhMMmSSs>.bin`, filled
with zeros and sized to hold every frame, prints its path and returns it as a
`pathlib.Path`. Each frame is `n * n` native-endian float32 values in row
order (`[j, i]`), and frame `k` starts at byte offset `k * n * n * 4`.
`write_array_to_binary(array, current_frame_idx, filename)` writes one frame
into a file made this way.

## What it does not do

The package writes binary frames but has no reader for them and makes no
images or animations from them; load the files with `numpy.fromfile` and
animate them with other tools.

## Tests

```
pip install .[test]
pytest
```