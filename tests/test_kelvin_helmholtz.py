import numpy as np

from stamfluid.kelvin_helmholtz import initial_dye, main, run, shear_force


def test_initial_dye_even_grid():
    dye = initial_dye(4)
    assert dye.shape == (4, 4)
    assert np.all(dye[:2] == 1.0)
    assert np.all(dye[2:] == 0.0)


def test_initial_dye_includes_midline():
    dye = initial_dye(3)
    assert dye.shape == (3, 3)
    np.testing.assert_array_equal(dye[1], np.ones(3))
    np.testing.assert_array_equal(dye[2], np.zeros(3))


def test_shear_force_x_is_antisymmetric_and_bounded():
    f_x, _ = shear_force(16)
    assert f_x.dtype == np.float32
    np.testing.assert_allclose(f_x, -f_x[::-1], atol=1e-5)
    assert np.all(np.abs(f_x) <= 5.0)
    np.testing.assert_array_equal(f_x, np.repeat(f_x[:, :1], 16, axis=1))


def test_shear_force_y_rows_average_to_zero():
    _, f_y = shear_force(32)
    np.testing.assert_allclose(f_y.sum(axis=1), 0.0, atol=1e-4)
    np.testing.assert_allclose(f_y, f_y[::-1], atol=1e-5)


def test_shear_force_scales_with_amplitude():
    _, base = shear_force(16)
    _, doubled = shear_force(16, amplitude=2.0)
    np.testing.assert_allclose(doubled, 2 * base, rtol=1e-6, atol=1e-7)


def test_run_writes_frames(tmp_path, capsys):
    grid = run(n=8, total_steps=3, render_to_terminal=False, output_directory=tmp_path)
    files = list(tmp_path.glob("kelvin_helmholtz_instability_*.bin"))
    assert len(files) == 1
    frames = np.fromfile(files[0], dtype=np.float32).reshape(3, 8, 8)
    np.testing.assert_array_equal(frames[-1], grid.dye)
    assert "Filename stored to" in capsys.readouterr().out


def test_run_keeps_dye_bounded(tmp_path):
    grid = run(n=8, total_steps=4, render_to_terminal=False, output_directory=tmp_path)
    assert grid.dye.min() >= -1e-6
    assert grid.dye.max() <= 1 + 1e-6
    assert np.abs(grid.u).sum() > 0


def test_run_renders_each_step(capsys):
    run(n=4, total_steps=2, render_to_terminal=True)
    assert capsys.readouterr().out.count("\033[H") == 2


def test_main_writes_file(tmp_path):
    status = main(["--size", "8", "--steps", "2", "--output-dir", str(tmp_path)])
    assert status == 0
    files = list(tmp_path.glob("*.bin"))
    assert len(files) == 1
    assert files[0].stat().st_size == 2 * 8 * 8 * np.dtype(np.float32).itemsize