import numpy as np
import pytest

from stamfluid.viscosity_investigation import add_gaussian, main, simulation


def test_add_gaussian_peak_at_centre():
    field = np.zeros((10, 10), dtype=np.float32)
    result = add_gaussian(field, 0.25, 0.25, 3.0, 0.1)
    assert result[2, 2] == pytest.approx(3.0)
    assert result.max() == pytest.approx(3.0)
    assert np.unravel_index(np.argmax(result), result.shape) == (2, 2)


def test_add_gaussian_does_not_modify_input():
    field = np.ones((6, 6), dtype=np.float32)
    add_gaussian(field, 0.5, 0.5, 1.0, 0.1)
    np.testing.assert_array_equal(field, np.ones((6, 6)))


def test_add_gaussian_is_additive():
    single = add_gaussian(np.zeros((8, 8)), 0.3, 0.6, 1.5, 0.2)
    double = add_gaussian(single, 0.3, 0.6, 1.5, 0.2)
    np.testing.assert_allclose(double, 2 * single, rtol=1e-6)


def test_add_gaussian_symmetric_about_centre():
    result = add_gaussian(np.zeros((8, 8)), 0.5, 0.5, 1.0, 0.1)
    np.testing.assert_allclose(result, result.T, rtol=1e-6)
    np.testing.assert_allclose(result, result[::-1, ::-1], rtol=1e-6)


def test_add_gaussian_rejects_non_square():
    with pytest.raises(ValueError):
        add_gaussian(np.zeros((3, 4)), 0.5, 0.5, 1.0, 0.1)


def test_simulation_writes_frames(tmp_path):
    grid = simulation(0.1, "blobs", n=8, total_steps=2, render_to_terminal=False,
                      output_directory=tmp_path)
    files = list(tmp_path.glob("blobs_*.bin"))
    assert len(files) == 1
    frames = np.fromfile(files[0], dtype=np.float32).reshape(2, 8, 8)
    np.testing.assert_array_equal(frames[-1], grid.dye)
    assert grid.dye.min() >= 0.0
    assert np.abs(grid.u).sum() > 0


def test_simulation_renders(capsys):
    simulation(1.0, "unused", n=4, total_steps=1, render_to_terminal=True)
    assert capsys.readouterr().out.count("\033[H") == 1


def test_main_runs_each_viscosity(tmp_path):
    status = main(["--size", "8", "--steps", "1", "--output-dir", str(tmp_path)])
    assert status == 0
    names = sorted(path.name for path in tmp_path.glob("*.bin"))
    assert len(names) == 3
    assert any(name.startswith("viscosity_investigation_visc_1.0000_") for name in names)
    assert any(name.startswith("viscosity_investigation_visc_0.0010_") for name in names)