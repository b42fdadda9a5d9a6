import math

import numpy as np

import constants as C
from perlin import fade, lerp, grad, gradient, perlin_noise, perlin_noise_2d
from permutation import build_permutation_table, make_rng


def _table(seed=7):
    return build_permutation_table(make_rng(seed))


def test_fade_fixed_points():
    assert fade(0) == 0
    assert fade(1) == 1
    assert fade(0.5) == 0.5


def test_lerp_endpoints():
    for a, b in [(0.0, 1.0), (-3.5, 2.25), (10.0, -10.0), (0.1, 0.1)]:
        assert lerp(a, b, 0) == a
        assert lerp(a, b, 1) == b


def test_grad_four_directions():
    x, y = 0.25, 0.5
    assert grad(0, x, y) == x + 2 * y
    assert grad(1, x, y) == -x + 2 * y
    assert grad(2, x, y) == y - 2 * x
    assert grad(3, x, y) == -y - 2 * x
    # Only the low two bits matter.
    assert grad(4, x, y) == grad(0, x, y)
    assert grad(255, x, y) == grad(3, x, y)


def test_gradient_matches_grad():
    hashes = np.arange(16)
    xs = np.linspace(-1.0, 1.0, 16)
    ys = np.linspace(0.5, -0.75, 16)
    expected = [grad(int(h), float(x), float(y)) for h, x, y in zip(hashes, xs, ys)]
    assert gradient(hashes, xs, ys).tolist() == expected


def test_sample_is_deterministic():
    table = _table()
    for x, y in [(0.3, 0.7), (12.5, -4.125), (-100.01, 3.3)]:
        assert perlin_noise(x, y, table) == perlin_noise(x, y, table)
    assert perlin_noise(1.7, 2.9, _table(9)) == perlin_noise(1.7, 2.9, _table(9))


def test_sample_is_periodic_every_256_cells():
    table = _table()
    # Dyadic fractions keep x + 256 - floor(x + 256) exact.
    for x, y in [(0.25, 0.5), (3.75, 17.125), (-2.5, 100.0625)]:
        value = perlin_noise(x, y, table)
        assert perlin_noise(x + 256, y, table) == value
        assert perlin_noise(x, y + 256, table) == value
        assert perlin_noise(x - 512, y + 256, table) == value


def test_sample_is_continuous_inside_a_cell():
    table = _table()
    eps = 1e-6
    for i in range(50):
        x = 0.1 + i * 0.37
        y = 0.2 + i * 0.53
        if math.floor(x) != math.floor(x + eps):
            continue
        assert abs(perlin_noise(x + eps, y, table) - perlin_noise(x, y, table)) < 1e-4
        assert abs(perlin_noise(x, y + eps, table) - perlin_noise(x, y, table)) < 1e-4


def test_identity_table_origin_is_one_half():
    table = np.concatenate([np.arange(256), np.arange(256)])
    assert perlin_noise(0.0, 0.0, table) == 0.5


def test_every_lattice_corner_is_one_half():
    table = _table()
    for x, y in [(0, 0), (1, 0), (5, 9), (-3, 255), (300, -41)]:
        assert perlin_noise(float(x), float(y), table) == 0.5


def test_output_within_loose_bounds():
    # The 4-direction gradient set does not keep samples strictly inside [0, 1];
    # only [-1, 2] is guaranteed. This checks that bound without clamping.
    rng = np.random.default_rng(0)
    table = _table(11)
    xs = rng.uniform(-300, 300, 2000)
    ys = rng.uniform(-300, 300, 2000)
    values = perlin_noise_2d(table, xs, ys)
    assert (values >= C.PERLIN_LOOSE_MIN).all()
    assert (values <= C.PERLIN_LOOSE_MAX).all()


def test_vectorized_matches_scalar_exactly():
    table = _table(5)
    rng = np.random.default_rng(1)
    xs = rng.uniform(-1000, 1000, (20, 30))
    ys = rng.uniform(-1000, 1000, (20, 30))
    values = perlin_noise_2d(table, xs, ys)
    for index in np.ndindex(xs.shape):
        assert values[index] == perlin_noise(float(xs[index]), float(ys[index]), table)


def test_non_finite_inputs_give_nan():
    table = _table()
    assert math.isnan(perlin_noise(math.nan, 0.5, table))
    assert math.isnan(perlin_noise(0.5, math.inf, table))
    values = perlin_noise_2d(table, np.array([0.5, np.nan, -np.inf]), np.array([0.5, 0.5, 0.5]))
    assert not math.isnan(values[0])
    assert math.isnan(values[1]) and math.isnan(values[2])


def test_huge_coordinates_do_not_crash():
    table = _table()
    for x in (1e18, -1e18, 2.0 ** 70):
        scalar = perlin_noise(x, 0.5, table)
        assert scalar == perlin_noise_2d(table, np.array([x]), np.array([0.5]))[0]


def test_vectorized_rejects_bad_input():
    table = _table()
    for args in [(table[:256], np.zeros(3), np.zeros(3)), (table, np.zeros(3), np.zeros(4))]:
        try:
            perlin_noise_2d(*args)
            assert False, "Expected ValueError"
        except ValueError:
            pass
