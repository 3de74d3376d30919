import pytest
from math import pi
from similarity import shear_to_rotation, rotation_to_shear


class TestSimilarityDecomposition:
    def test_rotation_to_shear_quarter_turn(self):
        a, b, d, e = rotation_to_shear(2.0, pi / 2)
        assert a == pytest.approx(0.0, abs=1e-12)
        assert b == pytest.approx(-2.0)
        assert d == pytest.approx(2.0)
        assert e == pytest.approx(0.0, abs=1e-12)

    def test_round_trip(self):
        s, theta = shear_to_rotation(*rotation_to_shear(3.5, -0.75))
        assert s == pytest.approx(3.5)
        assert theta == pytest.approx(-0.75)

    def test_degenerate_scale(self):
        assert shear_to_rotation(0.0, 0.0, 0.0, 0.0) == (0.0, 0.0)

    def test_unrotated(self):
        s, theta = shear_to_rotation(305.7, 0.0, 0.0, 305.7)
        assert s == pytest.approx(305.7)
        assert theta == 0.0
