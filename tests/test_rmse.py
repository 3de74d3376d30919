import pytest
from math import sqrt
from rmse import compute_rmse, compute_std_2d, compute_rmse_ratio
from errors import LengthMismatchError


OBSERVED = [(100, 200), (102, 198), (98, 203)]
PREDICTED = [(101, 201), (100, 200), (100, 200)]


class TestComputeRMSE:
    def test_identical_sequences_are_zero(self):
        assert compute_rmse(OBSERVED, OBSERVED) == 0.0

    def test_known_value(self):
        # squared distances: 2, 8, 13
        assert compute_rmse(OBSERVED, PREDICTED) == pytest.approx(sqrt(23 / 3))

    def test_symmetric(self):
        assert compute_rmse(OBSERVED, PREDICTED) == pytest.approx(compute_rmse(PREDICTED, OBSERVED))

    def test_single_pair(self):
        assert compute_rmse([(0, 0)], [(3, 4)]) == pytest.approx(5.0)

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            compute_rmse(OBSERVED, PREDICTED[:2])

    def test_empty(self):
        with pytest.raises(LengthMismatchError):
            compute_rmse([], [])


class TestStdAndRatio:
    def test_std_2d(self):
        # centroid (0, 0), every point 5 away
        assert compute_std_2d([(3, 4), (-3, -4), (4, -3), (-4, 3)]) == pytest.approx(5.0)

    def test_std_of_single_point_is_zero(self):
        assert compute_std_2d([(7, 7)]) == 0.0

    def test_ratio(self):
        observed = [(3, 4), (-3, -4), (4, -3), (-4, 3)]
        predicted = [(3, 5), (-3, -3), (4, -2), (-4, 4)]
        assert compute_rmse_ratio(observed, predicted) == pytest.approx(1.0 / 5.0)

    def test_ratio_zero_when_observed_coincide(self):
        assert compute_rmse_ratio([(1, 1), (1, 1)], [(2, 2), (0, 0)]) == 0.0

    def test_ratio_is_scale_free(self):
        scaled_obs = [(x * 1000, y * 1000) for x, y in OBSERVED]
        scaled_pred = [(x * 1000, y * 1000) for x, y in PREDICTED]
        assert compute_rmse_ratio(scaled_obs, scaled_pred) == pytest.approx(
            compute_rmse_ratio(OBSERVED, PREDICTED)
        )

    def test_ratio_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            compute_rmse_ratio(OBSERVED, PREDICTED[:1])
