import numpy as np

import config
from errors import LengthMismatchError


def _paired_arrays(observed, predicted):
    n = len(observed)
    if n == 0 or n != len(predicted):
        raise LengthMismatchError(
            f"Point sequences must be non-empty and equal in length (got {n} and {len(predicted)})"
        )
    obs = np.asarray(observed, dtype=float).reshape(n, 2)
    pred = np.asarray(predicted, dtype=float).reshape(n, 2)
    return obs, pred


def compute_rmse(observed, predicted):
    """Root-mean-square 2D distance between paired points, in coordinate units."""
    obs, pred = _paired_arrays(observed, predicted)
    diff = obs - pred
    return float(np.sqrt(np.mean(np.sum(diff ** 2, axis=1))))


def compute_std_2d(points):
    """Population standard deviation of the distances from the centroid."""
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    if len(pts) == 0:
        raise LengthMismatchError("Cannot compute the spread of an empty point sequence")
    centered = pts - pts.mean(axis=0)
    return float(np.sqrt(np.mean(np.sum(centered ** 2, axis=1))))


def compute_rmse_ratio(observed, predicted):
    """RMSE normalised by the spread of the observed points (dimensionless).

    Returns 0 when the observed points all coincide.
    """
    rmse = compute_rmse(observed, predicted)
    std = compute_std_2d(observed)
    if std <= config.DEGENERATE_TOLERANCE:
        return 0.0
    return rmse / std
