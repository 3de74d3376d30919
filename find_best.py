import logging

import config
from errors import LengthMismatchError
from georef import compute_transform_params
from projection import default_projector, ensure_defined
from rmse import compute_rmse, compute_rmse_ratio
from transform import forward_points

logger = logging.getLogger(__name__)

SCORE_METRICS = ("rmse", "ratio")


class CrsScore:
    """Fit result for one candidate CRS within a single scoring run."""

    def __init__(self, crs, params, rmse, ratio):
        self.crs = crs
        self.params = params
        self.rmse = rmse
        self.ratio = ratio

    def score(self, metric="rmse"):
        return self.rmse if metric == "rmse" else self.ratio

    def __repr__(self):
        return f"CrsScore(crs={self.crs}, rmse={self.rmse:.4f}, ratio={self.ratio:.6f})"


def score_crs(crs, geo_points, local_points, mode, y_axis_mode, projector):
    """Project, fit and score one candidate. Failures propagate to the caller."""
    ensure_defined(projector, crs)
    map_points = [projector.project(config.GEOGRAPHIC_CRS, crs, p) for p in geo_points]
    params = compute_transform_params(local_points, map_points, mode, y_axis_mode)
    predicted = forward_points(params, local_points)
    result = CrsScore(
        crs,
        params,
        compute_rmse(map_points, predicted),
        compute_rmse_ratio(map_points, predicted),
    )
    logger.debug("Scored %r", result)
    return result


def score_crs_candidates(geo_points, local_points, crs_candidates, mode="affine",
                         y_axis_mode="auto", projector=None):
    """Fit local -> CRS transforms for every candidate and return their scores in order.

    geo_points are (lng, lat) in config.GEOGRAPHIC_CRS; local_points are the
    matching image coordinates.
    """
    if len(geo_points) != len(local_points):
        raise LengthMismatchError(
            f"Geographic and local point counts differ ({len(geo_points)} vs {len(local_points)})"
        )
    if len(geo_points) == 0:
        raise LengthMismatchError("No control points given")
    if projector is None:
        projector = default_projector()
    ensure_defined(projector, config.GEOGRAPHIC_CRS)

    return [
        score_crs(crs, geo_points, local_points, mode, y_axis_mode, projector)
        for crs in crs_candidates
    ]


def select_best(scores, metric="rmse"):
    """Lowest-scoring CrsScore; ties go to the one listed first."""
    if metric not in SCORE_METRICS:
        raise ValueError(f"Unknown score metric: {metric!r}")
    if not scores:
        raise ValueError("No CRS candidates to score")
    best = scores[0]
    for candidate in scores[1:]:
        if candidate.score(metric) < best.score(metric):
            best = candidate
    return best


def find_best_crs(geo_points, local_points, crs_candidates, mode="affine",
                  y_axis_mode="auto", projector=None, metric="rmse"):
    """Return the candidate CRS whose fitted transform leaves the smallest residual."""
    # fail before any projection work
    if metric not in SCORE_METRICS:
        raise ValueError(f"Unknown score metric: {metric!r}")
    scores = score_crs_candidates(geo_points, local_points, crs_candidates, mode, y_axis_mode, projector)
    best = select_best(scores, metric)
    logger.info("Best CRS %s (%s=%.6g)", best.crs, metric, best.score(metric))
    return best.crs
