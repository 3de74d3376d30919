import logging
from math import atan2, degrees, sqrt

import numpy as np

import config
from errors import (
    DegenerateGeometryError,
    InsufficientPointsError,
    LengthMismatchError,
    SingularFitError,
    UnknownModeError,
)
from models import TRANSFORM_MODES, AffineParams
from rmse import compute_rmse
from similarity import rotation_to_shear, shear_to_rotation
from transform import forward_affine, forward_points, inverse_affine

logger = logging.getLogger(__name__)


def _as_array(points):
    return np.array([[p[0], p[1]] for p in points], dtype=float).reshape(-1, 2)


def _solve_normal_equations(M, V):
    """Least-squares solution p = (M^T M)^-1 M^T V."""
    Mt = M.T
    MtM = Mt @ M
    if abs(np.linalg.det(MtM)) < config.SINGULAR_TOLERANCE:
        raise SingularFitError("Normal equations are singular; control points are collinear or coincident")
    try:
        inv_MtM = np.linalg.inv(MtM)
    except np.linalg.LinAlgError as exc:
        raise SingularFitError("Normal equations are singular; control points are collinear or coincident") from exc
    return inv_MtM @ (Mt @ V)


def fit_affine(image_points, map_points):
    """Unconstrained 6-parameter fit.

    Each point contributes two rows to the 2n x 6 design matrix:
        [x y 1 0 0 0] -> X
        [0 0 0 x y 1] -> Y
    """
    img = _as_array(image_points)
    mp = _as_array(map_points)
    n = len(img)
    if n < 3:
        logger.warning("Affine fit with %d points is under-determined; at least 3 are recommended", n)

    M = np.zeros((2 * n, 6))
    M[0::2, 0] = img[:, 0]
    M[0::2, 1] = img[:, 1]
    M[0::2, 2] = 1.0
    M[1::2, 3] = img[:, 0]
    M[1::2, 4] = img[:, 1]
    M[1::2, 5] = 1.0
    V = mp.reshape(-1)  # X0, Y0, X1, Y1, ...

    p = _solve_normal_equations(M, V)
    return AffineParams.from_sequence(p)


def fit_similar_core(image_points, map_points):
    """Uniform scale + rotation + translation by 2D Procrustes analysis.

    Scale is always >= 0, so mirrored orientations are only reachable by
    flipping the image Y axis beforehand (see resolve_orientation).
    """
    img = _as_array(image_points)
    mp = _as_array(map_points)

    img_centroid = img.mean(axis=0)
    map_centroid = mp.mean(axis=0)
    si = img - img_centroid
    sm = mp - map_centroid

    big_a = float(np.sum(si[:, 0] * sm[:, 0] + si[:, 1] * sm[:, 1]))
    big_b = float(np.sum(si[:, 0] * sm[:, 1] - si[:, 1] * sm[:, 0]))
    big_c = float(np.sum(si ** 2))
    if abs(big_c) < config.DEGENERATE_TOLERANCE:
        raise DegenerateGeometryError("Similarity fit impossible: all image points coincide")

    theta = atan2(big_b, big_a)
    s = sqrt(big_a * big_a + big_b * big_b) / big_c
    a, b, d, e = rotation_to_shear(s, theta)

    # translation = map centroid - s * R(theta) * image centroid
    c = map_centroid[0] - (a * img_centroid[0] + b * img_centroid[1])
    f = map_centroid[1] - (d * img_centroid[0] + e * img_centroid[1])
    return AffineParams(a, b, float(c), d, e, float(f))


def fit_noshear_core(image_points, map_points):
    """Uniform scale + translation (B = D = 0, E = A), solved for (A, C, F)."""
    img = _as_array(image_points)
    mp = _as_array(map_points)
    n = len(img)

    M = np.zeros((2 * n, 3))
    M[0::2, 0] = img[:, 0]
    M[0::2, 1] = 1.0
    M[1::2, 0] = img[:, 1]
    M[1::2, 2] = 1.0
    V = mp.reshape(-1)

    scale, c, f = _solve_normal_equations(M, V)
    return AffineParams(float(scale), 0.0, float(c), 0.0, float(scale), float(f))


def flip_y(points):
    return [(p[0], -p[1]) for p in points]


def unflip_params(params):
    """Re-express params fitted against Y-negated image points in the original image axes."""
    return params._replace(b=-params.b, e=-params.e)


def sum_of_squared_residuals(params, image_points, map_points):
    total = 0.0
    for img_pt, map_pt in zip(image_points, map_points):
        X, Y = forward_affine(params, img_pt)
        dx = map_pt[0] - X
        dy = map_pt[1] - Y
        total += dx * dx + dy * dy
    return total


def resolve_orientation(fit_core, image_points, map_points, y_axis_mode):
    """Fit with the image Y axis as-is, flipped, or whichever explains the points better.

    "auto" (and any unrecognised value) scores both hypotheses against the
    original image points; ties keep the unflipped fit.
    """
    if y_axis_mode == "same":
        return fit_core(image_points, map_points)
    if y_axis_mode == "opposite":
        return unflip_params(fit_core(flip_y(image_points), map_points))

    same = fit_core(image_points, map_points)
    opposite = unflip_params(fit_core(flip_y(image_points), map_points))
    err_same = sum_of_squared_residuals(same, image_points, map_points)
    err_opposite = sum_of_squared_residuals(opposite, image_points, map_points)
    logger.debug("Y-axis residuals: same=%.6g opposite=%.6g", err_same, err_opposite)
    return same if err_same <= err_opposite else opposite


def compute_transform_params(image_points, map_points, mode="affine", y_axis_mode="auto"):
    """Estimate image -> map AffineParams from paired control points.

    mode:        "affine" | "similar" | "noshear"
    y_axis_mode: "same" | "opposite" | "auto" (ignored for "affine")
    """
    n = len(image_points)
    if n < 2:
        raise InsufficientPointsError(f"Need at least 2 control points, got {n}")
    if len(map_points) != n:
        raise LengthMismatchError(
            f"Image and map point counts differ ({n} vs {len(map_points)})"
        )

    if mode == "affine":
        return fit_affine(image_points, map_points)
    if mode == "similar":
        return resolve_orientation(fit_similar_core, image_points, map_points, y_axis_mode)
    if mode == "noshear":
        return resolve_orientation(fit_noshear_core, image_points, map_points, y_axis_mode)
    raise UnknownModeError(f"Unknown transform mode: {mode!r} (expected one of {', '.join(TRANSFORM_MODES)})")


class AffineGeoref:
    """Least-squares transform from image pixel coordinates to map coordinates.

    Fits: [X]   [A B C]   [x]
          [Y] = [D E F] @ [y]
                          [1]
    """

    def __init__(self, mode=None, y_axis_mode=None):
        self.mode = mode or config.DEFAULT_TRANSFORM_MODE
        self.y_axis_mode = y_axis_mode or config.DEFAULT_Y_AXIS_MODE
        self.params = None
        self.rmse = None

    def fit(self, image_points, map_points):
        """Fit the transform and record the RMS residual over the control points."""
        self.params = compute_transform_params(image_points, map_points, self.mode, self.y_axis_mode)
        predicted = forward_points(self.params, image_points)
        self.rmse = compute_rmse(map_points, predicted)
        return self.params

    def _require_fit(self):
        if self.params is None:
            raise RuntimeError("Affine transform not fitted. Call fit() first.")

    def transform(self, x, y):
        """Transform image coordinates to map coordinates."""
        self._require_fit()
        return forward_affine(self.params, (x, y))

    def inverse(self, X, Y):
        """Transform map coordinates back to image coordinates."""
        self._require_fit()
        return inverse_affine(self.params, (X, Y))

    def report(self):
        """Print fit quality."""
        self._require_fit()
        p = self.params
        s, theta = shear_to_rotation(p.a, p.b, p.d, p.e)
        print(f"Affine Georeferencing Transform ({self.mode}, y-axis {self.y_axis_mode}):")
        print(f"  X = {p.a:.6g}*x + {p.b:.6g}*y + {p.c:.6f}")
        print(f"  Y = {p.d:.6g}*x + {p.e:.6g}*y + {p.f:.6f}")
        print(f"  Parameters (A..F): {p.as_list()}")
        print(f"  Scale ~ {s:.6g}, rotation ~ {degrees(theta):.3f} deg, det = {p.determinant():.6g}")
        if self.rmse is not None:
            print(f"  RMS residual: {self.rmse:.3f} map units")


def georeference_points(image_points, georef):
    """Apply a fitted AffineGeoref to a batch of image points."""
    return [georef.transform(p[0], p[1]) for p in image_points]
