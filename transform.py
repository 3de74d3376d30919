import config
from errors import SingularTransformError
from models import Point


def forward_affine(params, point):
    """Image coordinates (x, y) -> map coordinates (X, Y)."""
    a, b, c, d, e, f = params
    x, y = point[0], point[1]
    return Point(a * x + b * y + c, d * x + e * y + f)


def inverse_affine(params, point):
    """Map coordinates (X, Y) -> image coordinates (x, y).

    Raises SingularTransformError when the 2x2 part of the matrix has a
    determinant too close to zero to invert.
    """
    a, b, c, d, e, f = params
    det = a * e - b * d
    if abs(det) < config.SINGULAR_TOLERANCE:
        raise SingularTransformError(f"Affine transform is not invertible (det={det!r})")

    xc = point[0] - c
    yf = point[1] - f
    x = (e * xc - b * yf) / det
    y = (-d * xc + a * yf) / det
    return Point(x, y)


def forward_points(params, points):
    return [forward_affine(params, p) for p in points]
