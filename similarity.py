from math import atan2, cos, hypot, sin

import config


def shear_to_rotation(a, b, d, e):
    """Recover (scale, theta) from the linear part of a similarity matrix.

        [a b]     [cos -sin]
        [d e] = s [sin  cos]

    Only a and d are needed; b and e are accepted so callers can pass the
    four coefficients straight from AffineParams.
    """
    s = hypot(a, d)
    if s < config.DEGENERATE_TOLERANCE:
        return 0.0, 0.0
    return s, atan2(d, a)


def rotation_to_shear(s, theta):
    """Build the (a, b, d, e) coefficients of a similarity matrix."""
    cos_t = cos(theta)
    sin_t = sin(theta)
    return s * cos_t, -s * sin_t, s * sin_t, s * cos_t
