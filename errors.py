class GeorefError(ValueError):
    """Base class for control point fitting and CRS scoring failures."""


class LengthMismatchError(GeorefError):
    pass


class InsufficientPointsError(GeorefError):
    pass


class UnknownModeError(GeorefError):
    pass


class SingularFitError(GeorefError):
    """Normal equations could not be solved (collinear or coincident points)."""


class DegenerateGeometryError(SingularFitError):
    """Similarity fit impossible because all image points coincide."""


class SingularTransformError(GeorefError):
    """Affine matrix has a (near) zero determinant and cannot be inverted."""


class UnknownCRSError(GeorefError):
    pass


class CRSDefinitionConflictError(GeorefError):
    pass
