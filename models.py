from typing import NamedTuple


TRANSFORM_MODES = ("affine", "similar", "noshear")


class Point(NamedTuple):
    u: float
    v: float


class AffineParams(NamedTuple):
    """Six affine coefficients, always ordered A, B, C, D, E, F.

        X = A*x + B*y + C
        Y = D*x + E*y + F
    """

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    @classmethod
    def identity(cls):
        return cls(1.0, 0.0, 0.0, 0.0, 1.0, 0.0)

    @classmethod
    def from_sequence(cls, values):
        values = [float(v) for v in values]
        if len(values) != 6:
            raise ValueError(f"Affine parameters need exactly 6 values, got {len(values)}")
        return cls(*values)

    def determinant(self):
        return self.a * self.e - self.b * self.d

    def as_list(self):
        return [self.a, self.b, self.c, self.d, self.e, self.f]


class ControlPoint:
    """An image position paired with its WGS84 longitude/latitude."""

    def __init__(self, x, y, lng, lat, label=None):
        self.x = x
        self.y = y
        self.lng = lng
        self.lat = lat
        self.label = label

    @property
    def image_point(self):
        return Point(self.x, self.y)

    @property
    def geo_point(self):
        return Point(self.lng, self.lat)

    def __repr__(self):
        return f"ControlPoint(label={self.label}, xy=({self.x}, {self.y}), lnglat=({self.lng}, {self.lat}))"
