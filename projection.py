import logging
import threading

from pyproj import CRS, Transformer

from crs_catalog import CRS_DEFINITIONS, lookup_definition
from errors import CRSDefinitionConflictError, UnknownCRSError
from models import Point

logger = logging.getLogger(__name__)


class PyprojProjector:
    """Named-CRS registry and point projector backed by pyproj.

    Identifiers are registered once with a definition string (proj4 or WKT).
    Re-registering an identifier with the same definition is a no-op;
    registering a different one is an error. Points are always (x, y),
    i.e. (lng, lat) for geographic systems.
    """

    def __init__(self, predefined=("EPSG:4326", "WGS84")):
        self._definitions = {}  # {identifier: definition string}
        self._crs = {}  # {identifier: pyproj.CRS}
        self._transformers = {}  # {(from_id, to_id): pyproj.Transformer}
        self._lock = threading.Lock()
        for identifier in predefined:
            self.define(*CRS_DEFINITIONS[identifier])

    def is_defined(self, identifier):
        return identifier in self._definitions

    def define(self, identifier, definition):
        with self._lock:
            existing = self._definitions.get(identifier)
            if existing is not None:
                if existing == definition:
                    return
                raise CRSDefinitionConflictError(
                    f"CRS {identifier!r} is already registered with a different definition"
                )
            self._crs[identifier] = CRS.from_user_input(definition)
            self._definitions[identifier] = definition
        logger.debug("Registered CRS %s", identifier)

    def _transformer(self, from_crs, to_crs):
        key = (from_crs, to_crs)
        transformer = self._transformers.get(key)
        if transformer is None:
            for identifier in key:
                if identifier not in self._crs:
                    raise UnknownCRSError(f"CRS {identifier!r} is not registered")
            transformer = Transformer.from_crs(self._crs[from_crs], self._crs[to_crs], always_xy=True)
            self._transformers[key] = transformer
        return transformer

    def project(self, from_crs, to_crs, point):
        x, y = self._transformer(from_crs, to_crs).transform(point[0], point[1])
        return Point(float(x), float(y))


def ensure_defined(projector, identifier, lookup=lookup_definition):
    """Lazily register a CRS definition with the projector."""
    if not projector.is_defined(identifier):
        code, definition = lookup(identifier)
        projector.define(code, definition)


_default_projector = None
_default_lock = threading.Lock()


def default_projector():
    """Process-wide projector shared by callers that do not inject their own."""
    global _default_projector
    with _default_lock:
        if _default_projector is None:
            _default_projector = PyprojProjector()
    return _default_projector
