from pyproj import CRS
from pyproj.exceptions import CRSError

from errors import UnknownCRSError

# identifier -> (identifier, proj definition)
# Definitions follow the proj4 strings published for each EPSG code so that
# projected coordinates are reproducible across PROJ database versions.
CRS_DEFINITIONS = {
    "EPSG:4326": ("EPSG:4326", "+proj=longlat +datum=WGS84 +no_defs"),
    "WGS84": ("WGS84", "+proj=longlat +datum=WGS84 +no_defs"),
    "EPSG:3857": (
        "EPSG:3857",
        "+proj=merc +a=6378137 +b=6378137 +lat_ts=0 +lon_0=0 +x_0=0 +y_0=0 +k=1 "
        "+units=m +no_defs",
    ),
    # JGD2000 / Japan Plane Rectangular CS VI
    "EPSG:2448": (
        "EPSG:2448",
        "+proj=tmerc +lat_0=36 +lon_0=136 +k=0.9999 +x_0=0 +y_0=0 +ellps=GRS80 "
        "+towgs84=0,0,0,0,0,0,0 +units=m +no_defs",
    ),
    # JGD2000 / UTM zone 53N
    "EPSG:3099": (
        "EPSG:3099",
        "+proj=utm +zone=53 +ellps=GRS80 +towgs84=0,0,0,0,0,0,0 +units=m +no_defs",
    ),
    # JGD2011 / UTM zone 53N
    "EPSG:6690": (
        "EPSG:6690",
        "+proj=utm +zone=53 +ellps=GRS80 +units=m +no_defs",
    ),
    # JGD2011 / Japan Plane Rectangular CS VI
    "EPSG:6674": (
        "EPSG:6674",
        "+proj=tmerc +lat_0=36 +lon_0=136 +k=0.9999 +x_0=0 +y_0=0 +ellps=GRS80 "
        "+units=m +no_defs",
    ),
    # Tokyo / Japan Plane Rectangular CS VI
    "EPSG:30166": (
        "EPSG:30166",
        "+proj=tmerc +lat_0=36 +lon_0=136 +k=0.9999 +x_0=0 +y_0=0 +ellps=bessel "
        "+towgs84=-146.414,507.337,680.507,0,0,0,0 +units=m +no_defs",
    ),
    # WGS 84 / UTM zone 53N
    "EPSG:32653": (
        "EPSG:32653",
        "+proj=utm +zone=53 +datum=WGS84 +units=m +no_defs",
    ),
}


def lookup_definition(identifier):
    """Return (identifier, definition) for a CRS identifier.

    Identifiers missing from CRS_DEFINITIONS are resolved through pyproj's
    bundled EPSG database and returned as WKT.
    """
    if identifier in CRS_DEFINITIONS:
        return CRS_DEFINITIONS[identifier]
    try:
        crs = CRS.from_user_input(identifier)
    except CRSError as exc:
        raise UnknownCRSError(f"No definition available for CRS {identifier!r}") from exc
    return identifier, crs.to_wkt()
