import math
from dataclasses import dataclass

EARTH_RADIUS_M = 6_371_000.0

@dataclass
class BBox:
    west: float
    south: float
    east: float
    north: float

    def quad(self) -> list[tuple[float, float]]:
        """Corners as (lon, lat) in the order NW, NE, SE, SW (image overlay order)."""
        return [
            (self.west, self.north),
            (self.east, self.north),
            (self.east, self.south),
            (self.west, self.south),
        ]

def point_bbox(lat: float, lon: float, half_size_deg: float = 0.005) -> BBox:
    return BBox(
        west=lon - half_size_deg,
        south=lat - half_size_deg,
        east=lon + half_size_deg,
        north=lat + half_size_deg
    )

def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in meters on a sphere of radius 6,371 km."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlmb = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    # rounding can push a a hair past 1 for antipodal points
    a = min(1.0, a)
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

def distance(a, b) -> float:
    """Distance in meters between two objects with ``latitude``/``longitude``.

    Altitude is ignored.
    """
    return haversine_m(a.latitude, a.longitude, b.latitude, b.longitude)

def is_within(a, b, threshold_m: float) -> bool:
    return distance(a, b) <= threshold_m
