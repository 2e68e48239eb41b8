"""
Way conversion

Turns a single way into a LineString or Polygon feature based on
node count and closure alone
"""

from typing import List, Optional
from loguru import logger

from ..models import GeoJSONFeature
from .elements import Coordinate, OSMWay
from .feature_emitter import FeatureEmitter


# Smallest closed ring: three corners plus the repeated first node
MIN_RING_SIZE = 4


def is_degenerate(coordinates: List[Coordinate]) -> bool:
    """True when the coordinates do not span at least two distinct positions"""
    return len(coordinates) < 2 or len(set(coordinates)) < 2


class WayConverter:
    """Converts OSM ways"""

    def __init__(self):
        self.emitter = FeatureEmitter()

    def convert(self, way: OSMWay) -> Optional[GeoJSONFeature]:
        """
        Convert a way to a LineString or Polygon feature

        Args:
            way: OSMWay with resolved nodes

        Returns:
            Polygon feature for closed ways with at least 4 nodes,
            LineString feature otherwise, None for degenerate ways
        """
        coords = way.coordinates
        if is_degenerate(coords):
            logger.debug(f"Skipping {way.ref}: fewer than 2 distinct coordinates")
            return None

        if len(coords) >= MIN_RING_SIZE and way.is_closed:
            geometry = self.emitter.polygon([coords])
        else:
            geometry = self.emitter.line_string(coords)

        return self.emitter.emit(geometry, way.tags, way.ref)
