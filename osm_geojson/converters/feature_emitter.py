"""
Feature emitter

Builds GeoJSON geometries from coordinate chains and wraps them,
together with the element tags, into features
"""

from typing import Dict, List, Optional

from ..models import (
    Geometry,
    GeoJSONFeature,
    GeoJSONLineString,
    GeoJSONMultiLineString,
    GeoJSONMultiPoint,
    GeoJSONMultiPolygon,
    GeoJSONPoint,
    GeoJSONPolygon,
)
from .elements import Coordinate


class FeatureEmitter:
    """Creates geometry models and features"""

    @staticmethod
    def emit(
        geometry: Optional[Geometry],
        tags: Dict[str, str],
        ref: Optional[str] = None
    ) -> Optional[GeoJSONFeature]:
        """
        Wrap a geometry and its tags into a feature

        Args:
            geometry: Computed geometry, None when there is nothing to draw
            tags: Element tags, copied into the feature properties
            ref: Element reference used as feature id ("way/42")

        Returns:
            GeoJSONFeature, or None when geometry is None
        """
        if geometry is None:
            return None
        return GeoJSONFeature(id=ref, geometry=geometry, properties=dict(tags))

    @staticmethod
    def point(coordinate: Coordinate) -> GeoJSONPoint:
        return GeoJSONPoint(coordinates=coordinate.to_list())

    @staticmethod
    def line_string(chain: List[Coordinate]) -> GeoJSONLineString:
        return GeoJSONLineString(coordinates=_positions(chain))

    @staticmethod
    def polygon(rings: List[List[Coordinate]]) -> GeoJSONPolygon:
        """Shell first, then holes"""
        return GeoJSONPolygon(coordinates=[_positions(ring) for ring in rings])

    @staticmethod
    def multi_point(coordinates: List[Coordinate]) -> GeoJSONMultiPoint:
        return GeoJSONMultiPoint(coordinates=_positions(coordinates))

    @staticmethod
    def multi_line_string(chains: List[List[Coordinate]]) -> GeoJSONMultiLineString:
        return GeoJSONMultiLineString(coordinates=[_positions(chain) for chain in chains])

    @staticmethod
    def multi_polygon(polygons: List[List[List[Coordinate]]]) -> GeoJSONMultiPolygon:
        return GeoJSONMultiPolygon(
            coordinates=[[_positions(ring) for ring in rings] for rings in polygons]
        )


def _positions(coordinates: List[Coordinate]) -> List[List[float]]:
    return [c.to_list() for c in coordinates]
