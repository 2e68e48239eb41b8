"""
Main element converter

Dispatches OSM elements to the point, way and relation converters
"""

from typing import Iterable, Optional
from loguru import logger

from ..config import ConversionConfig, get_config
from ..models import GeoJSONFeature, GeoJSONFeatureCollection
from .elements import OSMElement, OSMNode, OSMRelation, OSMWay
from .point import PointConverter
from .relation import RelationConverter
from .way import WayConverter


class OSMGeoJsonConverter:
    """
    Convert OSM elements to GeoJSON features

    Stateless between calls: each conversion reads only its input element
    tree, so independent elements can be converted in parallel.
    """

    def __init__(self, config: Optional[ConversionConfig] = None):
        self.config = config or get_config().conversion
        self.point_converter = PointConverter()
        self.way_converter = WayConverter()
        self.relation_converter = RelationConverter(self.config)

    def to_geojson(self, element: OSMElement) -> Optional[GeoJSONFeature]:
        """
        Convert a single element

        Args:
            element: OSMNode, OSMWay or OSMRelation, fully resolved

        Returns:
            GeoJSONFeature, or None when the element has nothing to show

        Raises:
            TypeError: If element is not an OSM element
            CyclicRelationError: If a relation contains itself
        """
        if isinstance(element, OSMNode):
            return self.point_converter.convert(element)
        if isinstance(element, OSMWay):
            return self.way_converter.convert(element)
        if isinstance(element, OSMRelation):
            return self.relation_converter.convert(element)
        raise TypeError(f"Cannot convert object of type {type(element).__name__}")

    def convert_all(self, elements: Iterable[OSMElement]) -> GeoJSONFeatureCollection:
        """Convert elements in order, skipping those without a feature"""
        features = []
        skipped = 0
        for element in elements:
            feature = self.to_geojson(element)
            if feature is None:
                skipped += 1
            else:
                features.append(feature)

        logger.info(f"Converted {len(features)} features ({skipped} elements skipped)")
        return GeoJSONFeatureCollection(features=features)
