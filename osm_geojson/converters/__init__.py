"""
OSM element to GeoJSON conversion

Separate components for:
- Elements: Data structures (Coordinate, OSMNode, OSMWay, OSMRelation)
- Point / Way: Single-element converters
- Chain merger: Splicing way segments on shared endpoints
- Relation: Ring and chain assembly for relations
- Feature emitter: Geometry and feature construction
- Converter: Main dispatcher
"""

from .elements import Coordinate, OSMElement, OSMMember, OSMNode, OSMRelation, OSMWay
from .exceptions import ConversionError, CyclicRelationError, DataIntegrityError, MissingElementError
from .chain_merger import ChainMerger
from .converter import OSMGeoJsonConverter

__all__ = [
    "Coordinate",
    "OSMElement",
    "OSMMember",
    "OSMNode",
    "OSMRelation",
    "OSMWay",
    "ConversionError",
    "CyclicRelationError",
    "DataIntegrityError",
    "MissingElementError",
    "ChainMerger",
    "OSMGeoJsonConverter",
]
