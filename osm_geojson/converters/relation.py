"""
Relation conversion

Assembles relation members into MultiPolygon, MultiLineString or
MultiPoint features:
- Flattens nested sub-relations into a single list of ways
- Classifies the relation as area-like or line-like from its own tags
- Merges way segments into rings or chains per role group
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple
from loguru import logger
from shapely.geometry import LineString, box

from ..config import ConversionConfig, get_config
from ..models import GeoJSONFeature, Geometry
from .chain_merger import Chain, ChainMerger
from .elements import OSMNode, OSMRelation, OSMWay
from .exceptions import CyclicRelationError
from .feature_emitter import FeatureEmitter
from .way import MIN_RING_SIZE, is_degenerate


@dataclass(frozen=True)
class FlatWay:
    """A way member after flattening, with its effective role"""
    way: OSMWay
    role: Optional[str] = None


class RelationConverter:
    """Converts OSM relations"""

    def __init__(self, config: Optional[ConversionConfig] = None):
        self.config = config or get_config().conversion
        self.emitter = FeatureEmitter()
        self.merger = ChainMerger()

    def convert(self, relation: OSMRelation) -> Optional[GeoJSONFeature]:
        """
        Convert a relation to a multi-geometry feature

        Args:
            relation: OSMRelation with all members resolved

        Returns:
            MultiPolygon feature for area-like relations, MultiLineString
            when ways are present, MultiPoint for node-only relations,
            None when nothing usable remains
        """
        points, ways = self.flatten(relation)

        geometry: Optional[Geometry]
        if self.is_area(relation):
            geometry = self._area_geometry(relation, ways)
        elif ways:
            geometry = self._line_geometry(relation, ways)
        elif points:
            logger.debug(f"{relation.ref}: {len(points)} node members, building MultiPoint")
            geometry = self.emitter.multi_point([p.coordinate for p in points])
        else:
            logger.debug(f"Skipping {relation.ref}: no usable members")
            return None

        return self.emitter.emit(geometry, relation.tags, relation.ref)

    def is_area(self, relation: OSMRelation) -> bool:
        """Check the relation's own tags for an area marker"""
        tags = relation.tags
        if tags.get("type") in self.config.area_relation_types:
            return True
        return any(key in tags for key in self.config.area_keys)

    def flatten(self, relation: OSMRelation) -> Tuple[List[OSMNode], List[FlatWay]]:
        """
        Collect node and way members, pulling ways out of sub-relations

        Nodes are only taken from the relation itself. Ways inside
        sub-relations keep their own role, or the outer role when they
        have none. Ways without two distinct coordinates are dropped, as
        are repeats of a way already collected in the same role.

        Returns:
            Tuple of (node members, flattened ways), both in member order
        """
        points = []
        ways = []
        for member in relation.members:
            element = member.element
            if isinstance(element, OSMNode):
                points.append(element)
            elif isinstance(element, OSMWay):
                ways.append(FlatWay(element, member.role))
            elif isinstance(element, OSMRelation):
                ways.extend(self._sub_relation_ways(element, [relation.ref]))
            else:
                raise TypeError(f"{relation.ref} has a member of unsupported type {type(element).__name__}")

        usable = []
        seen = set()
        for flat in ways:
            if is_degenerate(flat.way.coordinates):
                logger.debug(f"{relation.ref}: ignoring degenerate member {flat.way.ref}")
                continue
            # Same way in the same role, e.g. shared by two sub-relations
            key = (flat.way.ref, flat.role or self.config.outer_role)
            if key in seen:
                logger.debug(f"{relation.ref}: ignoring repeated member {flat.way.ref}")
                continue
            seen.add(key)
            usable.append(flat)
        return points, usable

    def _sub_relation_ways(self, relation: OSMRelation, path: List[str]) -> List[FlatWay]:
        if self.config.detect_cycles and relation.ref in path:
            raise CyclicRelationError(path + [relation.ref])
        path = path + [relation.ref]

        ways = []
        for member in relation.members:
            element = member.element
            if isinstance(element, OSMWay):
                ways.append(FlatWay(element, member.role or self.config.outer_role))
            elif isinstance(element, OSMRelation):
                ways.extend(self._sub_relation_ways(element, path))
        return ways

    def _area_geometry(self, relation: OSMRelation, ways: List[FlatWay]) -> Optional[Geometry]:
        outer_segments = []
        inner_segments = []
        for flat in ways:
            if flat.role == self.config.inner_role:
                inner_segments.append(flat.way.coordinates)
            else:
                outer_segments.append(flat.way.coordinates)

        outer_rings = self._rings(self.merger.merge(outer_segments))
        inner_rings = self._rings(self.merger.merge(inner_segments))
        if not outer_rings and not inner_rings:
            logger.debug(f"Skipping {relation.ref}: area relation without closed rings")
            return None

        polygons = [[ring] for ring in outer_rings]
        standalone = []
        for ring in inner_rings:
            polygon = self._find_shell(polygons, ring)
            if polygon is None:
                standalone.append([ring])
            else:
                polygon.append(ring)
        polygons.extend(standalone)

        logger.debug(f"{relation.ref}: {len(outer_rings)} outer and {len(inner_rings)} inner rings "
                     f"assembled into {len(polygons)} polygons")
        return self.emitter.multi_polygon(polygons)

    def _line_geometry(self, relation: OSMRelation, ways: List[FlatWay]) -> Geometry:
        chains = self.merger.merge([flat.way.coordinates for flat in ways])
        logger.debug(f"{relation.ref}: {len(ways)} ways merged into {len(chains)} chains")
        return self.emitter.multi_line_string(chains)

    def _rings(self, chains: List[Chain]) -> List[Chain]:
        """Keep closed chains long enough to form a ring"""
        return [c for c in chains if self.merger.is_closed(c) and len(c) >= MIN_RING_SIZE]

    @staticmethod
    def _find_shell(polygons: List[List[Chain]], ring: Chain) -> Optional[List[Chain]]:
        """
        Find the polygon an inner ring belongs to

        Best-effort: the first shell whose bounding box contains the ring,
        skipping shells made of the same positions as the ring itself.
        """
        ring_line = LineString([(c.lon, c.lat) for c in ring])
        ring_positions = set(ring)
        for polygon in polygons:
            shell = polygon[0]
            if set(shell) == ring_positions:
                continue
            extent = box(*LineString([(c.lon, c.lat) for c in shell]).bounds)
            if extent.contains(ring_line):
                return polygon
        return None
