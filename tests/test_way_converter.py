"""
Tests for way to LineString / Polygon conversion
"""

from osm_geojson.converters.way import WayConverter, is_degenerate
from osm_geojson.models import GeoJSONLineString, GeoJSONPolygon

from factories import NAME, create_node, create_way, node_at


def test_way_with_one_node_returns_none():
    way = create_way(2, [create_node(1)], {NAME: NAME})

    assert WayConverter().convert(way) is None


def test_way_with_repeated_single_position_returns_none():
    way = create_way(2, [create_node(1), create_node(1), create_node(1)], {NAME: NAME})

    assert WayConverter().convert(way) is None


def test_way_returns_line_string():
    node1 = create_node(1)
    node2 = create_node(2)
    way = create_way(3, [node1, node2], {NAME: NAME})

    feature = WayConverter().convert(way)

    assert isinstance(feature.geometry, GeoJSONLineString)
    assert feature.properties[NAME] == NAME
    assert feature.geometry.coordinates == [[1.0, 1.0], [2.0, 2.0]]


def test_closed_way_returns_polygon():
    nodes = [create_node(1), create_node(2), create_node(3), create_node(1)]
    way = create_way(4, nodes, {NAME: NAME})

    feature = WayConverter().convert(way)

    assert isinstance(feature.geometry, GeoJSONPolygon)
    assert feature.properties[NAME] == NAME
    assert feature.geometry.coordinates == [[[1, 1], [2, 2], [3, 3], [1, 1]]]


def test_closed_way_with_three_nodes_stays_a_line():
    way = create_way(5, [create_node(1), create_node(2), create_node(1)])

    feature = WayConverter().convert(way)

    assert isinstance(feature.geometry, GeoJSONLineString)
    assert len(feature.geometry.coordinates) == 3


def test_open_way_with_many_nodes_stays_a_line():
    nodes = [node_at(1, 0, 0), node_at(2, 1, 0), node_at(3, 1, 1), node_at(4, 0, 1)]

    feature = WayConverter().convert(create_way(6, nodes))

    assert isinstance(feature.geometry, GeoJSONLineString)


def test_untagged_way_still_converts():
    feature = WayConverter().convert(create_way(7, [create_node(1), create_node(2)]))

    assert feature is not None
    assert feature.properties == {}


def test_is_degenerate():
    a = create_node(1).coordinate
    b = create_node(2).coordinate

    assert is_degenerate([])
    assert is_degenerate([a])
    assert is_degenerate([a, a])
    assert not is_degenerate([a, b])


def test_is_closed():
    assert create_way(1, [create_node(1), create_node(2), create_node(1)]).is_closed
    assert not create_way(2, [create_node(1), create_node(2)]).is_closed
    assert not create_way(3, [create_node(1)]).is_closed
