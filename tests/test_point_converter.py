"""
Tests for node to Point conversion
"""

from osm_geojson.converters.point import PointConverter
from osm_geojson.models import GeoJSONPoint

from factories import NAME, create_node


def test_node_without_tags_returns_none():
    converter = PointConverter()

    assert converter.convert(create_node(1)) is None


def test_node_returns_point():
    node = create_node(1, {NAME: NAME})

    feature = PointConverter().convert(node)

    assert isinstance(feature.geometry, GeoJSONPoint)
    assert feature.geometry.coordinates == [node.lon, node.lat]
    assert feature.properties == {NAME: NAME}
    assert feature.id == "node/1"


def test_properties_are_a_copy_of_tags():
    tags = {NAME: NAME, "amenity": "bench"}
    node = create_node(7, tags)

    feature = PointConverter().convert(node)
    feature.properties["extra"] = "value"

    assert tags == {NAME: NAME, "amenity": "bench"}
