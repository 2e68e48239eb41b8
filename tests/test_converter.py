"""
Tests for element dispatch
"""

import pytest

from osm_geojson.converters import OSMGeoJsonConverter
from osm_geojson.models import (
    GeoJSONFeatureCollection,
    GeoJSONLineString,
    GeoJSONMultiPolygon,
    GeoJSONPoint,
)

from factories import NAME, create_node, create_relation, create_way


@pytest.fixture
def converter():
    return OSMGeoJsonConverter()


def test_dispatches_node(converter):
    feature = converter.to_geojson(create_node(1, {NAME: NAME}))

    assert isinstance(feature.geometry, GeoJSONPoint)


def test_dispatches_way(converter):
    feature = converter.to_geojson(create_way(1, [create_node(1), create_node(2)], {NAME: NAME}))

    assert isinstance(feature.geometry, GeoJSONLineString)


def test_dispatches_relation(converter):
    way = create_way(4, [create_node(1), create_node(2), create_node(3), create_node(1)])
    relation = create_relation(5, [(way, "outer")], {"type": "multipolygon"})

    feature = converter.to_geojson(relation)

    assert isinstance(feature.geometry, GeoJSONMultiPolygon)


def test_rejects_non_elements(converter):
    with pytest.raises(TypeError):
        converter.to_geojson({"type": "node", "id": 1})


def test_convert_all_skips_absent_features(converter):
    elements = [
        create_node(1),
        create_node(2, {NAME: NAME}),
        create_way(3, [create_node(1)]),
        create_relation(4, [], {NAME: NAME}),
        create_way(5, [create_node(1), create_node(2)]),
    ]

    collection = converter.convert_all(elements)

    assert isinstance(collection, GeoJSONFeatureCollection)
    assert [f.id for f in collection.features] == ["node/2", "way/5"]


def test_feature_serializes_to_geojson(converter):
    nodes = [create_node(1), create_node(2), create_node(3), create_node(1)]
    feature = converter.to_geojson(create_way(4, nodes, {NAME: NAME}))

    assert feature.model_dump() == {
        "type": "Feature",
        "id": "way/4",
        "geometry": {
            "type": "Polygon",
            "coordinates": [[[1.0, 1.0], [2.0, 2.0], [3.0, 3.0], [1.0, 1.0]]],
        },
        "properties": {NAME: NAME},
    }
