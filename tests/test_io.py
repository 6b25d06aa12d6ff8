# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import json

import numpy as np
import pytest

from alpha_hull.geometry import Point
from alpha_hull.io import load_points, polygons_to_geojson, read_header, write_geojson

"""Tests for point file reading and GeoJSON export, using temporary files."""


def write_text(path, text):
    path.write_text(text, encoding='utf-8')
    return str(path)


def test_load_points_without_header(tmp_path):
    path = write_text(tmp_path / "points.csv", "0,0\n1.5,2\n\n3,-1\n")
    xy = load_points(path)
    assert xy.shape == (3, 2)
    assert np.allclose(xy, [[0, 0], [1.5, 2], [3, -1]])


def test_load_points_by_column_name(tmp_path):
    path = write_text(tmp_path / "stations.csv",
                      "# stations\nname,lat,lon\nA,51.5,-0.12\nB,48.85,2.35\n")
    xy = load_points(path, x_column='lon', y_column='lat')
    assert np.allclose(xy, [[-0.12, 51.5], [2.35, 48.85]])


def test_load_points_other_delimiter(tmp_path):
    path = write_text(tmp_path / "points.tsv", "x\ty\n1\t2\n3\t4\n")
    assert read_header(path, delimiter='\t') == ['x', 'y']
    assert np.allclose(load_points(path, delimiter='\t'), [[1, 2], [3, 4]])


def test_read_header_of_numeric_file_is_none(tmp_path):
    path = write_text(tmp_path / "points.csv", "# comment\n1,2\n3,4\n")
    assert read_header(path) is None
    assert np.allclose(load_points(path), [[1, 2], [3, 4]])


def test_load_points_single_row_and_header_only(tmp_path):
    path = write_text(tmp_path / "one.csv", "1,2\n")
    assert load_points(path).shape == (1, 2)

    path = write_text(tmp_path / "header.csv", "x,y\n")
    assert load_points(path, x_column='x', y_column='y').shape == (0, 2)


def test_load_points_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_points(str(tmp_path / "missing.csv"))

    path = write_text(tmp_path / "named.csv", "x,y\n1,2\n")
    with pytest.raises(ValueError, match="Available"):
        load_points(path, x_column='lon')

    path = write_text(tmp_path / "bad.csv", "1,2\n3,abc\n")
    with pytest.raises(ValueError, match="row"):
        load_points(path)

    path = write_text(tmp_path / "plain.csv", "1,2\n")
    with pytest.raises(ValueError):
        load_points(path, x_column='x')
    with pytest.raises(ValueError):
        load_points(path, y_column=5)


def test_polygons_to_geojson_features():
    large = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2), Point(0, 0)]
    small = [Point(5, 5), Point(6, 5), Point(6, 6), Point(5, 5)]
    collection = polygons_to_geojson([large, small], properties={'alpha': 1.5})

    assert collection['type'] == 'FeatureCollection'
    features = collection['features']
    assert len(features) == 2
    assert [f['properties']['rank'] for f in features] == [1, 2]
    assert features[0]['properties']['area'] == 4.0
    assert features[1]['properties']['alpha'] == 1.5
    assert features[0]['geometry']['type'] == 'Polygon'
    ring = features[0]['geometry']['coordinates'][0]
    assert tuple(ring[0]) == tuple(ring[-1])


def test_polygons_to_geojson_skips_degenerate_polygon():
    collection = polygons_to_geojson([[Point(0, 0), Point(1, 0), Point(0, 0)]])
    assert collection['features'] == []


def test_write_geojson_round_trip(tmp_path):
    square = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1), Point(0, 0)]
    out = write_geojson([square], str(tmp_path / "out" / "shape.geojson"))
    with open(out, encoding='utf-8') as f:
        data = json.load(f)
    assert len(data['features']) == 1
    assert data['features'][0]['properties']['area'] == 1.0
