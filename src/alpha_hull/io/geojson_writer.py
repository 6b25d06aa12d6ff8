# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
GeoJSON export of alpha-shape polygons.

Each polygon becomes one Feature with its rank (1 = largest) and area, so a
map layer can style the main outline differently from secondary shapes.
"""

import json
from typing import Dict, List, Optional, Sequence

from shapely.geometry import mapping

from ..geometry.boundaries import polygon_to_shapely
from ..geometry.metrics import polygon_area
from ..utils.helpers import ensure_parent_dir


def polygons_to_geojson(polygons: Sequence[Sequence],
                        properties: Optional[Dict] = None) -> Dict:
    """
    Build a GeoJSON FeatureCollection from alpha-shape polygons.

    :param polygons: Closed polygons, largest first.
    :type polygons: Sequence[Sequence]
    :param properties: Extra properties copied into every feature.
    :type properties: Optional[Dict]
    :return: FeatureCollection as a dict.
    :rtype: Dict
    """
    features: List[Dict] = []
    for rank, polygon in enumerate(polygons, start=1):
        if len(polygon) < 4:
            continue
        props = dict(properties or {})
        props.update({'rank': rank, 'area': polygon_area(polygon)})
        features.append({
            'type': 'Feature',
            'geometry': mapping(polygon_to_shapely(polygon)),
            'properties': props,
        })
    return {'type': 'FeatureCollection', 'features': features}


def write_geojson(polygons: Sequence[Sequence],
                  output_path: str,
                  properties: Optional[Dict] = None,
                  indent: Optional[int] = 2) -> str:
    """
    Write alpha-shape polygons to a GeoJSON file.

    :param polygons: Closed polygons, largest first.
    :type polygons: Sequence[Sequence]
    :param output_path: Output filepath.
    :type output_path: str
    :param properties: Extra properties copied into every feature.
    :type properties: Optional[Dict]
    :param indent: JSON indentation (None for compact output).
    :type indent: Optional[int]
    :return: The path written.
    :rtype: str
    """
    collection = polygons_to_geojson(polygons, properties)
    with open(ensure_parent_dir(output_path), 'w', encoding='utf-8') as f:
        json.dump(collection, f, indent=indent)
    return output_path
