import math

import numpy as np
import pytest
from shapely import geometry

from robgeom.spatial.coordinate import (Coordinate, Location, GeometryInputError,
                                        as_coordinate, as_coordinates, as_ring)

def test_defaults():
    c=Coordinate(1,2)
    assert c.x==1.0 and c.y==2.0
    assert math.isnan(c.z) and math.isnan(c.m)
    assert not c.has_z()
    assert c.with_z(3).has_z()

def test_equality_is_2d():
    assert Coordinate(1,2)==Coordinate(1,2)
    assert Coordinate(1,2,3)==Coordinate(1,2)
    assert Coordinate(1,2)!=Coordinate(1,3)
    assert not Coordinate(1,2,3).equals_3d(Coordinate(1,2))
    assert Coordinate(1,2).equals_3d(Coordinate(1,2))
    assert len({Coordinate(1,2),Coordinate(1,2,5)})==1

def test_validity():
    assert Coordinate(1,2).is_valid()
    assert not Coordinate(np.nan,2).is_valid()
    assert not Coordinate(np.inf,2).is_valid()

def test_coercion():
    assert as_coordinate((1,2))==Coordinate(1,2)
    assert as_coordinate(np.array([1,2,3])).z==3.0
    assert as_coordinate([1,2,3,4]).m==4.0
    assert as_coordinate(geometry.Point(1,2))==Coordinate(1,2)
    c=Coordinate(1,2)
    assert as_coordinate(c) is c

def test_bad_coercion():
    with pytest.raises(GeometryInputError):
        as_coordinate((1,))
    with pytest.raises(ValueError):
        as_coordinate((1,2,3,4,5))
    with pytest.raises(ValueError):
        as_coordinate("abc")

def test_sequences():
    pts=as_coordinates(geometry.LineString([(0,0),(1,1)]))
    assert pts==[Coordinate(0,0),Coordinate(1,1)]
    poly=geometry.Polygon([(0,0),(1,0),(1,1)])
    assert len(as_coordinates(poly))==4
    assert len(as_coordinates(np.zeros((5,2))))==5

def test_as_ring_closes():
    ring=as_ring([(0,0),(1,0),(1,1)])
    assert len(ring)==4
    assert ring[0]==ring[-1]
    assert len(as_ring([(0,0),(1,0),(1,1),(0,0)]))==4

def test_location_values():
    assert Location.INTERIOR==0
    assert Location.BOUNDARY==1
    assert Location.EXTERIOR==2
