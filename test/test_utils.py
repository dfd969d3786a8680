import numpy as np
import pytest
from shapely import geometry

from robgeom.utils import as_xy_array, signed_area
from robgeom.spatial.coordinate import Coordinate

def test_as_xy_array():
    pnts=as_xy_array( [ (0,0), (1,2,3), Coordinate(4,5,6)] )
    assert pnts.shape==(3,2)
    assert np.allclose( pnts, [[0,0],[1,2],[4,5]] )

    poly=geometry.Polygon( [ (0,0),(1,0),(1,1)] )
    pnts=as_xy_array(poly)
    # shapely closes the ring
    assert pnts.shape==(4,2)

    assert as_xy_array([]).shape==(0,2)

    with pytest.raises(ValueError):
        as_xy_array( np.zeros(5) )

def test_signed_area():
    square=np.array( [ [0,0],[2,0],[2,2],[0,2]] )
    assert signed_area(square)==4.0
    assert signed_area(square[::-1])==-4.0
    assert signed_area(square[:2])==0.0
    # closing point adds nothing
    closed=np.concatenate( [square,square[:1]] )
    assert signed_area(closed)==4.0

def test_signed_area_sign_convention():
    # counter-clockwise is positive, matching shapely's is_ccw
    ring=geometry.LinearRing( [ (0,0),(3,0),(0,4)] )
    assert ring.is_ccw
    assert signed_area( as_xy_array(ring) )==6.0
    assert signed_area( as_xy_array(ring)[::-1] )==-6.0
