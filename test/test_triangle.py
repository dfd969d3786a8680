import math

import numpy as np

from robgeom.spatial.coordinate import Coordinate
from robgeom.spatial import triangle

def test_square_diagonal_dd():
    # the two halves of a rectangle share a hypotenuse, and so share
    # a circumcentre.  Should be exactly equal in DD.
    cc1=triangle.circumcentre_dd((193600.80333333334,469345.355),
                                 (193600.80333333334,469345.0175),
                                 (193601.10666666666,469345.0175))
    cc2=triangle.circumcentre_dd((193600.80333333334,469345.355),
                                 (193601.10666666666,469345.0175),
                                 (193601.10666666666,469345.355))
    assert cc1.equals_2d(cc2)

def test_circumcentre_simple():
    for func in [triangle.circumcentre,triangle.circumcentre_dd]:
        cc=func((0,0),(4,0),(0,4))
        assert np.allclose([cc.x,cc.y],[2,2])
        # obtuse triangle, centre is outside
        cc=func((0,0),(10,0),(5,1))
        assert np.allclose([cc.x,cc.y],[5,-12])

def test_circumcentre_equidistant():
    rng=np.random.RandomState(3)
    for a,b,c in rng.uniform(-100,100,size=(50,3,2)):
        cc=triangle.circumcentre_dd(a,b,c)
        radii=[cc.distance(Coordinate(*p)) for p in (a,b,c)]
        assert np.allclose(radii,radii[0])
        assert np.allclose(radii[0],triangle.circumradius(a,b,c))
        fp=triangle.circumcentre(a,b,c)
        assert np.allclose([fp.x,fp.y],[cc.x,cc.y])

def test_circumcentre_dd_vertex_order():
    # far from the origin the FP result depends on which vertex is c,
    # the DD result does not
    a=(1e7+0.1,2e7+0.3)
    b=(1e7+1.7,2e7+0.2)
    c=(1e7+0.9,2e7+1.4)
    cc1=triangle.circumcentre_dd(a,b,c)
    cc2=triangle.circumcentre_dd(b,c,a)
    cc3=triangle.circumcentre_dd(c,a,b)
    assert np.allclose([cc1.x,cc1.y],[cc2.x,cc2.y],rtol=0,atol=1e-8)
    assert np.allclose([cc1.x,cc1.y],[cc3.x,cc3.y],rtol=0,atol=1e-8)

def test_collinear():
    for func in [triangle.circumcentre,triangle.circumcentre_dd]:
        cc=func((0,0),(1,1),(2,2))
        assert math.isnan(cc.x) and math.isnan(cc.y)
    assert triangle.circumradius((0,0),(1,1),(2,2))==math.inf

def test_area_and_radius():
    assert triangle.area((0,0),(4,0),(0,3))==6.0
    assert triangle.area((0,0),(0,3),(4,0))==6.0
    # right triangle, radius is half the hypotenuse
    assert np.allclose(triangle.circumradius((0,0),(4,0),(0,3)),2.5)
    assert triangle.det(3.0,8.0,4.0,6.0)==-14.0
