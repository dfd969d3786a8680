"""
Triangle measures, chiefly the circumcentre.

The circumcentre is the intersection of the perpendicular bisectors of
the sides.  It is computed relative to the vertex c, following
Shewchuk's notes on geometric robustness, in double precision and in
DD arithmetic.  The DD version is accurate for thin triangles and
far-from-origin coordinates, and gives the same answer regardless of
which vertex is used as c.
"""
import math
import logging

from .dd import DD
from .coordinate import Coordinate, as_coordinate

log=logging.getLogger('robgeom.triangle')

NaN=float('nan')


def det(m00,m01,m10,m11):
    """ determinant of [[m00,m01],[m10,m11]], plain double precision """
    return m00*m11 - m01*m10

def area(a,b,c):
    """ unsigned area of the triangle a,b,c """
    a,b,c=[as_coordinate(p) for p in (a,b,c)]
    return abs( ((c.x-a.x)*(b.y-a.y) - (b.x-a.x)*(c.y-a.y)) / 2 )

def circumradius(a,b,c):
    """
    Radius of the circle through a,b,c, as |ab||bc||ca| / (4 area).
    Infinite for a degenerate triangle.
    """
    a,b,c=[as_coordinate(p) for p in (a,b,c)]
    tri_area=area(a,b,c)
    if tri_area==0.0:
        return math.inf
    return a.distance(b)*b.distance(c)*c.distance(a) / (4*tri_area)

def circumcentre(a,b,c):
    """
    Circumcentre in double precision.  Collinear vertices have no
    circumcentre and give a NaN coordinate.
    """
    a,b,c=[as_coordinate(p) for p in (a,b,c)]
    ax=a.x-c.x
    ay=a.y-c.y
    bx=b.x-c.x
    by=b.y-c.y

    denom=2*det(ax,ay,bx,by)
    if denom==0.0:
        log.debug("circumcentre of collinear points %s %s %s",a,b,c)
        return Coordinate(NaN,NaN)
    numx=det(ay, ax*ax + ay*ay, by, bx*bx + by*by)
    numy=det(ax, ax*ax + ay*ay, bx, bx*bx + by*by)
    return Coordinate(c.x - numx/denom, c.y + numy/denom)

def circumcentre_dd(a,b,c):
    """
    Circumcentre evaluated in DD arithmetic, rounded to double at the
    end.  Collinear vertices give a NaN coordinate.
    """
    a,b,c=[as_coordinate(p) for p in (a,b,c)]
    ax=DD(a.x).subtract(c.x)
    ay=DD(a.y).subtract(c.y)
    bx=DD(b.x).subtract(c.x)
    by=DD(b.y).subtract(c.y)

    denom=DD.determinant(ax,ay,bx,by).multiply(2.0)
    asqr=ax.sqr().add(ay.sqr())
    bsqr=bx.sqr().add(by.sqr())
    numx=DD.determinant(ay,asqr,by,bsqr)
    numy=DD.determinant(ax,asqr,bx,bsqr)

    ccx=DD(c.x).subtract(numx.divide(denom)).double_value()
    ccy=DD(c.y).add(numy.divide(denom)).double_value()
    return Coordinate(ccx,ccy)
