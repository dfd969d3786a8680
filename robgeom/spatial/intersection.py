"""
Intersection points of infinite lines, each line given by two points.

line_intersection() evaluates the homogeneous-coordinate formula in DD
arithmetic by default, which is accurate even for nearly parallel lines
far from the origin.  The double precision versions are kept for
comparison and for speed.
"""
import math
import logging

from .dd import DD
from . import robust_predicates
from . import distance
from .coordinate import Coordinate, GeometryInputError, as_coordinate

log=logging.getLogger('robgeom.intersection')


def _finite_point(x,y):
    if math.isnan(x) or math.isinf(x) or math.isnan(y) or math.isinf(y):
        return None
    return Coordinate(x,y)

def _hcoord_xyw(p1x,p1y,p2x,p2y,q1x,q1y,q2x,q2y):
    # each line as homogeneous coordinates, then their cross product.
    px = p1y - p2y
    py = p2x - p1x
    pw = p1x * p2y - p2x * p1y

    qx = q1y - q2y
    qy = q2x - q1x
    qw = q1x * q2y - q2x * q1y

    x = py * qw - qy * pw
    y = qx * pw - px * qw
    w = px * qy - qx * py
    return x,y,w

def hcoordinate_intersection(p1,p2,q1,q2):
    """
    Intersection of lines p1-p2 and q1-q2 by the plain double precision
    homogeneous formula, without conditioning.  Loses accuracy quickly
    away from the origin; mostly useful as a baseline.

    Returns a Coordinate, or None for parallel/coincident lines.
    """
    p1,p2,q1,q2=[as_coordinate(p) for p in (p1,p2,q1,q2)]
    x,y,w=_hcoord_xyw(p1.x,p1.y,p2.x,p2.y,
                      q1.x,q1.y,q2.x,q2.y)
    if w==0.0:
        return None
    return _finite_point(x/w,y/w)

def line_intersection_fp(p1,p2,q1,q2):
    """
    Double precision intersection of lines p1-p2 and q1-q2, with the
    coordinates first translated so the origin is at the middle of the
    overlap of the two segment envelopes.  This removes most of the
    magnitude of the input and with it most of the round-off.

    Returns a Coordinate, or None for parallel/coincident lines.
    """
    p1,p2,q1,q2=[as_coordinate(p) for p in (p1,p2,q1,q2)]

    int_min_x=max(min(p1.x,p2.x),min(q1.x,q2.x))
    int_max_x=min(max(p1.x,p2.x),max(q1.x,q2.x))
    int_min_y=max(min(p1.y,p2.y),min(q1.y,q2.y))
    int_max_y=min(max(p1.y,p2.y),max(q1.y,q2.y))

    midx=(int_min_x+int_max_x)/2.0
    midy=(int_min_y+int_max_y)/2.0

    x,y,w=_hcoord_xyw(p1.x-midx,p1.y-midy,p2.x-midx,p2.y-midy,
                      q1.x-midx,q1.y-midy,q2.x-midx,q2.y-midy)
    if w==0.0:
        return None
    pt=_finite_point(x/w,y/w)
    if pt is None:
        return None
    return Coordinate(pt.x+midx,pt.y+midy)

def line_intersection_dd(p1,p2,q1,q2):
    """
    Intersection of lines p1-p2 and q1-q2 with the homogeneous formula
    evaluated in DD arithmetic, rounded to double at the end.

    Returns a Coordinate, or None for parallel/coincident lines.
    """
    p1,p2,q1,q2=[as_coordinate(p) for p in (p1,p2,q1,q2)]

    px = DD(p1.y) - p2.y
    py = DD(p2.x) - p1.x
    pw = DD(p1.x)*p2.y - DD(p2.x)*p1.y

    qx = DD(q1.y) - q2.y
    qy = DD(q2.x) - q1.x
    qw = DD(q1.x)*q2.y - DD(q2.x)*q1.y

    x = py*qw - qy*pw
    y = qx*pw - px*qw
    w = px*qy - qx*py

    # division by zero w gives NaN, and so None
    return _finite_point( (x/w).double_value(),
                          (y/w).double_value() )

INTERSECTION_METHODS={'dd':line_intersection_dd,
                      'fp':line_intersection_fp}

def line_intersection(p1,p2,q1,q2,method='dd'):
    """
    Intersection point of the infinite lines through p1,p2 and q1,q2.

    method: 'dd' (default) for the extended precision computation,
      'fp' for the conditioned double precision one.

    Returns a Coordinate with unset z, or None when the lines are
    parallel or coincident, or the intersection is not representable.
    """
    try:
        fn=INTERSECTION_METHODS[method]
    except KeyError:
        raise GeometryInputError("method must be one of %s, not %r"%(list(INTERSECTION_METHODS),method))
    pt=fn(p1,p2,q1,q2)
    if pt is None:
        log.debug("No unique intersection of lines %s-%s and %s-%s",p1,p2,q1,q2)
    return pt

def line_segment_intersection(line1,line2,seg1,seg2):
    """
    Intersection of the infinite line through line1,line2 with the
    closed segment seg1-seg2.

    A segment endpoint on the line is returned as is (seg1 first).  If
    the segment lies entirely to one side, None.  Otherwise the
    intersection point, or, if that can't be computed, whichever segment
    endpoint is closer to the line.
    """
    line1,line2,seg1,seg2=[as_coordinate(p) for p in (line1,line2,seg1,seg2)]

    orient_s1=robust_predicates.orientation_index(line1,line2,seg1)
    if orient_s1==0:
        return seg1
    orient_s2=robust_predicates.orientation_index(line1,line2,seg2)
    if orient_s2==0:
        return seg2
    if orient_s1==orient_s2:
        return None

    pt=line_intersection(line1,line2,seg1,seg2)
    if pt is not None:
        return pt

    dist1=distance.point_to_line_perpendicular(seg1,line1,line2)
    dist2=distance.point_to_line_perpendicular(seg2,line1,line2)
    log.debug("line/segment intersection failed, using nearest segment endpoint")
    if dist1<dist2:
        return seg1
    return seg2
