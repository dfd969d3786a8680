"""
Euclidean distances between points, segments and lines, in plain
double precision.  These are measurements, not predicates: results are
subject to ordinary round-off.
"""
import math
import logging

from .coordinate import (Coordinate, as_coordinate, as_coordinates,
                         envelopes_intersect)

log=logging.getLogger('robgeom.distance')

NaN=float('nan')


def point_to_segment(p,a,b):
    """
    Distance from p to the closed segment a-b.  A zero-length segment
    is treated as the point a.
    """
    p=as_coordinate(p)
    a=as_coordinate(a)
    b=as_coordinate(b)
    if a.x==b.x and a.y==b.y:
        return p.distance(a)

    # r is the parameter of the projection of p onto the line a-b,
    #  r<0 beyond a, r>1 beyond b, 0<r<1 in between.
    len2=(b.x-a.x)**2 + (b.y-a.y)**2
    r=( (p.x-a.x)*(b.x-a.x) + (p.y-a.y)*(b.y-a.y) ) / len2
    if r<=0.0:
        return p.distance(a)
    if r>=1.0:
        return p.distance(b)

    # s is the signed distance along the normal, in units of the segment length
    s=( (a.y-p.y)*(b.x-a.x) - (a.x-p.x)*(b.y-a.y) ) / len2
    return abs(s)*math.sqrt(len2)

def point_to_line_perpendicular_signed(p,a,b):
    """
    Signed perpendicular distance from p to the infinite line through a,b.
    Positive when p is to the right of a->b.  NaN if a==b.
    """
    p=as_coordinate(p)
    a=as_coordinate(a)
    b=as_coordinate(b)
    len2=(b.x-a.x)**2 + (b.y-a.y)**2
    if len2==0.0:
        return NaN
    s=( (a.y-p.y)*(b.x-a.x) - (a.x-p.x)*(b.y-a.y) ) / len2
    return s*math.sqrt(len2)

def point_to_line_perpendicular(p,a,b):
    """ Perpendicular distance from p to the infinite line through a,b """
    return abs(point_to_line_perpendicular_signed(p,a,b))

def segment_to_segment(a,b,c,d):
    """
    Distance between segments a-b and c-d, 0 if they intersect.
    """
    a,b,c,d=[as_coordinate(pt) for pt in (a,b,c,d)]
    if a.equals_2d(b):
        return point_to_segment(a,c,d)
    if c.equals_2d(d):
        return point_to_segment(d,a,b)

    # Solve a + r(b-a) = c + s(d-c).  The segments intersect iff both
    # parameters fall in [0,1].
    intersecting=False
    if envelopes_intersect(a,b,c,d):
        denom=(b.x-a.x)*(d.y-c.y) - (b.y-a.y)*(d.x-c.x)
        if denom!=0.0:
            r_num=(a.y-c.y)*(d.x-c.x) - (a.x-c.x)*(d.y-c.y)
            s_num=(a.y-c.y)*(b.x-a.x) - (a.x-c.x)*(b.y-a.y)
            r=r_num/denom
            s=s_num/denom
            intersecting=(0<=r<=1) and (0<=s<=1)
    if intersecting:
        return 0.0
    return min(point_to_segment(a,c,d),
               point_to_segment(b,c,d),
               point_to_segment(c,a,b),
               point_to_segment(d,a,b))

def point_to_segment_string(p,line):
    """
    Distance from p to a polyline.  NaN for an empty line, and the
    distance to the single point for a one-point line.
    """
    p=as_coordinate(p)
    line=as_coordinates(line)
    if len(line)==0:
        return NaN
    min_distance=p.distance(line[0])
    for a,b in zip(line[:-1],line[1:]):
        min_distance=min(min_distance,point_to_segment(p,a,b))
    return min_distance


## 3D.  z is taken from the Coordinate; a point without z has NaN there.

def point_to_point_3d(p0,p1):
    """ 3D distance, or 2D distance if either point lacks z """
    p0=as_coordinate(p0)
    p1=as_coordinate(p1)
    if math.isnan(p0.z) or math.isnan(p1.z):
        return p0.distance(p1)
    return math.sqrt( (p0.x-p1.x)**2 + (p0.y-p1.y)**2 + (p0.z-p1.z)**2 )

def _dot_3d(a,b,c,d):
    """ (b-a) . (d-c) """
    return ( (b.x-a.x)*(d.x-c.x)
             + (b.y-a.y)*(d.y-c.y)
             + (b.z-a.z)*(d.z-c.z) )

def point_to_segment_3d(p,a,b):
    """
    Distance from p to the 3D segment a-b.  All three points should
    carry z; missing z generally gives NaN.
    """
    p=as_coordinate(p)
    a=as_coordinate(a)
    b=as_coordinate(b)
    if a.equals_3d(b):
        return point_to_point_3d(p,a)

    len2=_dot_3d(a,b,a,b)
    if math.isnan(len2):
        return NaN
    r=_dot_3d(a,p,a,b) / len2
    if r<=0.0:
        return point_to_point_3d(p,a)
    if r>=1.0:
        return point_to_point_3d(p,b)

    q=Coordinate(a.x + r*(b.x-a.x),
                 a.y + r*(b.y-a.y),
                 a.z + r*(b.z-a.z))
    return point_to_point_3d(p,q)

def segment_to_segment_3d(a,b,c,d):
    """
    Distance between the 3D segments a-b and c-d.  Plain double
    precision, so subject to round-off for large ordinates.
    """
    a,b,c,d=[as_coordinate(pt) for pt in (a,b,c,d)]
    if a.equals_3d(b):
        return point_to_segment_3d(a,c,d)
    if c.equals_3d(d):
        return point_to_segment_3d(c,a,b)

    # closest points a+s(b-a) and c+t(d-c)
    aa=_dot_3d(a,b,a,b)
    bb=_dot_3d(a,b,c,d)
    cc=_dot_3d(c,d,c,d)
    dd=_dot_3d(a,b,c,a)
    ee=_dot_3d(c,d,c,a)

    denom=aa*cc - bb*bb
    if math.isnan(denom):
        return NaN

    if denom>0.0:
        s=(bb*ee - cc*dd)/denom
        t=(aa*ee - bb*dd)/denom
    if denom<=0.0 or not (0.0<=s<=1.0 and 0.0<=t<=1.0):
        # parallel, or the closest approach of the lines is off a
        # segment.  Then it is on the boundary, from an endpoint.
        return min(point_to_segment_3d(a,c,d),
                   point_to_segment_3d(b,c,d),
                   point_to_segment_3d(c,a,b),
                   point_to_segment_3d(d,a,b))

    # closest points are interior to both segments
    p=Coordinate(a.x + s*(b.x-a.x), a.y + s*(b.y-a.y), a.z + s*(b.z-a.z))
    q=Coordinate(c.x + t*(d.x-c.x), c.y + t*(d.y-c.y), c.z + t*(d.z-c.z))
    return point_to_point_3d(p,q)
