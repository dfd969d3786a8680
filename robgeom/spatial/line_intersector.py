"""
Robust intersection of two line segments, or of a point and a segment.

segment_intersection() classifies the intersection of two closed
segments as NONE, a single POINT, or a COLLINEAR overlap, using only
the exact orientation predicate for the classification.  A computed
point is only needed for a proper crossing, where the DD line
intersection is used, with a fallback to the nearest endpoint if
round-off puts the point outside the segments.

Z values are carried through: an endpoint keeps its own z, otherwise z
is interpolated along the segment(s).
"""
import math
import logging
from collections import namedtuple
from enum import Enum

from . import robust_predicates
from . import distance
from .intersection import line_intersection
from .coordinate import (as_coordinate,
                         in_envelope, envelopes_intersect)

log=logging.getLogger('robgeom.line_intersector')


class IntersectionKind(Enum):
    NONE = 0
    POINT = 1
    COLLINEAR = 2


class SegmentIntersection(namedtuple('SegmentIntersection',
                                     ['kind','points','is_proper','input_lines'])):
    """
    Result of intersecting two segments (or a point and a segment).

    kind: IntersectionKind
    points: tuple of 0, 1 (POINT) or 2 (COLLINEAR, the ends of the
      overlap) Coordinates
    is_proper: a single point in the interior of both segments
    input_lines: the input segments, ((p1,p2),(q1,q2)).  For a
      point/segment test, ((p,p),(p1,p2)).
    """
    __slots__=()

    @property
    def has_intersection(self):
        return self.kind!=IntersectionKind.NONE

    @property
    def is_collinear(self):
        return self.kind==IntersectionKind.COLLINEAR

    @property
    def intersection_num(self):
        return len(self.points)

    @property
    def point(self):
        """ first intersection point, or None """
        if self.points:
            return self.points[0]
        return None

    @property
    def is_endpoint(self):
        """ an intersection which is not proper, i.e. involves an endpoint """
        return self.has_intersection and not self.is_proper

    def is_intersection(self,pt):
        """
        True if pt is one of the intersection points.  For a collinear
        result this tests only the two ends of the overlap.
        """
        pt=as_coordinate(pt)
        return any(pt.equals_2d(q) for q in self.points)

    def is_interior_intersection(self,input_index=None):
        """
        True if some intersection point lies in the interior of input
        segment input_index (0 or 1), or of either segment when
        input_index is None.
        """
        if input_index is None:
            return ( self.is_interior_intersection(0) or
                     self.is_interior_intersection(1) )
        a,b=self.input_lines[input_index]
        for pt in self.points:
            if not (pt.equals_2d(a) or pt.equals_2d(b)):
                return True
        return False

    def edge_distance(self,segment_index,int_index):
        """ edge_distance of intersection point int_index along input segment segment_index """
        a,b=self.input_lines[segment_index]
        return edge_distance(self.points[int_index],a,b)

    def points_along_segment(self,segment_index):
        """
        Intersection points ordered in the direction of input segment
        segment_index.
        """
        a,b=self.input_lines[segment_index]
        return tuple(sorted(self.points,
                            key=lambda pt: edge_distance(pt,a,b)))


def edge_distance(p,p0,p1):
    """
    A robust metric of the position of p along the segment p0-p1, used
    to order points on a segment.  Not the Euclidean distance: it is
    the offset from p0 along whichever axis the segment is longer in.

    Only meaningful for p on (or rounded onto) the segment.  Any p
    other than p0 gets a positive distance.
    """
    dx=abs(p1.x-p0.x)
    dy=abs(p1.y-p0.y)

    if p.equals_2d(p0):
        return 0.0
    if p.equals_2d(p1):
        return dx if dx>dy else dy

    pdx=abs(p.x-p0.x)
    pdy=abs(p.y-p0.y)
    dist=pdx if dx>dy else pdy
    if dist==0.0:
        # non-endpoints always get a non-zero distance
        dist=max(pdx,pdy)
    return dist


## Z handling

def z_interpolate(p,p1,p2):
    """
    z at p, interpolated by distance along p1-p2.  If only one endpoint
    has z, that z.  NaN if neither does.
    """
    p1z=p1.z
    p2z=p2.z
    if math.isnan(p1z):
        return p2z
    if math.isnan(p2z):
        return p1z
    if p.equals_2d(p1):
        return p1z
    if p.equals_2d(p2):
        return p2z
    dz=p2z-p1z
    if dz==0.0:
        return p1z
    seglen=(p2.x-p1.x)**2 + (p2.y-p1.y)**2
    plen=(p.x-p1.x)**2 + (p.y-p1.y)**2
    return p1z + dz*math.sqrt(plen/seglen)

def z_interpolate_segments(p,p1,p2,q1,q2):
    """ z at p interpolated along both segments, averaged when both give one """
    zp=z_interpolate(p,p1,p2)
    zq=z_interpolate(p,q1,q2)
    if math.isnan(zp):
        return zq
    if math.isnan(zq):
        return zp
    return (zp+zq)/2.0

def _get_z(p,q):
    # z of a shared endpoint: p's, else q's
    if math.isnan(p.z):
        return q.z
    return p.z

def _get_z_or_interpolate(p,p1,p2):
    if not math.isnan(p.z):
        return p.z
    return z_interpolate(p,p1,p2)

def _copy_with_z(p,z):
    if math.isnan(z):
        return p
    return p.with_z(z)

def _copy_with_z_interpolate(p,p1,p2):
    return _copy_with_z(p,_get_z_or_interpolate(p,p1,p2))


## Segment/segment

def _nearest_endpoint(p1,p2,q1,q2):
    """
    The endpoint closest to the other segment.  A stand-in for an
    intersection point which could not be computed accurately.
    """
    candidates=[ (p1,(q1,q2)),
                 (p2,(q1,q2)),
                 (q1,(p1,p2)),
                 (q2,(p1,p2)) ]
    nearest=p1
    min_dist=None
    for pt,(a,b) in candidates:
        d=distance.point_to_segment(pt,a,b)
        if min_dist is None or d<min_dist:
            nearest,min_dist=pt,d
    return nearest

def _proper_intersection_point(p1,p2,q1,q2):
    pt=line_intersection(p1,p2,q1,q2)
    if pt is None or not (in_envelope(p1,p2,pt) and in_envelope(q1,q2,pt)):
        log.debug("Intersection of %s-%s and %s-%s not resolved (%s), using nearest endpoint",
                  p1,p2,q1,q2,pt)
        pt=_nearest_endpoint(p1,p2,q1,q2)
    return pt

def _collinear_intersection(p1,p2,q1,q2):
    """ returns (kind, points) for collinear segments """
    q1_in_p=in_envelope(p1,p2,q1)
    q2_in_p=in_envelope(p1,p2,q2)
    p1_in_q=in_envelope(q1,q2,p1)
    p2_in_q=in_envelope(q1,q2,p2)

    if q1_in_p and q2_in_p:
        return IntersectionKind.COLLINEAR,(_copy_with_z_interpolate(q1,p1,p2),
                                           _copy_with_z_interpolate(q2,p1,p2))
    if p1_in_q and p2_in_q:
        return IntersectionKind.COLLINEAR,(_copy_with_z_interpolate(p1,q1,q2),
                                           _copy_with_z_interpolate(p2,q1,q2))

    # Partial overlaps.  Each entry: the end of q inside p, the end of p
    # inside q, and the flags which must be false for the overlap to
    # be just the shared endpoint.
    for q_end,q_in,p_end,p_in,q_other_in,p_other_in in [
            (q1,q1_in_p,p1,p1_in_q,q2_in_p,p2_in_q),
            (q1,q1_in_p,p2,p2_in_q,q2_in_p,p1_in_q),
            (q2,q2_in_p,p1,p1_in_q,q1_in_p,p2_in_q),
            (q2,q2_in_p,p2,p2_in_q,q1_in_p,p1_in_q)]:
        if q_in and p_in:
            points=(_copy_with_z_interpolate(q_end,p1,p2),
                    _copy_with_z_interpolate(p_end,q1,q2))
            if q_end.equals_2d(p_end) and not q_other_in and not p_other_in:
                return IntersectionKind.POINT,points[:1]
            return IntersectionKind.COLLINEAR,points
    return IntersectionKind.NONE,()

def segment_intersection(p1,p2,q1,q2):
    """
    Intersect the closed segments p1-p2 and q1-q2.

    Returns a SegmentIntersection.  The classification (none, point,
    collinear, proper or not) is exact.  Only a proper crossing requires
    computing a new point, which is then accurate to round-off and is
    always within both segment envelopes.
    """
    p1,p2,q1,q2=[as_coordinate(p) for p in (p1,p2,q1,q2)]
    input_lines=((p1,p2),(q1,q2))

    def result(kind,points=(),is_proper=False):
        return SegmentIntersection(kind,tuple(points),is_proper,input_lines)

    if not envelopes_intersect(p1,p2,q1,q2):
        return result(IntersectionKind.NONE)

    # both q endpoints strictly on one side of p?
    pq1=robust_predicates.orientation_index(p1,p2,q1)
    pq2=robust_predicates.orientation_index(p1,p2,q2)
    if (pq1>0 and pq2>0) or (pq1<0 and pq2<0):
        return result(IntersectionKind.NONE)

    qp1=robust_predicates.orientation_index(q1,q2,p1)
    qp2=robust_predicates.orientation_index(q1,q2,p2)
    if (qp1>0 and qp2>0) or (qp1<0 and qp2<0):
        return result(IntersectionKind.NONE)

    if pq1==0 and pq2==0 and qp1==0 and qp2==0:
        kind,points=_collinear_intersection(p1,p2,q1,q2)
        return result(kind,points)

    if pq1==0 or pq2==0 or qp1==0 or qp2==0:
        # an endpoint lies on the other segment.  Shared endpoints are
        # checked first so their z is taken rather than interpolated.
        if p1.equals_2d(q1):
            p,z=p1,_get_z(p1,q1)
        elif p1.equals_2d(q2):
            p,z=p1,_get_z(p1,q2)
        elif p2.equals_2d(q1):
            p,z=p2,_get_z(p2,q1)
        elif p2.equals_2d(q2):
            p,z=p2,_get_z(p2,q2)
        elif pq1==0:
            p,z=q1,_get_z_or_interpolate(q1,p1,p2)
        elif pq2==0:
            p,z=q2,_get_z_or_interpolate(q2,p1,p2)
        elif qp1==0:
            p,z=p1,_get_z_or_interpolate(p1,q1,q2)
        else:
            p,z=p2,_get_z_or_interpolate(p2,q1,q2)
        return result(IntersectionKind.POINT,[_copy_with_z(p,z)])

    p=_proper_intersection_point(p1,p2,q1,q2)
    z=z_interpolate_segments(p,p1,p2,q1,q2)
    return result(IntersectionKind.POINT,[_copy_with_z(p,z)],is_proper=True)


## Point/segment

def point_segment_intersection(p,p1,p2):
    """
    Test whether point p lies on the closed segment p1-p2.

    Returns a SegmentIntersection of kind POINT with p as the point, or
    NONE.  The intersection is proper when p is not an endpoint.
    """
    p=as_coordinate(p)
    p1=as_coordinate(p1)
    p2=as_coordinate(p2)
    input_lines=((p,p),(p1,p2))

    if in_envelope(p1,p2,p):
        if ( robust_predicates.orientation_index(p1,p2,p)==0 and
             robust_predicates.orientation_index(p2,p1,p)==0 ):
            is_proper=not (p.equals_2d(p1) or p.equals_2d(p2))
            return SegmentIntersection(IntersectionKind.POINT,(p,),is_proper,input_lines)
    return SegmentIntersection(IntersectionKind.NONE,(),False,input_lines)
