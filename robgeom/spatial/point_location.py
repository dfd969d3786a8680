"""
Locating points relative to rings, polygons and lines.

Point-in-ring uses a ray crossing count along the ray from the point
in the +x direction, with the exact orientation predicate deciding
which side of each edge the point is on.  Points on an edge are
reported as BOUNDARY rather than being assigned to one side.
"""
import logging

import numpy as np

from .. import utils
from . import robust_predicates
from .coordinate import (Location, Orientation, as_coordinate, as_coordinates,
                         as_ring, in_envelope)

log=logging.getLogger('robgeom.point_location')


class RayCrossingCounter(object):
    """
    Counts crossings of the ray from p towards +x, one segment at a
    time, in any order.  The segments must form a set of closed rings
    for the location to mean anything.

    Each vertex is owned by exactly one of its two edges: an edge counts
    if it straddles the ray with one end strictly above and the other on
    or below.  Horizontal edges never count.
    """
    def __init__(self,p):
        self.p=as_coordinate(p)
        self.count=0
        self.is_on_segment=False

    def count_segment(self,p1,p2):
        p=self.p
        p1=as_coordinate(p1)
        p2=as_coordinate(p2)
        # entirely left of the point, can't cross the ray
        if p1.x < p.x and p2.x < p.x:
            return

        # at a vertex.  Only p2 is tested, as p1 is the p2 of the
        # adjacent segment
        if p.x==p2.x and p.y==p2.y:
            self.is_on_segment=True
            return

        if p1.y==p.y and p2.y==p.y:
            minx=min(p1.x,p2.x)
            maxx=max(p1.x,p2.x)
            if minx<=p.x<=maxx:
                self.is_on_segment=True
            return

        if ( (p1.y > p.y and p2.y <= p.y) or
             (p2.y > p.y and p1.y <= p.y) ):
            orient=robust_predicates.orientation_index(p1,p2,p)
            if orient==Orientation.COLLINEAR:
                self.is_on_segment=True
                return
            # normalize to an upward edge
            if p2.y < p1.y:
                orient=-orient
            if orient==Orientation.LEFT:
                self.count+=1

    def count_ring(self,ring):
        """
        count the segments of a closed ring, stopping early if p is
        found on a segment.
        """
        for i in range(1,len(ring)):
            self.count_segment(ring[i],ring[i-1])
            if self.is_on_segment:
                break

    @property
    def location(self):
        if self.is_on_segment:
            return Location.BOUNDARY
        if self.count%2==1:
            return Location.INTERIOR
        return Location.EXTERIOR

    def is_point_in_polygon(self):
        return self.location!=Location.EXTERIOR


def locate(point,ring):
    """
    Location of point relative to ring: INTERIOR, BOUNDARY or EXTERIOR.
    ring: closed sequence of points (closed here if it isn't).
    Orientation of the ring does not matter.
    """
    counter=RayCrossingCounter(point)
    counter.count_ring(as_ring(ring))
    return counter.location

locate_in_ring=locate

def locate_in_polygon(point,shell,holes=()):
    """
    Location of point relative to the polygon with the given shell and
    holes.  Crossings are counted over all rings together, so a point in
    a hole is EXTERIOR.  A point on any ring is BOUNDARY.
    """
    counter=RayCrossingCounter(point)
    for ring in [shell]+list(holes):
        counter.count_ring(as_ring(ring))
        if counter.is_on_segment:
            break
    return counter.location

def is_in_ring(point,ring):
    """ True if point is in the interior or on the boundary of ring """
    return locate(point,ring)!=Location.EXTERIOR

def is_on_segment(p,p0,p1):
    """ True if p lies on the closed segment p0-p1 """
    p=as_coordinate(p)
    p0=as_coordinate(p0)
    p1=as_coordinate(p1)
    if not in_envelope(p0,p1,p):
        return False
    if p.equals_2d(p0):
        # also covers a zero-length segment
        return True
    return robust_predicates.orientation_index(p0,p1,p)==Orientation.COLLINEAR

def is_on_line(p,line):
    """ True if p lies on some segment of the polyline """
    p=as_coordinate(p)
    line=as_coordinates(line)
    for p0,p1 in zip(line[:-1],line[1:]):
        if is_on_segment(p,p0,p1):
            return True
    return False

def locate_points(points,ring):
    """
    Vectorized locate() for many points against one ring.

    points: [N,2] array-like, or anything as_xy_array accepts.
    ring: closed ring, as for locate().
    returns [N] int array of Location values.

    Same rules as RayCrossingCounter, evaluated for all point/segment
    pairs at once.  Memory is O(N*len(ring)), so chunk very large inputs.
    """
    pts=utils.as_xy_array(points)
    ring_xy=utils.as_xy_array(as_ring(ring))

    result=np.full(len(pts),int(Location.EXTERIOR),np.int32)
    if len(pts)==0 or len(ring_xy)<2:
        return result

    # segment i goes from ring[i] (s1) to ring[i-1] (s2), as in locate()
    s1=ring_xy[None,1:,:]
    s2=ring_xy[None,:-1,:]
    px=pts[:,None,0]
    py=pts[:,None,1]
    s1x,s1y=s1[...,0],s1[...,1]
    s2x,s2y=s2[...,0],s2[...,1]

    live=~( (s1x<px) & (s2x<px) )

    at_vertex=live & (px==s2x) & (py==s2y)
    live&=~at_vertex

    horizontal=live & (s1y==py) & (s2y==py)
    on_horizontal=horizontal & (np.minimum(s1x,s2x)<=px) & (px<=np.maximum(s1x,s2x))
    live&=~horizontal

    straddle=live & ( ((s1y>py) & (s2y<=py)) | ((s2y>py) & (s1y<=py)) )

    orient=robust_predicates.orientation_indices(s1,s2,pts[:,None,:])
    on_edge=straddle & (orient==0)
    orient=np.where(s2y<s1y,-orient,orient)
    crossings=(straddle & (orient==1)).sum(axis=1)

    on_boundary=(at_vertex|on_horizontal|on_edge).any(axis=1)
    result[crossings%2==1]=int(Location.INTERIOR)
    result[on_boundary]=int(Location.BOUNDARY)
    log.debug("locate_points: %d points, %d boundary",len(pts),on_boundary.sum())
    return result
