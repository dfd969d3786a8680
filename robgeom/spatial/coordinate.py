# Value types shared by the predicates: Coordinate, the Orientation
# and Location codes, and coercion of user input into Coordinates.
import math
import logging
from collections import namedtuple
from enum import IntEnum

import numpy as np
from shapely import geometry
from shapely.geometry.base import BaseGeometry

log=logging.getLogger('robgeom.coordinate')

NaN=float('nan')


class GeometryInputError(ValueError):
    """ Input which cannot be read as a coordinate or coordinate sequence """
    pass


class Orientation(IntEnum):
    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTERCLOCKWISE = 1
    # synonyms
    RIGHT = -1
    STRAIGHT = 0
    LEFT = 1

    def flip(self):
        return Orientation(-self.value)


class Location(IntEnum):
    """ location of a point relative to a ring or polygon """
    INTERIOR = 0
    BOUNDARY = 1
    EXTERIOR = 2


class Coordinate(namedtuple('Coordinate',['x','y','z','m'])):
    """
    A 2D point with optional z and m, the latter two NaN when unset.

    Equality and hashing consider x,y only, since every predicate here
    is planar and NaN z would otherwise make a point unequal to itself.
    Use equals_3d() to include z.
    """
    __slots__=()

    def __new__(cls,x,y,z=NaN,m=NaN):
        return super(Coordinate,cls).__new__(cls,float(x),float(y),float(z),float(m))

    def equals_2d(self,other):
        return self.x==other.x and self.y==other.y

    def equals_3d(self,other):
        if not self.equals_2d(other):
            return False
        if math.isnan(self.z):
            return math.isnan(other.z)
        return self.z==other.z

    def __eq__(self,other):
        if not isinstance(other,Coordinate):
            return NotImplemented
        return self.equals_2d(other)
    def __ne__(self,other):
        if not isinstance(other,Coordinate):
            return NotImplemented
        return not self.equals_2d(other)
    def __hash__(self):
        return hash((self.x,self.y))

    def is_valid(self):
        """ usable by the predicates: x and y finite """
        return math.isfinite(self.x) and math.isfinite(self.y)

    def has_z(self):
        return not math.isnan(self.z)

    def distance(self,other):
        return math.hypot(self.x-other.x,self.y-other.y)

    def with_z(self,z):
        return self._replace(z=float(z))


def as_coordinate(p):
    """
    Coerce p to a Coordinate.  p can be a Coordinate, a shapely Point,
    or any sequence / array of 2 to 4 numbers, read as x,y[,z[,m]].
    """
    if isinstance(p,Coordinate):
        return p
    if isinstance(p,geometry.Point):
        p=p.coords[0]
    try:
        vals=[float(v) for v in np.asarray(p,np.float64).ravel()]
    except (TypeError,ValueError) as exc:
        raise GeometryInputError("Cannot read a coordinate from %r"%(p,)) from exc
    if not 2<=len(vals)<=4:
        raise GeometryInputError("A coordinate needs 2 to 4 ordinates, got %d"%len(vals))
    return Coordinate(*vals)

def as_coordinates(seq):
    """
    Coerce a sequence of points to a list of Coordinates.  Also accepts
    shapely LineString/LinearRing, and Polygon (its exterior ring), and
    [N,2..4] arrays.
    """
    if isinstance(seq,geometry.Polygon):
        seq=seq.exterior
    if isinstance(seq,BaseGeometry):
        seq=seq.coords
    return [as_coordinate(p) for p in seq]

def as_ring(seq):
    """
    as_coordinates, then close the ring if the first and last
    points differ.
    """
    ring=as_coordinates(seq)
    if len(ring)>1 and ring[0]!=ring[-1]:
        ring.append(ring[0])
    return ring

def in_envelope(p1,p2,q):
    """ True if q lies in the bounding box of p1,p2, boundary included """
    return ( (min(p1.x,p2.x) <= q.x <= max(p1.x,p2.x)) and
             (min(p1.y,p2.y) <= q.y <= max(p1.y,p2.y)) )

def envelopes_intersect(p1,p2,q1,q2):
    """ True if the bounding boxes of segments p1p2 and q1q2 overlap """
    if min(q1.x,q2.x) > max(p1.x,p2.x): return False
    if max(q1.x,q2.x) < min(p1.x,p2.x): return False
    if min(q1.y,q2.y) > max(p1.y,p2.y): return False
    if max(q1.y,q2.y) < min(p1.y,p2.y): return False
    return True
