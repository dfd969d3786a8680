"""
Orientation of point triples and of rings.
"""
import logging

from .. import utils
from . import robust_predicates
from .coordinate import Orientation, as_coordinate, as_ring

log=logging.getLogger('robgeom.orientation')


def orientation(p1,p2,q):
    """
    Orientation of q relative to the directed line p1->p2, equivalently
    the turn direction of the triangle p1,p2,q.

    Returns Orientation.LEFT (counter-clockwise), RIGHT (clockwise)
    or COLLINEAR.  Exact for all finite input.
    """
    p1=as_coordinate(p1)
    p2=as_coordinate(p2)
    q=as_coordinate(q)
    return Orientation(robust_predicates.orientation_index(p1,p2,q))

def orientation_ccw_of_ring(ring):
    """
    True if the ring is oriented counter-clockwise.

    ring: sequence of points, closed (first point repeated at the end).
      An unclosed ring is closed before testing.

    Repeated points and collapsed flat segments along the top of the ring
    are handled.  Self-crossing rings may get a wrong answer.  Rings
    with fewer than three distinct points, flat rings, and rings whose
    cap doubles back on itself (A-B-A) return False.
    """
    ring=as_ring(ring)
    n_pts=len(ring)-1 # without the closing point
    if n_pts<3:
        return False

    # highest point reached by a rising segment.  If there is none the
    # ring is flat.
    up_hi=ring[0]
    up_low=None
    prev_y=up_hi.y
    i_up_hi=0
    for i in range(1,n_pts+1):
        py=ring[i].y
        if py > prev_y and py >= up_hi.y:
            up_hi=ring[i]
            i_up_hi=i
            up_low=ring[i-1]
        prev_y=py

    if i_up_hi==0:
        return False

    # next point lower than the high point, i.e. the start of the
    # falling segment.  Exists since the ring isn't flat.
    i_down_low=i_up_hi
    while True:
        i_down_low=(i_down_low+1)%n_pts
        if i_down_low==i_up_hi or ring[i_down_low].y!=up_hi.y:
            break
    down_low=ring[i_down_low]
    if i_down_low>0:
        i_down_hi=i_down_low-1
    else:
        i_down_hi=n_pts-1
    down_hi=ring[i_down_hi]

    if up_hi.equals_2d(down_hi):
        # pointed cap
        if ( up_low.equals_2d(up_hi) or
             down_low.equals_2d(up_hi) or
             up_low.equals_2d(down_low) ):
            # A-B-A, not enough distinct points
            return False
        # coincident top segments give COLLINEAR, and so False
        index=robust_predicates.orientation_index(up_low,up_hi,down_low)
        return index==Orientation.COUNTERCLOCKWISE
    else:
        # flat cap, its direction decides
        return (down_hi.x - up_hi.x) < 0

is_ccw=orientation_ccw_of_ring

def signed_area(ring):
    """ shoelace area of the ring, positive for counter-clockwise """
    return utils.signed_area(utils.as_xy_array(ring))

def is_ccw_area(ring):
    """
    Counter-clockwise test by the sign of the enclosed area.  Unlike
    is_ccw, a self-crossing ring gets the orientation of its larger
    lobe.  Zero-area rings are not counter-clockwise.
    """
    return signed_area(ring) > 0
