import logging

import numpy as np

log=logging.getLogger('robgeom.utils')


def as_xy_array(points):
    """
    Coerce a sequence of points to a [N,2] float64 array.
    Accepts arrays, lists of tuples or Coordinates, and shapely geometries
    with a coordinate sequence (for polygons, the exterior ring).
    Extra ordinates (z,m) are dropped.
    """
    if hasattr(points,'exterior'):
        points=points.exterior
    if hasattr(points,'coords'):
        points=list(points.coords)
    elif not isinstance(points,np.ndarray):
        points=[ (p[0],p[1]) for p in points]
    points=np.asarray(points,np.float64)
    if points.size==0:
        return np.zeros([0,2],np.float64)
    if points.ndim!=2 or points.shape[1]<2:
        raise ValueError("Expected [N,2] points, got shape %s"%(points.shape,))
    return points[:,:2]

def signed_area(points):
    """
    Shoelace area of a ring, positive when counter-clockwise.  Note this
    is the opposite sign of JTS Area.ofRingSigned, which is positive for
    clockwise rings.
    points: [N,2] array.  A repeated closing point contributes nothing.
    """
    points=np.asarray(points)
    if len(points)<3:
        return 0.0
    i = np.arange(points.shape[0])
    ip1 = (i+1)%(points.shape[0])
    # shift to reduce cancellation for far-from-origin rings
    points=points[:,:2] - points[0,:2]
    return 0.5*(points[i,0]*points[ip1,1] - points[ip1,0]*points[i,1]).sum()
