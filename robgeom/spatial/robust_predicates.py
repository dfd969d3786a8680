# Robust orientation predicates.
#
# Two tiers: a cheap double-precision filter with a Shewchuk-style error
# bound, which settles the sign in nearly all cases, and an exact
# fallback in double-double arithmetic for the inputs the filter cannot
# certify.
import logging

import numpy as np

from .dd import DD

log=logging.getLogger('robgeom.robust_predicates')

# A value safely greater than the relative round-off error in
# double-precision numbers.  Calibrates the orientation filter.
DP_SAFE_EPSILON = 1e-15


def signum(x):
    # float cast, otherwise numpy scalars leak numpy bools
    x=float(x)
    return (x>0)-(x<0)

def orientation_index_filter(pax,pay,pbx,pby,pcx,pcy):
    """
    Orientation of c relative to the directed line a->b, when it
    can be computed safely in double precision.

    returns 1 (left), -1 (right), 0 (collinear), or None if the
    double precision determinant is too close to zero to trust.
    """
    detleft = (pax - pcx) * (pby - pcy)
    detright = (pay - pcy) * (pbx - pcx)
    det = detleft - detright

    if detleft > 0.0:
        if detright <= 0.0:
            return signum(det)
        detsum = detleft + detright
    elif detleft < 0.0:
        if detright >= 0.0:
            return signum(det)
        detsum = -detleft - detright
    else:
        return signum(det)

    errbound = DP_SAFE_EPSILON * detsum
    if (det >= errbound) or (-det >= errbound):
        return signum(det)
    return None

def orientation_index_dd(p1x,p1y,p2x,p2y,qx,qy):
    """
    Exact(-enough) orientation of q relative to p1->p2, always
    evaluated in DD arithmetic.  The differences of two doubles are
    exact in DD, so the sign is correct for all finite input short of
    overflow.
    """
    dx1 = DD(p2x).add(-p1x)
    dy1 = DD(p2y).add(-p1y)
    dx2 = DD(qx).add(-p2x)
    dy2 = DD(qy).add(-p2y)
    # sign of the determinant, unrolled
    return dx1.multiply(dy2).subtract(dy1.multiply(dx2)).signum()

def orientation_index_xy(p1x,p1y,p2x,p2y,qx,qy):
    """
    1 if q is counter-clockwise (left) of p1->p2, -1 if clockwise (right),
    0 if collinear.
    """
    index=orientation_index_filter(p1x,p1y,p2x,p2y,qx,qy)
    if index is not None:
        return index
    log.debug("orientation filter uncertain for (%r,%r) (%r,%r) (%r,%r), using DD",
              p1x,p1y,p2x,p2y,qx,qy)
    return orientation_index_dd(p1x,p1y,p2x,p2y,qx,qy)

def orientation_index(p1,p2,q):
    """ orientation_index_xy for anything with .x,.y, i.e. Coordinates """
    return orientation_index_xy(p1.x,p1.y,p2.x,p2.y,q.x,q.y)

def sign_of_det2x2(x1,y1,x2,y2):
    """
    Sign of the determinant of [[x1,x2],[y1,y2]], computed in DD.
    Entries may be floats or DDs.

    returns -1, 0 or 1
    """
    return DD.determinant(x1,y1,x2,y2).signum()


def orientation_indices(p1,p2,q):
    """
    Vectorized orientation_index_xy.

    p1,p2,q: arrays [...,2] which broadcast against each other.
    returns int8 array of -1,0,1 with the broadcast shape.

    The filter is evaluated with numpy for all rows, and only
    the rows it can't certify go through the DD path.
    """
    p1=np.asarray(p1,np.float64)
    p2=np.asarray(p2,np.float64)
    q=np.asarray(q,np.float64)
    p1,p2,q=np.broadcast_arrays(p1,p2,q)
    shape=p1.shape[:-1]
    # flatten to [N,2] so 0-d input works the same as arrays
    p1=p1.reshape([-1,2])
    p2=p2.reshape([-1,2])
    q=q.reshape([-1,2])

    detleft = (p1[:,0] - q[:,0]) * (p2[:,1] - q[:,1])
    detright = (p1[:,1] - q[:,1]) * (p2[:,0] - q[:,0])
    det = detleft - detright

    # NaN falls through to 0, as with signum()
    result=np.zeros(len(det),np.int8)
    result[det>0]=1
    result[det<0]=-1

    # same-sign, non-zero terms can cancel.  Everything else is certain.
    maybe_cancel=( ((detleft>0) & (detright>0)) |
                   ((detleft<0) & (detright<0)) )
    detsum=np.abs(detleft+detright)
    errbound=DP_SAFE_EPSILON*detsum
    uncertain=maybe_cancel & ~( (det>=errbound) | (-det>=errbound) )

    idxs=np.nonzero(uncertain)[0]
    if len(idxs):
        log.debug("orientation_indices: %d of %d need DD",len(idxs),len(det))
    for i in idxs:
        result[i]=orientation_index_dd(p1[i,0],p1[i,1],
                                       p2[i,0],p2[i,1],
                                       q[i,0],q[i,1])
    return result.reshape(shape)
