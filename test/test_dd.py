import math
import pickle

import numpy as np
import pytest

from robgeom.spatial.dd import DD, two_sum, two_product

def check_error_bound(x,y,err_bound):
    err=(x-y).abs()
    assert err.double_value() <= err_bound

def test_error_free_transforms():
    s,e=two_sum(1.0,1e-20)
    assert s==1.0
    assert e==1e-20

    x,y=two_product(1.0+2**-30,1.0+2**-30)
    # (1+2^-30)^2 = 1 + 2^-29 + 2^-60, the last term lost in x
    assert x==1.0+2**-29
    assert y==2**-60

def test_nan():
    assert DD(1.0).divide(DD(0.0)).is_nan()
    assert DD(1.0).divide(DD.NaN).is_nan()
    assert (DD(1.0)/0.0).is_nan()
    assert (DD.NaN+1.0).is_nan()
    assert DD.NaN.signum()==0

def test_add_mult2():
    for dd in [DD(3.0),DD.PI]:
        check_error_bound(dd+dd,dd*DD(2.0),0.0)
        assert (dd+dd)==dd*2

def test_multiply_divide():
    for a,b in [(DD.PI,DD.E),
                (DD.PI_2,DD.E),
                (DD(39.4),DD(10.0))]:
        check_error_bound(a,a.multiply(b).divide(b),1e-30)

def test_divide_multiply():
    for a,b in [(DD.PI,DD.E),
                (DD(39.4),DD(10.0))]:
        check_error_bound(a,a.divide(b).multiply(b),1e-30)

def test_sqrt():
    for x,err in [(DD.PI,1e-30),
                  (DD.E,1e-30),
                  (DD(999.0),1e-28)]:
        root=x.sqrt()
        check_error_bound(x,root*root,err)
    assert DD(0.0).sqrt().is_zero()
    assert DD(-1.0).sqrt().is_nan()

def test_trunc():
    x=DD(1e16)-DD(1.0)
    assert x.trunc().equals(x)
    assert DD.PI.trunc().equals(DD(3.0))
    assert DD(999.999).trunc().equals(DD(999.0))
    assert DD.E.negate().trunc().equals(DD(-2.0))
    assert DD(-999.999).trunc().equals(DD(-999.0))

def test_floor_ceil_rint():
    assert DD(2.5).floor()==2.0
    assert DD(-2.5).floor()==-3.0
    assert DD(2.5).ceil()==3.0
    assert DD(2.5).rint()==3.0
    assert DD(-2.7).rint()==-3.0
    # integral hi with a negative low part
    x=DD(1e16)-DD(1.0)
    assert (DD(1e16)-DD(0.5)).floor().equals(x)
    assert math.isinf(DD(float('inf')).floor().hi)

def slow_pow(x,exp):
    if exp==0:
        return DD(1.0)
    result=x
    for i in range(1,abs(exp)):
        result=result*x
    if exp<0:
        return result.reciprocal()
    return result

def test_pow():
    for x,exp,err_bound in [(0.0,3,16*DD.EPS),
                            (14.0,3,16*DD.EPS),
                            (3.0,-5,16*DD.EPS),
                            (-3.0,5,16*DD.EPS),
                            (-3.0,-5,16*DD.EPS),
                            (0.12345,-5,1e5*DD.EPS)]:
        x=DD(x)
        expected=slow_pow(x,exp)
        err=(x.pow(exp)-expected).abs()
        # relative, except for 0**3
        scale=max(1.0,abs(expected.double_value()))
        assert err.double_value() <= err_bound*scale
    assert DD(7.0).pow(0)==1.0

def test_reciprocal():
    for x,err_bound in [(3.0,0.0),
                        (99.0,1e-29),
                        (999.0,0.0),
                        (314159269.0,0.0)]:
        xdd=DD(x)
        rr=xdd.reciprocal().reciprocal()
        assert (xdd-rr).double_value() <= err_bound

def test_determinant():
    assert DD.determinant(3.0,8.0,4.0,6.0)==-14.0
    assert DD.determinant(DD(3.0),DD(8.0),DD(4.0),DD(6.0))==-14.0

def test_determinant_robust():
    # naive double precision gets this wrong
    args=(1.0e9,1.0e9-1,1.0e9-1,1.0e9-2)
    assert DD.determinant(*args).equals(DD(-1.0))
    assert DD.determinant(*[DD(a) for a in args]).equals(DD(-1.0))

BINOMIAL_CASES=[(100.0,1.0),
                (1000.0,1.0),
                (10000.0,1.0),
                (100000.0,1.0),
                (1000000.0,1.0),
                (1e8,1.0),
                (1e10,1.0),
                (1e14,1.0),
                (1e14,291.0),
                (5e14,291.0),
                (5e14,345291.0)]

@pytest.mark.parametrize("a,b",BINOMIAL_CASES)
def test_binomial_square(a,b):
    # (a+b)^2 - a^2 == b^2 + 2ab, exact for integers this size
    add=DD(a)
    bdd=DD(b)
    a_plus_b=add+bdd
    ab_sq=a_plus_b*a_plus_b
    ab=add*bdd
    total=bdd*bdd + ab + ab
    diff=ab_sq - add*add
    assert diff.equals(total)
    assert (diff-total).is_zero()

@pytest.mark.parametrize("a,b",BINOMIAL_CASES[:8])
def test_binomial_difference(a,b):
    # (a+b)(a-b) = a^2 - b^2
    add=DD(a)
    bdd=DD(b)
    prod=(add+bdd)*(add-bdd)
    diff=(prod - add*add).negate()
    assert diff.equals(bdd*bdd)

def test_e_by_taylor_series():
    s=DD(2.0)
    t=DD(1.0)
    n=1.0
    while t.double_value() > DD.EPS:
        n+=1.0
        t=t/n
        s=s+t
    assert abs((s-DD.E).double_value()) < 64*DD.EPS

def arctan(x):
    t=x
    t2=t.sqr()
    at=DD(0.0)
    d=DD(1.0)
    sign=1
    while t.double_value() > DD.EPS:
        if sign<0:
            at=at-t/d
        else:
            at=at+t/d
        d=d+2.0
        t=t*t2
        sign=-sign
    return at

def test_pi_by_machin():
    t1=DD(1.0)/5.0
    t2=DD(1.0)/239.0
    pi=4*(4*arctan(t1) - arctan(t2))
    assert abs((pi-DD.PI).double_value()) < 8*DD.EPS

def test_comparisons():
    a=DD(1.0)
    b=DD(1.0)+1e-20
    assert a<b
    assert b>a
    assert a<=a and a>=a
    assert a!=b
    assert a.compare_to(b)==-1
    assert b.compare_to(a)==1
    assert a.compare_to(a)==0
    assert a.min(b) is a
    assert a.max(b) is b
    # the low part is invisible to a double comparison
    assert b.double_value()==1.0

def test_parse_and_str():
    x=DD.parse("3.141592653589793238462643383279503")
    check_error_bound(x,DD.PI,1e-31)
    assert str(DD(2.0))=="2.0"
    assert str(DD(0.0))=="0.0"
    assert str(DD.parse("1e30")).startswith("1")
    assert DD(2.0).dump()=="DD<2.0, 0.0>"
    assert eval(repr(DD.PI))==DD.PI

def test_conversions():
    assert float(DD(2.5))==2.5
    assert int(DD(-2.5))==-2
    assert (DD(1e16)-1.0).int_value()==10**16-1
    assert DD.NaN.int_value()==0
    assert int(DD.NaN)==0
    assert not DD(0.0)
    assert DD(-1.0).signum()==-1
    assert DD(0.0,-1e-40).signum()==-1

def test_immutable():
    x=DD(1.0)
    with pytest.raises(AttributeError):
        x.hi=2.0
    assert pickle.loads(pickle.dumps(DD.PI))==DD.PI

def test_random_round_trips():
    rng=np.random.RandomState(17)
    for x,xl,y,yl in rng.uniform(1,2,size=(100,4)):
        a=DD(x)+xl*1e-17
        b=DD(y)+yl*1e-17
        scale=max(a.double_value(),b.double_value())
        assert (a.add(b).subtract(b)-a).abs().double_value() <= 16*DD.EPS*scale
        assert (a.multiply(b).divide(b)-a).abs().double_value() <= 16*DD.EPS*scale

def test_hash_matches_numbers():
    assert hash(DD(1.0))==hash(1.0)
    assert hash(DD(3.0))==hash(3)
    lookup={1.0:'one',DD.PI:'pi'}
    assert lookup[DD(1.0)]=='one'
    assert lookup[DD(DD.PI.hi,DD.PI.lo)]=='pi'
    assert len({DD(2.0),2.0,2})==1
