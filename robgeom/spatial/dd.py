# Double-double ("DD") extended precision arithmetic.
#
# A value is carried as an unevaluated sum hi+lo of two doubles, with
# |lo| <= 0.5*ulp(hi), giving ~106 bits of mantissa.  The arithmetic is
# built from the error-free transformations below (Knuth/Dekker/Shewchuk),
# following Hida, Li & Bailey's double-double algorithms.
#
# There are no in-place operations: DD instances are immutable and every
# operation returns a new, renormalized value.
import math
import logging
from decimal import Decimal, localcontext

log=logging.getLogger('robgeom.dd')

# 2^27+1, the Dekker/Veltkamp split point for IEEE doubles
SPLITTER = 134217729.0

NaN=float('nan')

## Error-free transformations.  These are macros in Shewchuk's C code.

def fast_two_sum(a,b):
    """ x+y == a+b exactly, x=fl(a+b).  Requires |a|>=|b| """
    x = a + b
    bvirt = x - a
    y = b - bvirt
    return x,y

def two_sum(a,b):
    """ x+y == a+b exactly, x=fl(a+b).  No ordering requirement. """
    x = a + b
    bvirt = x - a
    avirt = x - bvirt
    bround = b - bvirt
    around = a - avirt
    return x, around + bround

def two_diff(a,b):
    x = a - b
    bvirt = a - x
    avirt = x + bvirt
    bround = bvirt - b
    around = a - avirt
    return x, around + bround

def split(a):
    """ split a into two halves of 26 bits each, a==ahi+alo """
    c = SPLITTER * a
    abig = c - a
    ahi = c - abig
    alo = a - ahi
    return ahi,alo

def two_product(a,b):
    """ x+y == a*b exactly, x=fl(a*b) """
    x = a * b
    ahi,alo = split(a)
    bhi,blo = split(b)
    err1 = x - (ahi * bhi)
    err2 = err1 - (alo * bhi)
    err3 = err2 - (ahi * blo)
    y = (alo * blo) - err3
    return x,y


def _hi_lo(y):
    if isinstance(y,DD):
        return y.hi,y.lo
    return float(y),0.0


class DD(object):
    """
    Immutable extended-precision number, value hi+lo.

    DD(x) or DD.value_of(x) gives lo=0.  Arithmetic methods accept
    either another DD or a plain number, and the usual operators are
    mapped onto them, so  (DD(x1)*y2 - DD(y1)*x2)  does what it looks like.

    NaN propagates through every operation, and dividing by a DD with a
    zero high component gives NaN rather than raising.
    """
    __slots__=('hi','lo')

    # smallest representable relative difference between two DD values, 2^-106
    EPS = 1.23259516440783e-32
    SPLIT = SPLITTER

    MAX_PRINT_DIGITS = 32

    def __init__(self,hi=0.0,lo=0.0):
        if isinstance(hi,DD):
            hi,lo=hi.hi,hi.lo
        object.__setattr__(self,'hi',float(hi))
        object.__setattr__(self,'lo',float(lo))

    def __setattr__(self,name,value):
        raise AttributeError("DD values are immutable")

    def __reduce__(self):
        return (DD,(self.hi,self.lo))

    @classmethod
    def value_of(cls,x):
        if isinstance(x,DD):
            return x
        return cls(x)

    @classmethod
    def parse(cls,s):
        """
        Parse a decimal string to the nearest DD.  Accepts anything
        decimal.Decimal does, including 'nan' and 'inf'.
        """
        with localcontext() as ctx:
            ctx.prec=40
            d=Decimal(s.strip())
            hi=float(d)
            if not math.isfinite(hi):
                return cls(hi)
            lo=float(d-Decimal(hi))
        return cls(hi,lo)

    @staticmethod
    def determinant(x1,y1,x2,y2):
        """
        Determinant of the 2x2 matrix [[x1,x2],[y1,y2]], i.e. x1*y2 - y1*x2.
        Entries may be floats or DDs.
        """
        x1=DD.value_of(x1)
        y1=DD.value_of(y1)
        return x1.multiply(y2).subtract(y1.multiply(x2))

    ## Arithmetic

    def add(self,y):
        if isinstance(y,DD):
            return self._add_hi_lo(y.hi,y.lo)
        return self._add_float(float(y))

    def _add_float(self,y):
        s,e=two_sum(self.hi,y)
        s,e=fast_two_sum(s,e+self.lo)
        return DD(*fast_two_sum(s,e))

    def _add_hi_lo(self,yhi,ylo):
        s,e=two_sum(self.hi,yhi)
        t,f=two_sum(self.lo,ylo)
        s,e=fast_two_sum(s,e+t)
        return DD(*fast_two_sum(s,e+f))

    def subtract(self,y):
        if self.is_nan():
            return self
        yhi,ylo=_hi_lo(y)
        if ylo==0.0:
            return self._add_float(-yhi)
        return self._add_hi_lo(-yhi,-ylo)

    def negate(self):
        if self.is_nan():
            return self
        return DD(-self.hi,-self.lo)

    def multiply(self,y):
        yhi,ylo=_hi_lo(y)
        if math.isnan(yhi):
            return DD.NaN
        return self._multiply_hi_lo(yhi,ylo)

    def _multiply_hi_lo(self,yhi,ylo):
        p,e=two_product(self.hi,yhi)
        e+=self.hi*ylo + self.lo*yhi
        return DD(*fast_two_sum(p,e))

    def divide(self,y):
        yhi,ylo=_hi_lo(y)
        return _divide(self.hi,self.lo,yhi,ylo)

    def reciprocal(self):
        return _divide(1.0,0.0,self.hi,self.lo)

    def sqr(self):
        return self._multiply_hi_lo(self.hi,self.lo)

    def sqrt(self):
        """
        Positive square root.  NaN for NaN or negative input.

        Karp's trick: if x ~ 1/sqrt(a) in double precision, then
          sqrt(a) ~ a*x + [a - (a*x)^2] * x / 2
        which is accurate to twice the precision of x.
        """
        if self.is_zero():
            return DD(0.0)
        if self.is_negative() or self.is_nan():
            return DD.NaN
        if math.isinf(self.hi):
            return self
        x=1.0/math.sqrt(self.hi)
        ax=DD(self.hi*x)
        diff=self.subtract(ax.sqr())
        return ax.add(diff.hi*(x*0.5))

    def pow(self,exp):
        """ integer power, by repeated squaring """
        exp=int(exp)
        if exp==0:
            return DD(1.0)
        r=self
        s=DD(1.0)
        n=abs(exp)
        if n>1:
            while n>0:
                if n%2==1:
                    s=s.multiply(r)
                n//=2
                if n>0:
                    r=r.sqr()
        else:
            s=r
        if exp<0:
            return s.reciprocal()
        return s

    def abs(self):
        if self.is_nan():
            return DD.NaN
        if self.is_negative():
            return self.negate()
        return self

    ## Rounding

    def floor(self):
        if self.is_nan() or math.isinf(self.hi):
            return self
        fhi=float(math.floor(self.hi))
        flo=0.0
        # hi already integral, so the fraction lives in lo
        if fhi==self.hi:
            flo=float(math.floor(self.lo))
        return DD(*fast_two_sum(fhi,flo))

    def ceil(self):
        if self.is_nan() or math.isinf(self.hi):
            return self
        fhi=float(math.ceil(self.hi))
        flo=0.0
        if fhi==self.hi:
            flo=float(math.ceil(self.lo))
        return DD(*fast_two_sum(fhi,flo))

    def trunc(self):
        """ integer part, rounding towards zero """
        if self.is_nan():
            return self
        if self.is_positive():
            return self.floor()
        return self.ceil()

    def rint(self):
        """ nearest integer, computed as floor(x+1/2) """
        if self.is_nan():
            return self
        return self.add(0.5).floor()

    def signum(self):
        """ -1, 0 or 1.  NaN gives 0. """
        if self.hi>0: return 1
        if self.hi<0: return -1
        if self.lo>0: return 1
        if self.lo<0: return -1
        return 0

    ## Predicates and ordering

    def is_zero(self):
        return self.hi==0.0 and self.lo==0.0
    def is_negative(self):
        return self.hi<0.0 or (self.hi==0.0 and self.lo<0.0)
    def is_positive(self):
        return self.hi>0.0 or (self.hi==0.0 and self.lo>0.0)
    def is_nan(self):
        return math.isnan(self.hi)

    def equals(self,y):
        yhi,ylo=_hi_lo(y)
        return self.hi==yhi and self.lo==ylo
    def gt(self,y):
        yhi,ylo=_hi_lo(y)
        return (self.hi>yhi) or (self.hi==yhi and self.lo>ylo)
    def ge(self,y):
        yhi,ylo=_hi_lo(y)
        return (self.hi>yhi) or (self.hi==yhi and self.lo>=ylo)
    def lt(self,y):
        yhi,ylo=_hi_lo(y)
        return (self.hi<yhi) or (self.hi==yhi and self.lo<ylo)
    def le(self,y):
        yhi,ylo=_hi_lo(y)
        return (self.hi<yhi) or (self.hi==yhi and self.lo<=ylo)

    def compare_to(self,y):
        yhi,ylo=_hi_lo(y)
        if self.hi<yhi: return -1
        if self.hi>yhi: return 1
        if self.lo<ylo: return -1
        if self.lo>ylo: return 1
        return 0

    def min(self,y):
        y=DD.value_of(y)
        return self if self.le(y) else y
    def max(self,y):
        y=DD.value_of(y)
        return self if self.ge(y) else y

    ## Conversion

    def double_value(self):
        return self.hi + self.lo

    def int_value(self):
        """
        truncated integer value.  NaN gives 0, infinities raise
        OverflowError as int() does.
        """
        if self.is_nan():
            return 0
        t=self.trunc()
        return int(t.hi) + int(t.lo)

    def dump(self):
        return "DD<%r, %r>"%(self.hi,self.lo)

    def to_decimal(self):
        """ exact value as a decimal.Decimal """
        if not math.isfinite(self.hi):
            return Decimal(self.hi)
        with localcontext() as ctx:
            ctx.prec=1100 # ample to hold any sum of two doubles exactly
            return Decimal(self.hi)+Decimal(self.lo)

    def __repr__(self):
        return "DD(%r, %r)"%(self.hi,self.lo)

    def __str__(self):
        if not math.isfinite(self.hi):
            return str(self.hi)
        if self.is_zero():
            return "0.0"
        with localcontext() as ctx:
            ctx.prec=self.MAX_PRINT_DIGITS
            d=+self.to_decimal()
        exp=d.adjusted()
        if -3<=exp<=20:
            s=format(d,'f')
            if '.' not in s:
                s+='.0'
            return s
        return format(d,'E')

    def __float__(self):
        return self.double_value()
    def __int__(self):
        return self.int_value()
    def __bool__(self):
        return not self.is_zero()

    # operators
    __add__=add
    __sub__=subtract
    __mul__=multiply
    __truediv__=divide
    __neg__=negate
    __abs__=abs

    def __radd__(self,y):
        return DD.value_of(y).add(self)
    def __rsub__(self,y):
        return DD.value_of(y).subtract(self)
    def __rmul__(self,y):
        return DD.value_of(y).multiply(self)
    def __rtruediv__(self,y):
        return DD.value_of(y).divide(self)
    def __pos__(self):
        return self

    def __eq__(self,y):
        if not isinstance(y,(DD,int,float)):
            return NotImplemented
        return self.equals(y)
    def __ne__(self,y):
        if not isinstance(y,(DD,int,float)):
            return NotImplemented
        return not self.equals(y)
    def __lt__(self,y):
        return self.lt(y)
    def __le__(self,y):
        return self.le(y)
    def __gt__(self,y):
        return self.gt(y)
    def __ge__(self,y):
        return self.ge(y)
    def __hash__(self):
        # consistent with __eq__ against plain numbers
        if self.lo==0.0:
            return hash(self.hi)
        return hash((self.hi,self.lo))


def _divide(xhi,xlo,yhi,ylo):
    """
    (xhi+xlo)/(yhi+ylo): a double precision quotient plus one
    correction step for the remainder.
    """
    if yhi==0.0 or math.isnan(yhi) or math.isnan(xhi):
        return DD.NaN
    cc=xhi/yhi
    uu,u=two_product(cc,yhi)
    c=((((xhi - uu) - u) + xlo) - cc*ylo)/yhi
    z=cc+c
    return DD(z,(cc-z)+c)


DD.NaN=DD(NaN,NaN)
DD.PI=DD(3.141592653589793116e+00, 1.224646799147353207e-16)
DD.TWO_PI=DD(6.283185307179586232e+00, 2.449293598294706414e-16)
DD.PI_2=DD(1.570796326794896558e+00, 6.123233995736766036e-17)
DD.E=DD(2.718281828459045091e+00, 1.445646891729250158e-16)
