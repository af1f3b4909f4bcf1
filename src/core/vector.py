# core/vector.py
import math
from numbers import Real

def _div(a: float, b: float) -> float:
    """Float division with IEEE results for a zero divisor (inf or nan)."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b

class Vector3:
    """
    A 3D vector used for points, directions and colors (r=x, g=y, b=z).

    Binary operators always return a new vector. The in-place operators
    (+=, -=, *=, /=) update the receiver and are meant for accumulating into
    a local that nothing else references. Division by zero follows IEEE
    rules and yields inf or nan components instead of raising.
    """
    __slots__ = ("x", "y", "z")

    # numpy scalars on the left defer to __rmul__ / __rtruediv__
    __array_ufunc__ = None

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, Real):
            t = float(other)
            return Vector3(self.x * t, self.y * t, self.z * t)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, Real):
            t = float(other)
            return Vector3(_div(self.x, t), _div(self.y, t), _div(self.z, t))
        return Vector3(_div(self.x, other.x), _div(self.y, other.y), _div(self.z, other.z))

    def __rtruediv__(self, other: float) -> "Vector3":
        t = float(other)
        return Vector3(_div(t, self.x), _div(t, self.y), _div(t, self.z))

    def __iadd__(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: "Vector3") -> "Vector3":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, other) -> "Vector3":
        if isinstance(other, Real):
            t = float(other)
            self.x *= t
            self.y *= t
            self.z *= t
        else:
            self.x *= other.x
            self.y *= other.y
            self.z *= other.z
        return self

    def __itruediv__(self, other) -> "Vector3":
        if isinstance(other, Real):
            t = float(other)
            self.x = _div(self.x, t)
            self.y = _div(self.y, t)
            self.z = _div(self.z, t)
        else:
            self.x = _div(self.x, other.x)
            self.y = _div(self.y, other.y)
            self.z = _div(self.z, other.z)
        return self

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector3":
        # A zero vector comes back as all nan.
        return self / self.length()

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"

Color = Vector3
Point3 = Vector3

def dot(u: Vector3, v: Vector3) -> float:
    return u.dot(v)

def unit_vector(v: Vector3) -> Vector3:
    """
    Returns v scaled to length 1.
    """
    return v.normalize()
