"""
GF(2^8) Arithmetic
Finite field math over 256 elements, the ground field for byte-wise sharing.

The field is defined by the AES polynomial x^8 + x^4 + x^3 + x + 1 (0x11B).
Addition is XOR. Multiplication and division go through discrete log
tables built once at import from the generator 0x03.

Every secret byte becomes the constant term of its own random polynomial,
so a secret of any length is shared one byte at a time.
"""

from ssss.entropy import RandomSource, default_source

# Irreducible polynomial and a primitive element for it
POLYNOMIAL = 0x11B
GENERATOR = 0x03
ORDER = 255  # size of the multiplicative group


def _mul_generator(x: int) -> int:
    """Multiply x by 0x03 without tables (x * 2 + x)."""
    doubled = x << 1
    if doubled & 0x100:
        doubled ^= POLYNOMIAL
    return doubled ^ x


def _build_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    exp = [0] * (ORDER * 2)
    log = [0] * 256
    x = 1
    for i in range(ORDER):
        exp[i] = x
        log[x] = i
        x = _mul_generator(x)
    # Second copy so LOG[a] + LOG[b] can index directly
    for i in range(ORDER, ORDER * 2):
        exp[i] = exp[i - ORDER]
    return tuple(exp), tuple(log)


EXP, LOG = _build_tables()


def add(a: int, b: int) -> int:
    """Field addition (XOR)."""
    return a ^ b


def sub(a: int, b: int) -> int:
    """Field subtraction. Identical to addition in characteristic 2."""
    return a ^ b


def mul(a: int, b: int) -> int:
    """Field multiplication via log/exp lookup."""
    if a == 0 or b == 0:
        return 0
    return EXP[LOG[a] + LOG[b]]


def div(a: int, b: int) -> int:
    """
    Field division a / b.

    ``b`` must be non-zero. This is not checked: callers only divide by
    differences of distinct share indices.
    """
    return mul(a, EXP[ORDER - LOG[b]])


def degree(poly) -> int:
    """Index of the highest non-zero coefficient above the constant term."""
    for i in range(len(poly) - 1, 0, -1):
        if poly[i] != 0:
            return i
    return 0


def eval_poly(poly, x: int) -> int:
    """Evaluate ``poly`` (constant term first) at ``x`` using Horner's method."""
    result = 0
    for coeff in reversed(poly):
        result = add(mul(result, x), coeff)
    return result


def generate_coefficients(
    count: int, constant_term: int, rng: RandomSource | None = None
) -> list[int]:
    """
    Build a random polynomial whose value at x=0 is ``constant_term``.

    Draws ``count`` random bytes and redraws until the top coefficient is
    non-zero, so the polynomial has degree exactly ``count - 1``. A
    lower-degree polynomial would let fewer than ``count`` shares recover
    the constant term. There is no retry cap: each draw fails with
    probability 1/256.

    Args:
        count: Number of coefficients (the sharing threshold), at least 1.
        constant_term: The secret byte placed at coefficient 0.
        rng: Random source. Defaults to the system CSPRNG.

    Returns:
        List of ``count`` field elements, constant term first.
    """
    if count < 1:
        raise ValueError("A polynomial needs at least one coefficient")

    source = default_source(rng)
    while True:
        poly = list(source.random_bytes(count))
        if degree(poly) == count - 1:
            break
    poly[0] = constant_term
    return poly


def interpolate(points) -> int:
    """
    Lagrange interpolation at x=0.

    Args:
        points: Sequence of ``(x, y)`` field element pairs with distinct x.

    Returns:
        The value at x=0 of the unique polynomial through the points.
    """
    x = 0
    y = 0
    for i, (x_i, y_i) in enumerate(points):
        basis = 1
        for j, (x_j, _) in enumerate(points):
            if i == j:
                continue
            basis = mul(basis, div(sub(x, x_j), sub(x_i, x_j)))
        y = add(y, mul(basis, y_i))
    return y
