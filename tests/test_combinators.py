## aviary — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import math

import pytest

import aviary.api as A
from aviary.types import Overloaded
from aviary.operators import pin
from aviary.combinators import Combinator
from aviary.errors import ArityError


U8 = range(256)
STRIDED = range(0, 256, 15)


def u8(x: int) -> int: return int(x) & 0xFF


## SCENARIOS
def test_bluebird_truncate_sqrt_widen():
    def a(x: float) -> int: return int(x) & 0xFF
    def b(x: float) -> float: return math.sqrt(x)
    def c(x: int) -> float: return float(x)
    fn = A.B(a, b, c)
    for x in U8:
        assert fn(x) == a(b(c(x)))

def test_thrush_square_then_root():
    def a(x: int) -> int: return x * x
    def b(x: int) -> float: return math.sqrt(x)
    fn = A.T(a, b)
    for x in U8:
        assert fn(x) == b(a(x))


## LAWS
def test_identity_returns_argument():
    def a(x: int) -> int: return u8(x * 7)
    assert A.I(a) is a
    for x in U8:
        assert A.I(a)(x) == a(x)

def test_mockingbird_self_application():
    def a(x: int) -> int: return u8(x * 3 + 1)
    fn = A.M(a)
    for x in U8:
        assert fn(x) == a(a(x))

def test_warbler_duplicates_argument():
    def a(x: int, y: int) -> int: return u8(x * 5 + y)
    def b(x: int) -> int: return u8(x ^ 0x5A)
    fn = A.W(a, b)
    for x in STRIDED:
        for y in STRIDED:
            assert fn(x, y) == a(b(x), b(y))
    unary = A.W(lambda x: u8(x + 9), b)
    for x in U8:
        assert unary(x) == u8(b(b(x)) + 9)

def test_cardinal_swaps_order():
    def a(x: int, y: int) -> int: return u8(x - y)
    def b(x: int) -> int: return u8(x + 7)
    def c(x: int) -> int: return u8(x * 11)
    fn = A.C(a, b, c)
    for x in STRIDED:
        for y in STRIDED:
            assert fn(x, y) == a(c(x), b(y))


## CATALOG-WIDE
def _tag(p):
    def fn(s: str) -> str: return s + p
    fn.__name__ = p
    return fn

@pytest.mark.parametrize("entry", [e for e in A.catalog if isinstance(e, Combinator)], ids=lambda e: e.ascii_name)
def test_unary_reading_follows_occurrences(entry):
    """With only unary callables, every grouping reduces to one chain in body order."""
    fn = entry(*(_tag(p) for p in entry.form.params))
    assert fn('') == ''.join(reversed(entry.form.occurrences()))

@pytest.mark.parametrize("entry", [e for e in A.catalog if isinstance(e, Combinator)], ids=lambda e: e.ascii_name)
def test_wrong_number_of_callables(entry):
    with pytest.raises(ArityError):
        entry(*([_tag('x')] * (entry.arity + 1)))


def sym(name, arity):
    def fn(*args):
        assert len(args) == arity
        return f"{name}({', '.join(args)})"
    return pin(fn, arity, label=name)

READINGS = [
    ('B',   {'a': 2},                   'a(b(c(x0)), x1)'),
    ('B1',  {'b': 2},                   'a(b(c(x0), d(x1)))'),
    ('B2',  {'b': 3},                   'a(b(c(x0), d(x1), e(x2)))'),
    ('C',   {'a': 2},                   'a(c(x0), b(x1))'),
    ('D',   {'a': 2},                   'a(b(x0), c(d(x1)))'),
    ('D1',  {'a': 3},                   'a(b(x0), c(x1), d(e(x2)))'),
    ('D2',  {'a': 2},                   'a(b(c(x0)), d(e(x1)))'),
    ('E',   {'a': 2, 'c': 2},           'a(b(x0), c(d(x1), e(x2)))'),
    ('E_hat', {'a': 2, 'b': 2, 'e': 2}, 'a(b(c(x0), d(x1)), e(f(x2), g(x3)))'),
    ('F',   {'c': 2},                   'c(b(x0), a(x1))'),
    ('G',   {'a': 2},                   'a(d(x0), b(c(x1)))'),
    ('H',   {'b': 2},                   'a(b(c(x0), b(x1, x2)))'),
    ('R',   {'b': 2},                   'b(c(x0), a(x1))'),
    ('S',   {'a': 2},                   'a(c(x0), b(c(x1)))'),
    ('U',   {'a': 2},                   'b(a(a(x0, x1), b(x2)))'),
    ('V',   {'c': 2},                   'c(a(x0), b(x1))'),
    ('W',   {'a': 2},                   'a(b(x0), b(x1))'),
    ('W1',  {'b': 2},                   'b(a(x0), a(x1))'),
    ('W_star', {'a': 2},                'a(b(x0), c(c(x1)))'),
    ('C_star', {'a': 3},                'a(b(x0), d(x1), c(x2))'),
    ('R_star', {'a': 3},                'a(c(x0), d(x1), b(x2))'),
    ('F_star', {'a': 3},                'a(d(x0), c(x1), b(x2))'),
    ('V_star', {'a': 3},                'a(c(x0), b(x1), d(x2))'),
    ('I_star_star', {'a': 2},           'a(b(x0), c(x1))'),
    ('W_star_star', {'a': 3},           'a(b(x0), c(x1), d(d(x2)))'),
    ('C_star_star', {'a': 4},           'a(b(x0), c(x1), e(x2), d(x3))'),
    ('R_star_star', {'a': 4},           'a(b(x0), d(x1), e(x2), c(x3))'),
    ('F_star_star', {'a': 4},           'a(b(x0), e(x1), d(x2), c(x3))'),
    ('V_star_star', {'a': 4},           'a(b(x0), e(x1), c(x2), d(x3))'),
]

@pytest.mark.parametrize("name, arities, expected", READINGS)
def test_multi_argument_reading(name, arities, expected):
    entry = A.lookup(name)
    fns = [sym(p, arities.get(p, 1)) for p in entry.form.params]
    fn = entry(*fns)
    assert fn.arity == expected.count('x')
    assert fn(*(f"x{i}" for i in range(fn.arity))) == expected

def test_jay_overloaded_head():
    a = Overloaded({1: sym('a', 1), 2: sym('a', 2)}, name='a')
    fn = A.J(a, sym('b', 1), sym('c', 1), sym('d', 1), shapes={'a': (2, 1)})
    assert fn('x', 'y') == 'a(b(x), a(d(c(y))))'

def test_double_mockingbird_overloaded_head():
    a = Overloaded({1: sym('a', 1), 2: sym('a', 2)}, name='a')
    fn = A.M2(a, sym('b', 1), shapes={'a': (2, 1)})
    assert fn('x', 'y') == 'a(b(x), a(b(y)))'

def test_u8_domain_for_starling():
    def a(x: int, y: int) -> int: return u8(x * y + 3)
    def b(x: int) -> int: return u8(x + 100)
    def c(x: int) -> int: return u8(x * 13)
    fn = A.S(a, b, c)
    for x in STRIDED:
        for y in STRIDED:
            assert fn(x, y) == a(c(x), b(c(y)))

def test_kestrel_and_kite_ignore_argument():
    def a(x: int) -> int: return u8(x + 1)
    def b(x: int) -> int: return u8(x * 2)
    assert A.K(a, b) is a
    assert A.KI(a, b) is b


## SELF-APPLICATION
def test_combinators_as_arguments():
    def inc(x: int) -> int: return x + 1
    assert A.M(A.M)(inc)(0) == 4
    assert A.B(A.M, A.I, A.I)(inc)(0) == 2
    assert A.M(A.M(inc))(0) == 4
    assert pin(A.C).arity == 3
