## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import logging
import itertools
from typing import Any, Callable, NoReturn

from .types import LambdaForm
from .errors import Escape
from .parser import parse
from .linker import link_body, bind_arguments
from .validating import resolve_shape, single_shape_meta, label_of


logger = logging.getLogger(__name__)


class Combinator:
    """A named lambda form that wires caller-supplied callables into one composition.

    Calling the combinator with one callable per lambda parameter returns the composed callable;
    `shapes` selects the arity of parameters that accept several, either one arity for all their
    occurrences or a sequence with one entry per occurrence in body order.
    """

    def __init__(self, symbol: str, name: str, source: str, *, ascii_name: str | None = None):
        self.symbol = symbol
        self.name = name
        self.ascii_name = ascii_name or symbol
        self.form: LambdaForm = parse(source)

    @property
    def source(self) -> str:
        return self.form.source

    @property
    def arity(self) -> int:
        return len(self.form.params)

    def __call__(self, *fns: Callable, shapes=None):
        bindings = bind_arguments(self.form, fns, name=self.symbol)
        result = link_body(self.form, bindings, shapes)
        logger.debug("%s(%s) built %r", self.symbol, ', '.join(label_of(fn) for fn in fns), result)
        return result

    @property
    def __aviary_meta__(self) -> dict:
        return single_shape_meta(self.arity, [Any] * self.arity, Any)

    @property
    def __aviary_label__(self) -> str:
        return self.symbol

    def __repr__(self):
        return f"<Combinator {self.symbol} = {self.name} {self.source}>"


class SpecialForm:
    """Catalog entry for forms not expressible as a finite composition: Y, Θ and Ω."""

    def __init__(self, symbol: str, name: str, source: str, builder: Callable, *, ascii_name: str | None = None, returns: str = ''):
        self.symbol = symbol
        self.name = name
        self.source = source
        self.returns = returns
        self.ascii_name = ascii_name or symbol
        self._builder = builder
        self.arity = resolve_shape(builder)[0]

    def __call__(self, *args):
        return self._builder(*args)

    @property
    def __aviary_meta__(self) -> dict:
        return single_shape_meta(self.arity, [Any] * self.arity, Any)

    @property
    def __aviary_label__(self) -> str:
        return self.symbol

    def __repr__(self):
        return f"<SpecialForm {self.symbol} = {self.name} {self.source}>"


## FIXED POINTS
class Trajectory:
    """Lazy, infinite and non-restartable sequence `x1, x2, …` where `x(n+1) = a(x(n))`.

    Iteration only ends when `a` raises `Escape`; the signal is then kept in `.escape` and the
    trajectory stays exhausted.  Any other exception propagates unchanged.
    """

    def __init__(self, fn: Callable, seed: Any):
        self._fn = fn
        self._value = seed
        self._done = False
        self.steps = 0
        self.escape: Escape | None = None

    def __iter__(self):
        return self

    def __next__(self):
        if self._done:
            raise StopIteration
        try:
            self._value = self._fn(self._value)
        except Escape as signal:
            self._done, self.escape = True, signal
            logger.debug("trajectory escaped after %d step(s) with %r", self.steps, signal.value)
            raise StopIteration
        self.steps += 1
        return self._value


class FixedPoint:
    """Unbounded self-application `a(a(a(…)))` threaded through a seed value.

    Invoking it never returns: the loop only stops when `a` raises (conventionally `Escape`), and
    that exception reaches the caller as-is.  No timeout or cancellation exists beyond that.
    """

    def __init__(self, fn: Callable, symbol: str = 'Y'):
        resolve_shape(fn, 1, name=label_of(fn))
        self.fn = fn
        self.symbol = symbol

    def __call__(self, seed: Any) -> NoReturn:
        logger.debug("%s(%s) started from %r", self.symbol, label_of(self.fn), seed)
        fn, value = self.fn, seed
        while True:
            value = fn(value)

    def iterate(self, seed: Any) -> Trajectory:
        return Trajectory(self.fn, seed)

    @property
    def __aviary_meta__(self) -> dict:
        return single_shape_meta(1, [Any], NoReturn)

    @property
    def __aviary_label__(self) -> str:
        return f"{self.symbol}({label_of(self.fn)})"

    def __repr__(self):
        return f"<FixedPoint {self.symbol}({label_of(self.fn)})>"


class Omega:
    """Zero-argument loop that never consumes input and never returns."""

    def __call__(self) -> NoReturn:
        while True:
            pass

    def iterate(self):
        return itertools.repeat(None)

    @property
    def __aviary_meta__(self) -> dict:
        return single_shape_meta(0, [], NoReturn)

    @property
    def __aviary_label__(self) -> str:
        return 'Ω'

    def __repr__(self):
        return "<Omega>"


def fix_y(a: Callable) -> FixedPoint:
    """Y = Why Bird, λa.a(λa): returns a ∘ a ∘ a ∘ …"""
    return FixedPoint(a, symbol='Y')

def fix_theta(a: Callable) -> FixedPoint:
    """Θ = Theta, (λab.b(aab))(λab.b(aab)) i.e. λa.a(Θa): returns a ∘ a ∘ a ∘ …"""
    return FixedPoint(a, symbol='Θ')

def omega() -> Omega:
    """Ω = Omega: returns an infinite loop closure."""
    return Omega()
