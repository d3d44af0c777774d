## aviary — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Callable
from collections import namedtuple
from dataclasses import dataclass

from .validating import resolve_shape, single_shape_meta, label_of


class _Composable:
    """Method-call spelling of the engine operations, `a.compose(b)` and `a.curry(x)`."""
    __slots__ = ()

    def compose(self, inner):
        from .operators import compose
        return compose(self, inner)

    def curry(self, value):
        from .operators import curry
        return curry(self, value)


# Leaf callable with exactly one selected call shape.  Tuples keep it small and immutable.
class Pinned(namedtuple('Pinned', ['fn', 'arity', 'inputs', 'output', 'label']), _Composable):
    __slots__ = ()

    def __call__(self, *args):
        return self.fn(*args)

    @property
    def head_open(self) -> int:
        return self.arity

    @property
    def __aviary_meta__(self) -> dict:
        return single_shape_meta(self.arity, self.inputs, self.output)

    @property
    def __aviary_label__(self) -> str:
        return self.label

    def __repr__(self):
        return f"<Pinned {self.label}/{self.arity}>"


class Curried(namedtuple('Curried', ['inner', 'value', 'arity', 'index']), _Composable):
    """Leaf callable with parameter `index` of `inner` bound to `value`."""
    __slots__ = ()

    def __call__(self, *args):
        return self.inner(*args[:self.index], self.value, *args[self.index:])

    @property
    def head_open(self) -> int:
        return self.arity

    @property
    def __aviary_meta__(self) -> dict:
        _, inputs, output = resolve_shape(self.inner)
        return single_shape_meta(self.arity, inputs[:self.index] + inputs[self.index+1:], output)

    @property
    def __aviary_label__(self) -> str:
        return label_of(self.inner)

    def __repr__(self):
        return f"<Curried {label_of(self.inner)}[{self.index}]={self.value!r}>"


class Composition(namedtuple('Composition', ['outer', 'inner', 'slot', 'arity', 'head_open']), _Composable):
    """Result of `compose(outer, inner)`: the output of `inner` feeds parameter `slot` of `outer`.

    The parameters of a composition are those of `outer` with position `slot` replaced by all the
    parameters of `inner`.  `head_open` counts the parameters of the leftmost callable that are
    still unfilled; together with `slot` it fixes the whole call structure at construction time.
    """
    __slots__ = ()

    def __call__(self, *args):
        slot, end = self.slot, self.slot + self.inner.arity
        return self.outer(*args[:slot], self.inner(*args[slot:end]), *args[end:])

    @property
    def __aviary_meta__(self) -> dict:
        _, outer_inputs, output = resolve_shape(self.outer)
        _, inner_inputs, _ = resolve_shape(self.inner)
        inputs = outer_inputs[:self.slot] + inner_inputs + outer_inputs[self.slot+1:]
        return single_shape_meta(self.arity, inputs, output)

    @property
    def __aviary_label__(self) -> str:
        return label_of(self.outer)

    def __repr__(self):
        from .formatting import format_call
        return f"<Composition {format_call(self)}>"


class Overloaded:
    """One value callable with several argument counts, each backed by its own implementation.

    Calling it directly dispatches on the number of arguments; inside compositions one shape must
    be selected explicitly with `pin` or a combinator's `shapes=` keyword.
    """

    def __init__(self, shapes: dict[int, Callable], name: str | None = None):
        self.shapes = dict(sorted(shapes.items()))
        self.name = name or '|'.join(label_of(fn) for fn in self.shapes.values())
        for arity, fn in self.shapes.items():
            resolve_shape(fn, arity, name=self.name)

    def __call__(self, *args):
        if (fn := self.shapes.get(len(args))) is None:
            raise TypeError(f"{self.name}() takes {' or '.join(map(str, self.shapes))} arguments, got {len(args)}.")
        return fn(*args)

    @property
    def __aviary_meta__(self) -> dict:
        arities = tuple(self.shapes)
        return {'arities': arities, 'minimum': arities[0], 'inputs': [], 'variadic': None,
                'output': Any, 'shapes': self.shapes}

    @property
    def __aviary_label__(self) -> str:
        return self.name

    def __repr__(self):
        return f"<Overloaded {self.name}/{','.join(map(str, self.shapes))}>"


# Parsed lambda definitions, e.g. `λabc.a(bc)` → params ('a', 'b', 'c') and
# body Apply((Var('a'), Apply((Var('b'), Var('c'))))).
@dataclass(frozen=True)
class Var:
    name: str

@dataclass(frozen=True)
class Apply:
    terms: tuple                  # tuple[Var | Apply, ...], at least two entries

@dataclass(frozen=True)
class LambdaForm:
    params: tuple[str, ...]
    body: Var | Apply
    source: str

    def occurrences(self) -> list[str]:
        """Parameter names in the order they appear in the body, repeats included."""
        def _walk(term):
            if isinstance(term, Var): yield term.name
            else:
                for t in term.terms: yield from _walk(t)
        return list(_walk(self.body))
