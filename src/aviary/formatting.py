## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import itertools

from .types import Var, Pinned, Curried, Composition, LambdaForm
from .errors import ArityError
from .operators import pin
from .validating import label_of


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def format_term(form: LambdaForm) -> str:
    """Render a lambda body in composition notation, e.g. `a ∘ (b ∘ c)` for `λabc.a(bc)`."""
    def _fmt(term, nested=False):
        if isinstance(term, Var): return term.name
        text = ' ∘ '.join(_fmt(t, nested=True) for t in term.terms)
        return f"({text})" if nested else text
    return _fmt(form.body)


def format_call(inv, args=None) -> str:
    """Render an invocable applied to placeholders `x0, x1, …` as nested calls of its leaves."""
    if args is None:
        args = [f"x{i}" for i in range(inv.arity)]
    if isinstance(inv, Composition):
        slot, end = inv.slot, inv.slot + inv.inner.arity
        return format_call(inv.outer, [*args[:slot], format_call(inv.inner, args[slot:end]), *args[end:]])
    if isinstance(inv, Curried):
        return format_call(inv.inner, [*args[:inv.index], repr(inv.value), *args[inv.index:]])
    return f"{label_of(inv)}({', '.join(args)})"


## INTERPRETATIONS
def placeholder(name: str):
    """Variadic stand-in callable labelled `name`; its call shape must always be pinned."""
    def fn(*args): return None
    fn.__name__ = fn.__qualname__ = name
    return fn


def build_reading(combinator, shapes: dict):
    """Link `combinator` over placeholders, one per parameter, using the requested `shapes`."""
    params = combinator.form.params
    result = combinator(*(placeholder(p) for p in params), shapes=shapes)
    if not isinstance(result, (Pinned, Curried, Composition)):
        # Body is a single variable, bound to the raw placeholder.
        name = combinator.form.body.name
        arity = shapes.get(name, 1)
        result = pin(result, arity if isinstance(arity, int) else arity[0])
    return result


def _is_saturated(inv, heads: set) -> bool:
    # Only the top node's `head_open` is current; nodes along the outer chain keep earlier counts.
    if not isinstance(inv, Composition):
        return True
    if inv.head_open != 0:
        return False
    while isinstance(inv, Composition):
        if not _is_saturated(inv.inner, heads):
            return False
        inv = inv.outer
    heads.add(label_of(inv))
    return True

def _leaves(inv):
    if isinstance(inv, Composition):
        yield from _leaves(inv.outer)
        yield from _leaves(inv.inner)
    else:
        yield inv


def interpretations(combinator, max_arity: int = 3) -> list[tuple[dict, str]]:
    """Enumerate the distinct nested-call readings of a combinator.

    Every parameter is given one arity in `1..max_arity`; a reading is kept only when each callable
    receiving composed children is saturated, and each parameter never receiving any is unary.
    Returns `(arities, text)` pairs in enumeration order, without duplicate texts.
    """
    params = combinator.form.params
    readings, seen = [], set()

    for arities in itertools.product(range(1, max_arity + 1), repeat=len(params)):
        shapes = dict(zip(params, arities))
        try:
            result = build_reading(combinator, shapes)
        except ArityError:
            continue

        heads = set()
        if not _is_saturated(result, heads): continue
        if any(leaf.arity != 1 for leaf in _leaves(result) if label_of(leaf) not in heads): continue

        text = format_call(result)
        if text not in seen:
            seen.add(text)
            readings.append((shapes, text))
    return readings
