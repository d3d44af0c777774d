## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# aviary — Classical combinator birds, built from arity-checked function composition.
#

import logging
from typing import Any, Callable

from .types import Pinned, Curried, Composition, Overloaded
from .errors import ArityError
from .validating import resolve_shape, check_link, check_value, label_of


logger = logging.getLogger(__name__)

Invocable = Pinned | Curried | Composition


## SHAPE SELECTION
def pin(fn: Callable, arity: int | None = None, *, label: str | None = None) -> Invocable:
    """Select one call shape of `fn`, returning a single-shape invocable.

    Values that already have a single shape are returned unchanged when `arity` agrees.  Raises
    `AmbiguousArityError` if `fn` accepts several shapes and none was requested.
    """
    if isinstance(fn, (Curried, Composition)):
        if arity is not None and arity != fn.arity:
            raise ArityError(f"`{label_of(fn)}` takes exactly {fn.arity} argument(s), cannot pin to {arity}.",
                             aviary_op='pin', aviary_token=label_of(fn))
        return fn
    if isinstance(fn, Pinned):
        if arity is not None and arity != fn.arity:
            raise ArityError(f"`{fn.label}` is pinned to {fn.arity} argument(s), cannot pin to {arity}.",
                             aviary_op='pin', aviary_token=fn.label)
        return fn if label is None else fn._replace(label=label)

    label = label or label_of(fn)
    arity, inputs, output = resolve_shape(fn, arity, name=label)
    if isinstance(fn, Overloaded):
        fn = fn.shapes[arity]
    return Pinned(fn, arity, tuple(inputs), output, label)


## COMPOSITION
def compose(outer: Callable, inner: Callable) -> Composition:
    """Feed the single result of `inner` into one parameter of `outer`.

    The receiving parameter follows left-associative application: while the leftmost callable of
    `outer` has unfilled parameters, `inner` takes the first of them; once it is saturated, `inner`
    is composed into the most recently filled child instead.  Raises `ArityError` when no parameter
    is left, and `SignatureTypeError` when declared types disagree; a successful return is callable.
    """
    outer, inner = pin(outer), pin(inner)

    if outer.head_open > 0:
        slot = outer.arity - outer.head_open
        _, outer_inputs, _ = resolve_shape(outer)
        _, _, inner_output = resolve_shape(inner)
        check_link(inner_output, outer_inputs[slot], inner=label_of(inner), outer=label_of(outer), position=slot)
        logger.debug("compose %s ← %s at parameter %d", label_of(outer), label_of(inner), slot)
        return Composition(outer, inner, slot, outer.arity - 1 + inner.arity, outer.head_open - 1)

    if isinstance(outer, Composition):
        # Head is saturated: rebuild the path down to the last filled child.
        nested = compose(outer.inner, inner)
        return Composition(outer.outer, nested, outer.slot, outer.arity - 1 + inner.arity, 0)

    raise ArityError(f"`{label_of(outer)}` has no parameter left to receive the result of `{label_of(inner)}`.",
                     aviary_op='compose', aviary_token=label_of(outer))


## CURRYING
def curry(fn: Callable, value: Any, arity: int | None = None) -> Invocable:
    """Bind `value` as the final argument of `fn`, returning an invocable over the rest."""
    fn = pin(fn, arity)
    if fn.arity == 0:
        raise ArityError(f"`{label_of(fn)}` takes no arguments, cannot bind {value!r}.",
                         aviary_op='curry', aviary_token=label_of(fn))

    return _bind(fn, fn.arity - 1, value)

def _bind(fn: Invocable, position: int, value: Any) -> Invocable:
    # Parameters of a composition are outer[:slot] + inner + outer[slot+1:]; route by position.
    if isinstance(fn, Composition):
        slot, width = fn.slot, fn.inner.arity
        head_open = fn.head_open - 1 if position >= fn.arity - fn.head_open else fn.head_open
        if position < slot:
            return Composition(_bind(fn.outer, position, value), fn.inner, slot - 1, fn.arity - 1, head_open)
        if position < slot + width:
            return Composition(fn.outer, _bind(fn.inner, position - slot, value), slot, fn.arity - 1, head_open)
        return Composition(_bind(fn.outer, position - width + 1, value), fn.inner, slot, fn.arity - 1, head_open)

    _, inputs, _ = resolve_shape(fn)
    check_value(value, inputs[position], target=label_of(fn), position=position)
    logger.debug("curry %s with %r at parameter %d", label_of(fn), value, position)
    return Curried(fn, value, fn.arity - 1, position)
