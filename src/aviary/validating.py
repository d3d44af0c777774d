## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# aviary — Classical combinator birds, built from arity-checked function composition.
#

import inspect
from types import UnionType, GenericAlias
from typing import Any, NoReturn, TypeVar, Callable, get_args

from .errors import ArityError, ArityUnknownError, AmbiguousArityError, SignatureTypeError


_P = inspect.Parameter
_NUMERIC_PROMOTIONS = {float: (int,), complex: (int, float)}


def label_of(fn: Any) -> str:
    if (label := getattr(fn, '__aviary_label__', None)) is not None: return label
    return getattr(fn, '__name__', None) or type(fn).__name__

def _normalize_expected_type(tp):
    if tp is _P.empty or tp is Any: return Any
    if isinstance(tp, TypeVar): return tp
    if isinstance(tp, GenericAlias): return 'UNK'
    if isinstance(tp, UnionType) and any(isinstance(a, GenericAlias) for a in get_args(tp)): return 'UNK'
    return tp if isinstance(tp, (type, tuple, UnionType)) else 'UNK'

def get_call_shapes(fn: Callable) -> dict:
    """Describe which positional call shapes a callable accepts.

    Values built by this library carry their metadata in `__aviary_meta__`; anything else is
    introspected once through `inspect.signature`.  The resulting dict holds:

        arities:  tuple of accepted argument counts, or None when unbounded (var-positional).
        minimum:  number of required positional parameters.
        inputs:   declared input types in parameter order, `Any` where not annotated.
        variadic: declared type of the var-positional parameter, or None.
        output:   declared output type.
    """
    if (meta := getattr(fn, '__aviary_meta__', None)) is not None:
        return meta
    if not callable(fn):
        raise ArityError(f"Value `{fn!r}` of type {type(fn).__name__} is not callable.", aviary_token=repr(fn))

    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError) as exc:
        raise ArityUnknownError(f"Cannot read the signature of `{label_of(fn)}`; pin its arity explicitly.",
                                aviary_token=label_of(fn)) from exc

    params = list(sig.parameters.values())
    if any(p.kind == _P.KEYWORD_ONLY and p.default is _P.empty for p in params):
        raise ArityError(f"`{label_of(fn)}` requires keyword-only arguments and cannot be composed positionally.",
                         aviary_token=label_of(fn))

    positional = [p for p in params if p.kind in (_P.POSITIONAL_ONLY, _P.POSITIONAL_OR_KEYWORD)]
    variadic = next((p for p in params if p.kind == _P.VAR_POSITIONAL), None)
    minimum = sum(1 for p in positional if p.default is _P.empty)

    return {
        'arities': None if variadic is not None else tuple(range(minimum, len(positional) + 1)),
        'minimum': minimum,
        'inputs': [_normalize_expected_type(p.annotation) for p in positional],
        'variadic': None if variadic is None else _normalize_expected_type(variadic.annotation),
        'output': _normalize_expected_type(sig.return_annotation),
    }

def single_shape_meta(arity: int, inputs: list, output: Any) -> dict:
    return {'arities': (arity,), 'minimum': arity, 'inputs': list(inputs), 'variadic': None, 'output': output}


def resolve_shape(fn: Callable, arity: int | None = None, *, name: str | None = None) -> tuple[int, list, Any]:
    """Select exactly one call shape of `fn`, returning `(arity, inputs, output)`.

    With `arity=None` the callable must have a single shape; otherwise the requested one must be
    among those it accepts.  Overloaded values resolve through their per-shape implementation.
    """
    name = name or label_of(fn)
    meta = get_call_shapes(fn)
    arities = meta['arities']

    if arity is None:
        if arities is None:
            raise AmbiguousArityError(f"`{name}` accepts any number of arguments; pin its arity explicitly.",
                                      aviary_token=name, arities=None)
        if len(arities) != 1:
            raise AmbiguousArityError(f"`{name}` accepts {_format_arities(arities)} arguments; pin one explicitly.",
                                      aviary_token=name, arities=arities)
        arity = arities[0]
    elif arity < 0 or (arities is not None and arity not in arities) or (arities is None and arity < meta['minimum']):
        raise ArityError(f"`{name}` cannot be called with {arity} argument(s); it accepts {_format_arities(arities, meta['minimum'])}.",
                         aviary_token=name)

    if (shapes := meta.get('shapes')) is not None:
        return resolve_shape(shapes[arity], arity, name=name)

    inputs = meta['inputs'][:arity]
    inputs += [meta['variadic']] * (arity - len(inputs))
    return arity, inputs, meta['output']

def _format_arities(arities, minimum=0) -> str:
    if arities is None: return f"{minimum} or more"
    if len(arities) == 1: return str(arities[0])
    return ', '.join(str(n) for n in arities[:-1]) + f" or {arities[-1]}"


def is_assignable(actual: Any, expected: Any) -> bool:
    """Check whether a declared output type fits a declared input type, skipping unknown ones."""
    if isinstance(expected, TypeVar): expected = expected.__bound__
    if isinstance(actual, TypeVar): actual = actual.__bound__
    if expected in (Any, None, 'UNK') or actual in (Any, None, 'UNK', NoReturn):
        return True
    if isinstance(actual, UnionType):
        return all(is_assignable(a, expected) for a in get_args(actual))
    if isinstance(actual, tuple):
        return all(is_assignable(a, expected) for a in actual)

    candidates = get_args(expected) if isinstance(expected, UnionType) else expected
    for exp in candidates if isinstance(candidates, tuple) else (candidates,):
        if issubclass(actual, exp) or any(issubclass(actual, p) for p in _NUMERIC_PROMOTIONS.get(exp, ())):
            return True
    return False

def check_link(inner_output: Any, outer_input: Any, *, inner: str, outer: str, position: int) -> None:
    if not is_assignable(inner_output, outer_input):
        raise SignatureTypeError(
            f"`{outer}` expects {_type_name(outer_input)} at position {position + 1}, "
            f"but `{inner}` returns {_type_name(inner_output)}.", aviary_op='compose', aviary_token=outer)

def check_value(value: Any, expected: Any, *, target: str, position: int) -> None:
    if not is_assignable(type(value), expected):
        raise SignatureTypeError(
            f"`{target}` expects {_type_name(expected)} at position {position + 1}, got {type(value).__name__}.",
            aviary_op='curry', aviary_token=target)

def _type_name(tp) -> str:
    return getattr(tp, '__name__', None) or str(tp)
