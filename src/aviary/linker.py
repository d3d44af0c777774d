## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Callable, Mapping, Sequence

from .types import Var, Apply, LambdaForm
from .errors import ArityError, LambdaNameError
from .operators import compose, pin


def _occurrence_shapes(form: LambdaForm, shapes: Mapping[str, int | Sequence[int | None] | None] | None) -> dict:
    """Expand `shapes` into one requested arity (or None) per occurrence of each parameter."""
    counts = {p: 0 for p in form.params}
    for name in form.occurrences():
        counts[name] += 1

    expanded = {}
    for name, given in (shapes or {}).items():
        if name not in counts:
            raise LambdaNameError(f"Shape given for `{name}`, which is not a parameter of `{form.source}`.", aviary_token=name)
        if given is None or isinstance(given, int):
            expanded[name] = [given] * counts[name]
        elif len(given) != counts[name]:
            raise ArityError(f"Parameter `{name}` occurs {counts[name]} time(s) in `{form.source}`, but {len(given)} shape(s) were given.",
                             aviary_token=name)
        else:
            expanded[name] = list(given)
    return expanded


def link_body(form: LambdaForm, bindings: Mapping[str, Callable], shapes=None):
    """Wire the bound callables through the lambda body, one `compose` per juxtaposition.

    A body made of a single variable links to the bound value itself, untouched.  Otherwise each
    occurrence is pinned to one call shape (from `shapes`, else its only shape) and every group is
    folded left-to-right: `a b c` becomes `compose(compose(a, b), c)`.
    """
    requested = _occurrence_shapes(form, shapes)
    if isinstance(form.body, Var):
        return bindings[form.body.name]

    seen: dict[str, int] = {}

    def _link(term):
        if isinstance(term, Var):
            index = seen.get(term.name, 0)
            seen[term.name] = index + 1
            arity = requested[term.name][index] if term.name in requested else None
            return pin(bindings[term.name], arity)

        assert isinstance(term, Apply) and len(term.terms) >= 2
        linked = _link(term.terms[0])
        for t in term.terms[1:]:
            linked = compose(linked, _link(t))
        return linked

    return _link(form.body)


def bind_arguments(form: LambdaForm, args: Sequence[Any], *, name: str) -> dict[str, Any]:
    if len(args) != len(form.params):
        raise ArityError(f"`{name}` takes {len(form.params)} callable(s) ({', '.join(form.params)}), got {len(args)}.",
                         aviary_op=name, aviary_token=name)
    return dict(zip(form.params, args))
