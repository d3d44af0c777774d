## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import lark

from .types import Var, Apply, LambdaForm
from .errors import LambdaParseError, LambdaNameError


GRAMMAR = r"""?start: abstraction
abstraction: LAMBDA PARAMS DOT application
application: term+
?term: VAR | "(" application ")"

// TOKENS
LAMBDA: "λ" | "\\"
DOT: "."
PARAMS: /[a-z]+/
VAR: /[a-z]/

// WHITESPACE
%import common.WS
%ignore WS
"""


_PARSER = None

def _get_parser() -> lark.Lark:
    global _PARSER
    if _PARSER is None:
        _PARSER = lark.Lark(GRAMMAR, start='start', parser="lalr", lexer="contextual", propagate_positions=True)
    return _PARSER


def parse(source: str) -> LambdaForm:
    """Parse a lambda definition like `λabc.a(bc)` into a `LambdaForm`.

    Variables are single lowercase letters, juxtaposition is left-associative application and
    parentheses group.  A backslash may stand in for `λ`.
    """
    try:
        tree = _get_parser().parse(source)
    except lark.exceptions.UnexpectedInput as exc:
        def attr(k): return getattr(exc, k, None)
        token_val = getattr(token, 'value', '') if (token := attr('token')) is not None else ''
        raise LambdaParseError(str(exc), source=source, line=attr('line'), column=attr('column'), token=token_val) from None

    params_token = next(t for t in tree.children if isinstance(t, lark.Token) and t.type == 'PARAMS')
    application = tree.children[-1]
    params = tuple(params_token.value)
    if len(set(params)) != len(params):
        raise LambdaNameError(f"Lambda `{source}` binds a parameter twice.", aviary_token=params_token.value)

    def _term(node):
        if isinstance(node, lark.Token):
            if node.type != 'VAR':
                raise LambdaParseError(f"Unexpected `{node.value}` in lambda body.", source=source, line=node.line, column=node.column, token=node.value)
            if node.value not in params:
                raise LambdaNameError(f"Variable `{node.value}` in `{source}` is not bound by the lambda.", aviary_token=node.value)
            return Var(node.value)
        assert node.data == 'application'
        terms = tuple(_term(ch) for ch in node.children)
        return terms[0] if len(terms) == 1 else Apply(terms)

    return LambdaForm(params=params, body=_term(application), source=source)
