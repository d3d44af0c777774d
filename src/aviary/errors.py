## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class AviaryError(Exception):
    def __init__(self, message: str = "", *, aviary_op=None, aviary_token=None):
        """Base class for all errors raised while building compositions."""
        super().__init__(message)
        self.aviary_op: object = aviary_op
        self.aviary_token: str = aviary_token


class ArityError(AviaryError, TypeError):
    """Construction-time arity problems: nothing left to fill, or a wrong number of callables."""
    pass

class ArityUnknownError(ArityError):
    pass

class AmbiguousArityError(ArityError):
    def __init__(self, message: str = "", *, aviary_op=None, aviary_token=None, arities=None):
        super().__init__(message, aviary_op=aviary_op, aviary_token=aviary_token)
        self.arities = arities


class SignatureTypeError(AviaryError, TypeError):
    """Declared output of one callable does not fit the declared input of the next."""
    pass


class LambdaParseError(AviaryError):
    def __init__(self, message, *, source=None, line=None, column=None, token=None):
        super().__init__(message, aviary_token=token)
        self.source = source
        self.line = line
        self.column = column
        self.token = token

class LambdaNameError(AviaryError, NameError):
    pass


class CombinatorNameError(AviaryError, NameError):
    pass


class Escape(AviaryError):
    """Raised from inside a callable to leave a fixed-point loop, carrying the last value."""
    def __init__(self, value=None, message: str = ""):
        super().__init__(message or f"Escaped with {value!r}.")
        self.value = value
