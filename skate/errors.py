from __future__ import annotations


class SkateError(Exception):
    """ Base class for all Skate errors"""
    pass


class SkateSyntaxError(SkateError):
    """ Raised when source text cannot be read into an expression"""
    pass


class UnexpectedEndOfInput(SkateSyntaxError):
    """ Raised when the reader runs out of tokens mid-expression"""

    def __init__(self, message: str = "Unexpected end of input"):
        super().__init__(message)


class UnmatchedCloseParen(SkateSyntaxError):
    """ Raised when a ')' appears with no open list"""

    def __init__(self, message: str = "Unexpected ')'"):
        super().__init__(message)


class UnterminatedLiteral(SkateSyntaxError):
    """ Raised when a quoted literal is never closed"""

    def __init__(self, token: str):
        super().__init__(f"Unterminated literal {token!r}, expected closing quote")
        self.token = token


class InvalidNumber(SkateSyntaxError):
    """ Raised when a token starting with a digit is not a valid float"""

    def __init__(self, token: str):
        super().__init__(f"Invalid number {token!r}")
        self.token = token


class TrailingTokens(SkateSyntaxError):
    """ Raised in strict mode when tokens follow a complete expression"""

    def __init__(self, tokens: list[str]):
        super().__init__(f"Unexpected trailing tokens: {' '.join(tokens)}")
        self.tokens = tokens


class NestingTooDeep(SkateError):
    """ Raised when an expression is nested deeper than the reader or evaluator can recurse"""

    def __init__(self, stage: str):
        super().__init__(f"Expression nested too deeply to {stage}")
        self.stage = stage


class SkateEvalError(SkateError):
    """ Raised when an expression cannot be evaluated"""
    pass


class UnboundSymbol(SkateEvalError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"Attempted to access variable '{name}', but it is not defined")
        self.name = name


class EmptyList(SkateEvalError):
    """ Raised when an empty list is evaluated"""

    def __init__(self):
        super().__init__("Expected at least one item in list")


class NotCallable(SkateEvalError):
    """ Raised when the head of a list is not a function"""

    def __init__(self, variant: str):
        super().__init__(f"Expected first element in a list to be a function, got '{variant}'")
        self.variant = variant


class UnexpectedCallable(SkateEvalError):
    """ Raised when a bare function value is evaluated"""

    def __init__(self):
        super().__init__("Unexpected function")


class CannotEvaluateNull(SkateEvalError):
    """ Raised when null is evaluated"""

    def __init__(self):
        super().__init__("Cannot evaluate null")


class TypeMismatch(SkateEvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""

    def __init__(self, expected: str, actual: str, name: str | None = None):
        where = f" in {name}" if name else ""
        super().__init__(f"Expected '{expected}', got '{actual}'{where}")
        self.expected = expected
        self.actual = actual
        self.name = name


class ArityMismatch(SkateEvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, name: str, expected: str, actual: int):
        super().__init__(f"{name} takes {expected} argument(s), got {actual}")
        self.name = name
        self.expected = expected
        self.actual = actual


class ExitRequested(Exception):
    """ Raised by the exit builtin to stop the driver loop. Not a SkateError."""

    def __init__(self, status: int = 0):
        super().__init__(f"exit {status}")
        self.status = status
