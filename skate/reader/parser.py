"""
  Skate Reader: tokenizer and recursive-descent parser

- Tokens are plain strings. Parentheses are always tokens of their own;
  everything else is split on whitespace only (no comments, no escapes).
- The parser is functional: every step takes a token list and returns the
  expression it read together with the tokens it did not consume.

    - ( ... )   -> List
    - 1.5, 42   -> Float   (any token whose first char is a digit)
    - 'name'    -> Literal (text between the first two quotes)
    - anything  -> Symbol
"""

from __future__ import annotations

import re
from typing import Iterator, Sequence

from skate.errors import (
    InvalidNumber,
    NestingTooDeep,
    TrailingTokens,
    UnexpectedEndOfInput,
    UnmatchedCloseParen,
    UnterminatedLiteral,
)
from skate.types.expression import Expression, Float, List, Literal, Symbol

PAREN_RE = re.compile(r"([()])")

QUOTE = "'"

Tokens = Sequence[str]


def tokenize(source: str) -> list[str]:
    """Split source text into tokens, isolating every '(' and ')'."""
    return PAREN_RE.sub(r" \1 ", source).split()


def parse(tokens: Tokens) -> tuple[Expression, Tokens]:
    """Read one expression from the front of `tokens`.

    Returns the expression and the remaining, unconsumed tokens.
    """
    if not tokens:
        raise UnexpectedEndOfInput()

    head, rest = tokens[0], tokens[1:]
    if head == "(":
        return parse_sequence(rest)
    if head == ")":
        raise UnmatchedCloseParen()
    return parse_atom(head), rest


def parse_sequence(tokens: Tokens) -> tuple[List, Tokens]:
    """Read list items up to and including the closing ')'.

    Called once the opening '(' has been consumed. Running out of tokens
    before the ')' raises UnexpectedEndOfInput.
    """
    items: list[Expression] = []
    while True:
        if not tokens:
            raise UnexpectedEndOfInput("Unexpected end of input, expected ')'")
        if tokens[0] == ")":
            return List(tuple(items)), tokens[1:]
        expr, tokens = parse(tokens)
        items.append(expr)


def parse_atom(token: str) -> Expression:
    """Classify a single non-parenthesis token."""
    # Numbers: anything starting with an ASCII digit
    if "0" <= token[0] <= "9":
        try:
            return Float(float(token))
        except ValueError:
            raise InvalidNumber(token) from None

    # Literals: 'name' (characters after the closing quote are ignored)
    if token.startswith(QUOTE):
        end = token.find(QUOTE, 1)
        if end == -1:
            raise UnterminatedLiteral(token)
        return Literal(token[1:end])

    return Symbol(token)


def parse_guarded(tokens: Tokens) -> tuple[Expression, Tokens]:
    """parse(), with Python recursion exhaustion reported as NestingTooDeep."""
    try:
        return parse(tokens)
    except RecursionError:
        raise NestingTooDeep("read") from None


def read_top_level(source: str, strict: bool = False) -> Expression:
    """Tokenize and parse the first complete expression in `source`.

    Tokens after that expression are ignored, unless `strict` is set, in
    which case they raise TrailingTokens.
    """
    expr, rest = parse_guarded(tokenize(source))
    if strict and rest:
        raise TrailingTokens(list(rest))
    return expr


def read_all(source: str) -> Iterator[Expression]:
    """Lazily yield every complete expression in `source`, in order."""
    tokens: Tokens = tokenize(source)
    while tokens:
        expr, tokens = parse_guarded(tokens)
        yield expr
