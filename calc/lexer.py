import logging
from typing import Optional, List
from calc.tokenizer import Token, TokenTypes, TextSpan


logger = logging.getLogger(__name__)

I64_MAX = 2**63 - 1
I64_MAX_DIGITS = str(I64_MAX)

single_chr_toks = {
    "+": TokenTypes.PLUS,
    "-": TokenTypes.MINUS,
    "*": TokenTypes.MUL,
    "/": TokenTypes.DIV,
    "(": TokenTypes.LPAREN,
    ")": TokenTypes.RPAREN,
}


def _is_digit(c: Optional[str]) -> bool:
    # str.isdigit() alone accepts non-ASCII digits such as "²"
    return c is not None and c.isascii() and c.isdigit()


def _exceeds_i64(digits: str) -> bool:
    # compared as text: int() refuses very long digit strings
    digits = digits.lstrip("0")
    if len(digits) != len(I64_MAX_DIGITS):
        return len(digits) > len(I64_MAX_DIGITS)
    return digits > I64_MAX_DIGITS


def _is_whitespace(c: Optional[str]) -> bool:
    return c is not None and c.isspace()


class Lexer:
    def __init__(self, input: str = ""):
        self._buffer = input
        self._pos = 0
        self._eof_emitted = False

    @property
    def buffer(self):
        return self._buffer

    @property
    def pos(self):
        return self._pos

    @property
    def current_char(self) -> Optional[str]:
        if self._pos >= len(self._buffer):
            return None
        return self._buffer[self._pos]

    def _advance(self, offset=1) -> None:
        if offset < 0:
            raise IndexError(f"{self._advance.__name__} can only advance forward")
        if self._pos + offset > len(self._buffer):
            raise IndexError("Index out of range")
        self._pos += offset

    def _peek(self, offset=1) -> Optional[str]:
        if offset < 0:
            raise IndexError(f"{self._peek.__name__} can only peek forward")
        pos = self._pos
        if pos + offset >= len(self._buffer):
            return None
        return self._buffer[pos + offset]

    def _span_from(self, start: int) -> TextSpan:
        return TextSpan(start, self._buffer[start : self._pos])

    def _num(self) -> Token:
        start = self._pos
        while _is_digit(self.current_char):
            self._advance()
        span = self._span_from(start)
        if _exceeds_i64(span.literal):
            logger.debug("integer literal %s out of range at %d", span.literal, start)
            return Token(TokenTypes.BAD, span.literal, span)
        return Token(TokenTypes.INTEGER, int(span.literal.lstrip("0") or "0"), span)

    def _whitespace(self) -> Token:
        start = self._pos
        while _is_whitespace(self.current_char):
            self._advance()
        return Token(TokenTypes.WHITESPACE, span=self._span_from(start))

    def next_token(self) -> Optional[Token]:
        """
        Returns exactly one token per call. Once the end of the input is
        reached a single EOF token is returned, then None on every later call.
        """
        curr_char = self.current_char
        if curr_char is None:
            if self._eof_emitted:
                return None
            self._eof_emitted = True
            return Token(TokenTypes.EOF, span=TextSpan(self._pos, ""))

        if _is_digit(curr_char):
            return self._num()

        if _is_whitespace(curr_char):
            return self._whitespace()

        start = self._pos
        self._advance()
        if curr_char in single_chr_toks:
            return Token(single_chr_toks[curr_char], span=self._span_from(start))

        logger.debug("bad character %r at %d", curr_char, start)
        return Token(TokenTypes.BAD, curr_char, self._span_from(start))

    def get_tokens(self) -> List[Token]:
        tokens = []
        curr_token = self.next_token()
        while curr_token is not None:
            tokens.append(curr_token)
            curr_token = self.next_token()
        return tokens
