from typing import Union, Optional
from enum import Enum, auto


class AutoName(Enum):
    def _generate_next_value_(name, start, count, last_values):
        return name


class TokenTypes(AutoName):
    """
    The boolean indicates if the token object contains an associated value
    """

    EOF = (auto(), False)

    INTEGER = (auto(), True)

    PLUS = (auto(), False)
    MINUS = (auto(), False)
    MUL = (auto(), False)
    DIV = (auto(), False)

    LPAREN = (auto(), False)
    RPAREN = (auto(), False)

    WHITESPACE = (auto(), False)
    BAD = (auto(), True)


class TextSpan:
    def __init__(self, start: int, literal: str):
        self._start = start
        self._literal = literal

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._start + len(self._literal)

    @property
    def literal(self):
        return self._literal

    def __str__(self) -> str:
        return f"{TextSpan.__name__}({self._start}, {self._literal!r})"

    def __repr__(self) -> str:
        return self.__str__()

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return False
        return (self._start, self._literal) == (other._start, other._literal)


class Token:
    def __init__(
        self,
        type: TokenTypes,
        value: Optional[Union[int, str]] = None,
        span: Optional[TextSpan] = None,
    ):
        if not isinstance(type, TokenTypes):
            raise TypeError(f"invalid token type: {type}")
        if type.value[1] == (value is None):
            s = "n't"
            raise ValueError(
                f"value should{s if type.value[1] else ''} be None for {type}"
            )

        if value is not None:
            self._validate_value(type, value)

        self._type = type
        self._value = value
        self._span = span

    def _validate_value(self, token_type: TokenTypes, value: Union[int, str]):
        # bool is an int subclass but never a valid literal
        if token_type == TokenTypes.INTEGER and (
            not isinstance(value, int) or isinstance(value, bool)
        ):
            raise TypeError("value for INTEGER token must be an integer")
        elif token_type == TokenTypes.BAD and (not isinstance(value, str) or not value):
            raise TypeError("value for BAD token must be a non-empty string")

    @property
    def type(self):
        return self._type

    @property
    def value(self):
        return self._value

    @property
    def span(self):
        return self._span

    @property
    def literal(self) -> str:
        if self._span is None:
            return ""
        return self._span.literal

    @property
    def position(self) -> Optional[int]:
        if self._span is None:
            return None
        return self._span.start

    def __str__(self) -> str:
        return f"Token({self._type}, {self._value})"

    def __repr__(self) -> str:
        return self.__str__()

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return False
        if (self._type, self._value) != (other._type, other._value):
            return False
        return True
