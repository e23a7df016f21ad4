from typing import Optional
from calc.tokenizer import Token


class ParserError(Exception):
    def __init__(self, msg, token: Optional[Token] = None):
        self.token = token
        self.position = token.position if token is not None else None
        if self.position is not None:
            self.message = f"Parser error: {msg} at position {self.position}"
        else:
            self.message = f"Parser error: {msg}"
        super().__init__(self.message)


class InterpreterError(Exception):
    def __init__(self, msg):
        self.message = f"Interpreter error: {msg}"
        super().__init__(self.message)


class DivisionByZeroError(InterpreterError):
    pass


class IntegerOverflowError(InterpreterError):
    pass
