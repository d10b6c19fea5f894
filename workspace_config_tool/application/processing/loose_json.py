# workspace_config_tool/application/processing/loose_json.py

"""Lenient JSON parser for values typed on the command line

Accepts strict JSON plus comments, single-quoted strings, identifier keys,
trailing commas, hexadecimal and lax numbers, and the Infinity/NaN
constants. Errors distinguish an unexpected character from input that ends
too early so callers can decide whether the text was meant as JSON at all.
"""

# Standard library imports
from math import inf
from math import nan

# Local imports
from workspace_config_tool.core.domain.errors import InvalidJsonCharacterError
from workspace_config_tool.core.domain.errors import UnexpectedEndOfInputError
from workspace_config_tool.core.types.json import JSONDict
from workspace_config_tool.core.types.json import JSONList
from workspace_config_tool.core.types.json import JSONType

_WHITESPACE = frozenset(" \t\n\r\ufeff")
_NUMBER_TERMINATORS = frozenset(" \t\n\r,]}/")
_NUMBER_STARTS = frozenset("+-.0123456789")
_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_ESCAPES = {
    '"': '"',
    "'": "'",
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class _LooseJsonReader:
    """Single-pass recursive descent reader over one text"""

    __slots__ = ("_text", "_offset", "_line", "_column")

    def __init__(self, text: str) -> None:
        self._text = text
        self._offset = 0
        self._line = 1
        self._column = 1

    # Cursor helpers

    def _peek(self, ahead: int = 0) -> str:
        position = self._offset + ahead
        return self._text[position] if position < len(self._text) else ""

    def _advance(self) -> str:
        char = self._peek()
        self._offset += 1
        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return char

    def _invalid(self) -> InvalidJsonCharacterError:
        return InvalidJsonCharacterError(self._peek(), self._offset, self._line, self._column)

    def _unexpected_end(self) -> UnexpectedEndOfInputError:
        return UnexpectedEndOfInputError(self._offset, self._line, self._column)

    def _require(self) -> str:
        """Peek at the next character, failing if the input is exhausted"""
        char = self._peek()
        if not char:
            raise self._unexpected_end()
        return char

    def _read_while(self, allowed: frozenset[str]) -> str:
        start = self._offset
        while self._peek() and self._peek() in allowed:
            self._advance()
        return self._text[start : self._offset]

    # Grammar

    def parse(self) -> JSONType:
        value = self._read_value()
        self._skip_blanks()
        if self._offset < len(self._text):
            raise self._invalid()
        return value

    def _skip_blanks(self) -> None:
        """Skip whitespace and comments"""
        while True:
            char = self._peek()
            if char and char in _WHITESPACE:
                self._advance()
            elif char == "/" and self._peek(1) == "/":
                while self._peek() and self._peek() != "\n":
                    self._advance()
            elif char == "/" and self._peek(1) == "*":
                self._advance()
                self._advance()
                while not (self._peek() == "*" and self._peek(1) == "/"):
                    self._require()
                    self._advance()
                self._advance()
                self._advance()
            else:
                return

    def _read_value(self) -> JSONType:
        self._skip_blanks()
        char = self._require()

        if char in _NUMBER_STARTS:
            return self._read_number()
        if char in "'\"":
            return self._read_string()
        if char == "[":
            return self._read_array()
        if char == "{":
            return self._read_object()

        match char:
            case "t":
                self._read_token("true")
                return True
            case "f":
                self._read_token("false")
                return False
            case "n":
                self._read_token("null")
                return None
            case "I":
                self._read_token("Infinity")
                return inf
            case "N":
                self._read_token("NaN")
                return nan
            case _:
                raise self._invalid()

    def _read_token(self, token: str) -> None:
        # A partial literal is a character problem, not a truncated document
        for expected in token:
            if self._peek() != expected:
                raise self._invalid()
            self._advance()

    def _read_number(self) -> int | float:
        start = self._offset
        negative = False
        if self._peek() in ("+", "-"):
            negative = self._advance() == "-"

        if self._peek() == "I":
            self._read_token("Infinity")
            return -inf if negative else inf

        if self._peek() == "0" and self._peek(1) in ("x", "X"):
            self._advance()
            self._advance()
            digits = self._read_while(_HEX_DIGITS)
            if not digits:
                raise self._invalid() if self._peek() else self._unexpected_end()
            self._check_number_end()
            value = int(digits, 16)
            return -value if negative else value

        is_float = False
        integer_digits = self._read_while(_DIGITS)
        fraction_digits = ""
        if self._peek() == ".":
            is_float = True
            self._advance()
            fraction_digits = self._read_while(_DIGITS)
        if not integer_digits and not fraction_digits:
            raise self._invalid() if self._peek() else self._unexpected_end()

        if self._peek() in ("e", "E"):
            is_float = True
            self._advance()
            if self._peek() in ("+", "-"):
                self._advance()
            if not self._read_while(_DIGITS):
                raise self._invalid() if self._peek() else self._unexpected_end()

        self._check_number_end()
        literal = self._text[start : self._offset]
        return float(literal) if is_float else int(literal)

    def _check_number_end(self) -> None:
        char = self._peek()
        if char and char not in _NUMBER_TERMINATORS:
            raise self._invalid()

    def _read_string(self) -> str:
        quote = self._advance()
        chars: list[str] = []

        while True:
            char = self._require()
            if char == quote:
                self._advance()
                break
            if char == "\\":
                self._advance()
                chars.append(self._read_escape())
            elif ord(char) < 0x20:
                raise self._invalid()
            else:
                chars.append(self._advance())

        text = "".join(chars)
        try:
            # Escaped surrogate pairs become one code point
            return text.encode("utf-16", "surrogatepass").decode("utf-16")
        except UnicodeDecodeError:
            # A lone surrogate has no pair to join with
            return text

    def _read_escape(self) -> str:
        char = self._require()
        if char in _ESCAPES:
            self._advance()
            return _ESCAPES[char]
        if char == "u":
            self._advance()
            digits = []
            for _ in range(4):
                if self._require() not in _HEX_DIGITS:
                    raise self._invalid()
                digits.append(self._advance())
            return chr(int("".join(digits), 16))
        if char == "\n":
            self._advance()
            return ""
        if char == "\r":
            self._advance()
            if self._peek() == "\n":
                self._advance()
            return ""
        raise self._invalid()

    def _read_array(self) -> JSONList:
        self._advance()
        items: JSONList = []
        self._skip_blanks()
        if self._require() == "]":
            self._advance()
            return items

        while True:
            items.append(self._read_value())
            self._skip_blanks()
            char = self._require()
            if char == "]":
                self._advance()
                return items
            if char != ",":
                raise self._invalid()
            self._advance()
            self._skip_blanks()
            if self._require() == "]":
                self._advance()
                return items

    def _read_object(self) -> JSONDict:
        self._advance()
        result: JSONDict = {}
        self._skip_blanks()
        if self._require() == "}":
            self._advance()
            return result

        while True:
            key = self._read_key()
            self._skip_blanks()
            if self._require() != ":":
                raise self._invalid()
            self._advance()
            result[key] = self._read_value()

            self._skip_blanks()
            char = self._require()
            if char == "}":
                self._advance()
                return result
            if char != ",":
                raise self._invalid()
            self._advance()
            self._skip_blanks()
            if self._require() == "}":
                self._advance()
                return result

    def _read_key(self) -> str:
        self._skip_blanks()
        char = self._require()
        if char in "'\"":
            return self._read_string()
        if not (char.isalpha() or char in "_$"):
            raise self._invalid()

        start = self._offset
        while self._peek() and (self._peek().isalnum() or self._peek() in "_$"):
            self._advance()
        return self._text[start : self._offset]


def parse_loose_json(text: str) -> JSONType:
    """Parse text as lenient JSON

    Args:
        text: The text to parse

    Returns:
        The parsed value

    Raises:
        InvalidJsonCharacterError: On an unexpected character, including
            trailing content after the value
        UnexpectedEndOfInputError: If the text ends before a value is complete
    """
    return _LooseJsonReader(text).parse()
