"""Token and TokenType definitions for the Pluma lexer.

The lexer produces a stream of Token objects for an external parser to
consume. A Token is just a type and the exact bytes it was read from; the
position is tracked by the lexer cursor and queried separately.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer."""

    NEW_LINE = auto()  # \n
    SPACE = auto()  # a single space
    NUMBER_SIGN = auto()  # #
    TRIPLE_APOS = auto()  # '''
    TRIPLE_LT = auto()  # <<<
    WORD = auto()  # run of bytes outside WORD_DELIMITERS

    # Inline markup delimiters, one token per byte
    STAR = auto()  # *
    UNDERSCORE = auto()  # _
    BACKTICK = auto()  # `
    LEFT_BRACKET = auto()  # [
    CARET = auto()  # ^
    TILDE = auto()  # ~
    COLON = auto()  # :
    TAB = auto()  # \t


# Bytes that end a word: space * _ ` # [ ^ ~ : \n \r \t
WORD_DELIMITERS: frozenset[int] = frozenset(b" *_`#[^~:\n\r\t")


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The exact bytes consumed for this token

    """

    type: TokenType
    value: bytes

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + b"..."
        return f"Token({self.type.name}, {val!r})"

    @property
    def text(self) -> str:
        """Token bytes decoded as UTF-8 (invalid sequences replaced)."""
        return self.value.decode("utf-8", errors="replace")


NEW_LINE = Token(TokenType.NEW_LINE, b"\n")
SPACE = Token(TokenType.SPACE, b" ")
NUMBER_SIGN = Token(TokenType.NUMBER_SIGN, b"#")
TRIPLE_APOS = Token(TokenType.TRIPLE_APOS, b"'''")
TRIPLE_LT = Token(TokenType.TRIPLE_LT, b"<<<")

# Tokens made of exactly one byte, keyed by that byte. Together with the
# carriage return (skipped) this covers every byte in WORD_DELIMITERS.
SINGLE_BYTE_TOKENS: dict[int, Token] = {
    ord("\n"): NEW_LINE,
    ord("#"): NUMBER_SIGN,
    ord(" "): SPACE,
    ord("*"): Token(TokenType.STAR, b"*"),
    ord("_"): Token(TokenType.UNDERSCORE, b"_"),
    ord("`"): Token(TokenType.BACKTICK, b"`"),
    ord("["): Token(TokenType.LEFT_BRACKET, b"["),
    ord("^"): Token(TokenType.CARET, b"^"),
    ord("~"): Token(TokenType.TILDE, b"~"),
    ord(":"): Token(TokenType.COLON, b":"),
    ord("\t"): Token(TokenType.TAB, b"\t"),
}


def word(value: bytes) -> Token:
    """Create a WORD token."""
    return Token(TokenType.WORD, value)
