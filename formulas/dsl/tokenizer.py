from .operators import match_operator
from .tokens import Token, TokenType


class Tokenizer:
    """Streams tokens one at a time with a single token of lookahead.

    ``current`` is the token most recently read and ``prev_type`` the kind
    of the one before it (``None`` at the start of input). The parser uses
    ``prev_type`` to tell unary operators from binary ones.
    """

    def __init__(self, text):
        self.text = text.strip()
        self.pos = 0
        self.current = None
        self.prev_type = None

    def reset(self):
        """Rewind to the start of the input."""
        self.pos = 0
        self.current = None
        self.prev_type = None

    @property
    def done(self):
        return self.pos >= len(self.text)

    def peek_char(self):
        return self.text[self.pos] if self.pos < len(self.text) else None

    def skip_spaces(self):
        while not self.done and self.text[self.pos].isspace():
            self.pos += 1

    def number(self):
        start = self.pos
        while not self.done and self.text[self.pos].isdecimal():
            self.pos += 1
        return Token(TokenType.NUMBER, self.text[start:self.pos])

    def identifier(self):
        start = self.pos
        while not self.done and not self._ends_identifier(self.pos):
            self.pos += 1
        return Token(TokenType.IDENTIFIER, self.text[start:self.pos])

    def _ends_identifier(self, pos):
        char = self.text[pos]
        return (
            char.isdecimal()
            or char.isspace()
            or char in "()"
            or match_operator(self.text, pos) is not None
        )

    def read_token(self):
        """Advance to the next token and return it."""
        self.prev_type = self.current.type if self.current is not None else None
        self.current = self._scan()
        return self.current

    def _scan(self):
        char = self.peek_char()
        if char is None:
            return Token(TokenType.EOF)

        if char == '(':
            token = Token(TokenType.LPAREN)
            self.pos += 1
        elif char == ')':
            token = Token(TokenType.RPAREN)
            self.pos += 1
        elif char.isdecimal():
            token = self.number()
        else:
            symbol = match_operator(self.text, self.pos)
            if symbol is not None:
                token = Token(TokenType.OPERATOR, symbol)
                self.pos += len(symbol)
            else:
                token = self.identifier()

        self.skip_spaces()
        return token

    def generate_tokens(self):
        tokens = []
        while True:
            token = self.read_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                return tokens
