"""Read position over an immutable coordinate string."""
from dataclasses import dataclass

WHITESPACE = ' \t\n\r\f\v'


@dataclass
class Cursor:
    """Source text and the index of the next unread character."""
    text: str
    position: int = 0

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def peek(self) -> str:
        """Next character, or an empty string at the end of the text."""
        return self.text[self.position:self.position + 1]

    def advance(self, count: int = 1) -> None:
        self.position = min(self.position + count, len(self.text))

    def consume(self, token: str) -> bool:
        """Advance past token if the text continues with it."""
        if token and self.text.startswith(token, self.position):
            self.advance(len(token))
            return True
        return False

    def skip_whitespace(self) -> None:
        while not self.at_end and self.peek() in WHITESPACE:
            self.advance()

    def take_while(self, charset: str) -> str:
        """Consume and return the longest run of characters from charset."""
        start = self.position
        while not self.at_end and self.peek() in charset:
            self.advance()
        return self.text[start:self.position]
