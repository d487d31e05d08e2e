from dataclasses import dataclass


@dataclass(frozen=True)
class ResultEntry:
    """One character of the report with its tally.

    `percentage` is the share of all counted characters, not just of the entries
    that survive filtering.
    """

    character: str
    count: int
    percentage: float

    @property
    def ordinal(self) -> int:
        return ord(self.character)

    @property
    def display(self) -> str:
        """the character as printed, escaped when it would not show up on one line"""
        if self.character.isprintable() and not self.character.isspace():
            return self.character
        return repr(self.character)
