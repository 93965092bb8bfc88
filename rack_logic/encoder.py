from typing import NamedTuple

from .code_table import LetterCodeTable
from .constants import BLANK_TILE, POINT_BITS, POINT_MASK


class WordEncoding(NamedTuple):
    """
    identity is the product of the rack primes of every letter in the word
    (one factor per occurrence); points is the sum of their point values.
    Letters covered by a blank add neither a factor nor points.
    """
    identity: int
    points: int

    @property
    def is_playable(self) -> bool:
        return self.identity > 0

    def pack(self) -> int:
        """Packs into a single int: identity in the high bits, points in the low 6."""
        if self.points > POINT_MASK:
            raise OverflowError(
                f"{self.points} points does not fit in {POINT_BITS} bits.")
        return (self.identity << POINT_BITS) | self.points

    @classmethod
    def unpack(cls, packed: int) -> 'WordEncoding':
        return cls(identity=packed >> POINT_BITS, points=packed & POINT_MASK)


NOT_PLAYABLE = WordEncoding(identity=0, points=0)


def encode_word(word: str, table: LetterCodeTable) -> WordEncoding:
    """
    Encodes word against a rack's code table. Letters missing from the table
    use up blanks left to right; once the blanks run out the word cannot be
    formed and NOT_PLAYABLE is returned.
    """
    identity = 1
    points = 0
    blanks_used = 0

    for letter in word:
        code = table.get(letter) if letter != BLANK_TILE else None
        if code is not None:
            identity *= code.prime
            points += code.points
        elif blanks_used < table.blanks:
            blanks_used += 1
        else:
            return NOT_PLAYABLE

    return WordEncoding(identity=identity, points=points)
