import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Union

from .constants import BLANK_TILE, LETTER_PRIMES, LETTER_SCORES, RACK_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LetterCode:
    """Prime factor and point value assigned to one rack letter."""
    prime: int
    points: int


@dataclass(frozen=True)
class LetterCodeTable:
    """
    Per-rack lookup from letter to its LetterCode, plus the number of blank
    tiles on the rack. Built once per rack and never mutated afterwards.
    """
    codes: Mapping[str, LetterCode] = field(
        default_factory=lambda: MappingProxyType({}))
    blanks: int = 0

    def get(self, letter: str) -> Optional[LetterCode]:
        return self.codes.get(letter)

    def __contains__(self, letter: str) -> bool:
        return letter in self.codes

    def __len__(self) -> int:
        return len(self.codes)


def build_code_table(rack: Union[str, Sequence[str]],
                     letter_scores: Mapping[str, int] = LETTER_SCORES) -> LetterCodeTable:
    """
    Assigns the i-th prime to the letter at rack position i. A letter that
    appears more than once keeps the prime of its last position.
    """
    if len(rack) > RACK_SIZE:
        raise ValueError(
            f"Rack has {len(rack)} tiles; at most {RACK_SIZE} are supported.")

    codes = {}
    blanks = 0
    for position, tile in enumerate(rack):
        if tile == BLANK_TILE:
            blanks += 1
            continue
        codes[tile] = LetterCode(prime=LETTER_PRIMES[position],
                                 points=letter_scores.get(tile, 0))

    logger.debug(
        f"Built code table for rack [{''.join(rack)}]: {len(codes)} letters, {blanks} blanks")
    return LetterCodeTable(codes=MappingProxyType(codes), blanks=blanks)
