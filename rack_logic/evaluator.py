import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from .code_table import LetterCodeTable, build_code_table
from .constants import LETTER_SCORES
from .encoder import WordEncoding, encode_word

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    word: str
    points: int


@dataclass
class ScanResult:
    """Playable words in word-list order and the highest scoring one, if any."""
    playable_words: List[str] = field(default_factory=list)
    best: Optional[MatchResult] = None


def is_playable(encoding: WordEncoding, rack_identity: int) -> bool:
    """
    A word fits on the rack when its identity divides the rack's identity.
    Each letter owns a distinct prime, so divisibility compares the letter
    counts of word and rack exponent by exponent.
    """
    if not encoding.is_playable:
        return False
    return rack_identity % encoding.identity == 0


def find_best(words: Iterable[str], table: LetterCodeTable,
              rack_encoding: WordEncoding) -> ScanResult:
    """
    Single pass over words. The first playable word becomes the best match;
    later words replace it only with a strictly higher point total.
    """
    rack_identity = rack_encoding.identity
    result = ScanResult()
    scanned = 0

    for word in words:
        scanned += 1
        encoding = encode_word(word, table)
        if not is_playable(encoding, rack_identity):
            continue

        result.playable_words.append(word)
        if result.best is None or encoding.points > result.best.points:
            result.best = MatchResult(word=word, points=encoding.points)

    if result.best:
        logger.info(
            f"Scanned {scanned} words: {len(result.playable_words)} playable, best '{result.best.word}' ({result.best.points} pts)")
    else:
        logger.info(f"Scanned {scanned} words: none playable")
    return result


def scan_rack(rack: Union[str, Sequence[str]], words: Iterable[str],
              letter_scores: Mapping[str, int] = LETTER_SCORES) -> ScanResult:
    table = build_code_table(rack, letter_scores)
    rack_encoding = encode_word(rack, table)
    logger.debug(
        f"Rack [{''.join(rack)}] identity {rack_encoding.identity}, {table.blanks} blanks")
    return find_best(words, table, rack_encoding)
