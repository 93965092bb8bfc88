import logging
import random
import time
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .code_table import build_code_table
from .constants import LETTER_SCORES, RESULT_PAGE_ROWS
from .encoder import encode_word
from .evaluator import ScanResult, find_best
from .tiles import draw_initial_tiles

logger = logging.getLogger(__name__)


class RackSession:
    """One game: a drawn rack, its code table and the words it can make."""

    def __init__(self, word_list: Iterable[str], rack: Optional[str] = None,
                 letter_scores: Mapping[str, int] = LETTER_SCORES,
                 rng: Optional[random.Random] = None):
        self.word_list = word_list
        self.rack = rack if rack is not None else draw_initial_tiles(rng)
        self.table = build_code_table(self.rack, letter_scores)
        self.rack_encoding = encode_word(self.rack, self.table)
        self.result: Optional[ScanResult] = None

    def solve(self) -> ScanResult:
        """Scans the word list once; later calls return the cached result."""
        if self.result is None:
            self.result = find_best(
                self.word_list, self.table, self.rack_encoding)
        return self.result

    def result_columns(self, rows: int = RESULT_PAGE_ROWS) -> List[List[str]]:
        """Splits the playable words into display columns of at most rows words."""
        if rows < 1:
            raise ValueError("rows must be positive")
        words = self.solve().playable_words
        return [words[i:i + rows] for i in range(0, len(words), rows)]

    def best_message(self) -> str:
        best = self.solve().best
        if best is None:
            return "No words could be made with the tiles."
        return f"Best word is {best.word} with {best.points} points."

    def get_state(self) -> Dict[str, Any]:
        result = self.solve()
        return {
            "rack": list(self.rack),
            "blanks": self.table.blanks,
            "playable_words": list(result.playable_words),
            "columns": self.result_columns(),
            "best_word": result.best.word if result.best else None,
            "best_points": result.best.points if result.best else 0,
            "message": self.best_message(),
        }


def run_performance_test(word_list: Iterable[str], trials: int,
                         rng: Optional[random.Random] = None) -> List[float]:
    """Times trials complete new-game cycles and returns seconds per trial."""
    timings = []
    for _ in range(trials):
        start = time.perf_counter()
        RackSession(word_list, rng=rng).solve()
        timings.append(time.perf_counter() - start)

    if timings:
        logger.info(
            f"Performance test: {trials} trials, mean {sum(timings) / len(timings):.4f}s")
    return timings
