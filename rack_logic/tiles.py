import logging
import random
from typing import List, Optional, Sequence, Union

from .constants import BLANK_ALIASES, BLANK_TILE, RACK_SIZE, TILE_DISTRIBUTION

logger = logging.getLogger(__name__)


class InvalidRackError(ValueError):
    pass


class TileBag:
    """A shuffled bag holding the standard tile distribution, blanks included."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.tiles = self.initialize_tile_bag()

    def initialize_tile_bag(self) -> List[str]:
        tile_bag = [letter for letter, count in TILE_DISTRIBUTION.items()
                    for _ in range(count)]
        self.rng.shuffle(tile_bag)
        return tile_bag

    def draw(self, count: int) -> List[str]:
        """Draws up to count tiles; fewer when the bag runs out."""
        drawn = []
        for _ in range(count):
            if not self.tiles:
                break
            drawn.append(self.tiles.pop())
        return drawn

    def __len__(self) -> int:
        return len(self.tiles)


def draw_initial_tiles(rng: Optional[random.Random] = None) -> str:
    rack = "".join(TileBag(rng).draw(RACK_SIZE))
    logger.info(f"Drew rack [{rack}]")
    return rack


def validate_rack(rack: Union[str, Sequence[str]]) -> str:
    """Normalizes a user supplied rack to uppercase letters and ' ' blanks."""
    if len(rack) > RACK_SIZE:
        raise InvalidRackError(
            f"Rack has {len(rack)} tiles; at most {RACK_SIZE} allowed.")

    normalized = []
    for tile in rack:
        if tile in BLANK_ALIASES:
            normalized.append(BLANK_TILE)
            continue
        letter = tile.upper()
        if len(letter) != 1 or not ('A' <= letter <= 'Z'):
            raise InvalidRackError(f"Invalid tile {tile!r} in rack.")
        normalized.append(letter)
    return "".join(normalized)
