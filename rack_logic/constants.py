LETTER_SCORES = {
    'A': 1, 'B': 3, 'C': 3, 'D': 2, 'E': 1, 'F': 4, 'G': 2, 'H': 4, 'I': 1, 'J': 8,
    'K': 5, 'L': 1, 'M': 3, 'N': 1, 'O': 1, 'P': 3, 'Q': 10, 'R': 1, 'S': 1, 'T': 1,
    'U': 1, 'V': 4, 'W': 4, 'X': 8, 'Y': 4, 'Z': 10, ' ': 0,
}

TILE_DISTRIBUTION = {
    'A': 9, 'B': 2, 'C': 2, 'D': 4, 'E': 12, 'F': 2, 'G': 3, 'H': 2, 'I': 9, 'J': 1, 'K': 1, 'L': 4, 'M': 2,
    'N': 6, 'O': 8, 'P': 2, 'Q': 1, 'R': 6, 'S': 4, 'T': 6, 'U': 4, 'V': 2, 'W': 2, 'X': 1, 'Y': 2, 'Z': 1, ' ': 2
}

BLANK_TILE = ' '
BLANK_ALIASES = {' ', '?', '_'}

RACK_SIZE = 7
MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 7

# One prime per rack position; a rack never needs more than these.
LETTER_PRIMES = (2, 3, 5, 7, 11, 13, 17)

POINT_BITS = 6
POINT_MASK = 0b111111

WORD_LIST_URL = "http://darcy.rsgc.on.ca/ACES/ICS4U/SourceCode/Words.txt"
WORD_LIST_FILENAME = "words.txt"
DOWNLOAD_TIMEOUT_SECONDS = 10.0
MINIMAL_WORD_SET = ["QI", "ZA", "CAT", "DOG", "JO", "AX", "EX",
                    "OX", "XI", "XU", "WORD", "PLAY", "GAME", "POWER", "TURN"]

RESULT_PAGE_ROWS = 10
MAX_BENCHMARK_TRIALS = 1000
