import os
import sys

import pytest

# Ensure the project root is on the python path for all tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from rack_logic.word_list import WordList


@pytest.fixture
def small_word_list():
    return WordList.from_words(["CAT", "DOG", "CATS", "DOGS", "ACT", "ZOO", "QI", "TAD"])
