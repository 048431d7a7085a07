# Ensure repository root is on sys.path for imports like `from diceforge.generator import ...`
import os
import sys

# headless plotting for the experiment tests
os.environ.setdefault('MPLBACKEND', 'Agg')

_REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

import pytest

from diceforge.generator import Generator
from diceforge.generators import XorShiftStar
from diceforge.words import WordWidth


class ScriptedGenerator(Generator):
    """Replays a fixed list of raw 32-bit words."""

    width = WordWidth.U32

    def __init__(self, words):
        self.words = list(words)
        self.draws = 0

    def generate(self):
        self.draws += 1
        return self.words.pop(0)

    def reseed(self, seed):
        raise NotImplementedError


class CountingXorShift(XorShiftStar):
    def __init__(self, seed=1337):
        self.draws = 0
        super().__init__(seed)

    def generate(self):
        self.draws += 1
        return super().generate()


@pytest.fixture
def rng():
    return CountingXorShift(20240601)


@pytest.fixture
def scripted():
    return ScriptedGenerator
