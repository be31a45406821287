import random

import pytest
from helpers import generate_value


@pytest.fixture
def random_value():
    """Factory for seeded random value trees: random_value(seed, max_depth=6)."""

    def _random_value(seed, max_depth=6):
        return generate_value(random.Random(seed), max_depth)

    return _random_value
