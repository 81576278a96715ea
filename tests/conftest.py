import numpy as np
import pytest

from SequenceSynthesis.config import GenerationConfig
from SequenceSynthesis.region import FeatureType, Region


@pytest.fixture
def config():
    return GenerationConfig(total_length=1000, random_seed=7)


@pytest.fixture
def rng():
    return np.random.default_rng(0)


def make_region(target_gc=0.5, length=10, kind=FeatureType.CODING, start=0, index=0):
    return Region(
        index=index,
        start_offset=start,
        length=length,
        kind=kind,
        target_gc_fraction=target_gc,
    )


class FixedDraw:
    """Stand-in generator whose uniform draw is fixed."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value
