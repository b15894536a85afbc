import sys
import os

import pytest

# Add the project root to sys.path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from chromaramp import Gradient, LinRGB


@pytest.fixture
def two_stop():
    """Scalar gradient from 2.0 at position 0 to 10.0 at position 1."""
    return Gradient.from_colors([2.0, 10.0])


@pytest.fixture
def red_blue():
    return Gradient.from_colors([
        LinRGB((1.0, 0.0, 0.0)),
        LinRGB((0.0, 0.0, 1.0)),
    ])


@pytest.fixture
def yellow_blue():
    return Gradient.from_colors([
        LinRGB((1.0, 1.0, 0.0)),
        LinRGB((0.0, 0.0, 1.0)),
    ])
