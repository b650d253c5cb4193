# tests/conftest.py
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

import pytest

from hydronic_planner.core import Emitter, Source


# Normal pytest fixtures go here
@pytest.fixture
def boiler():
    """Boiler at the top-left corner; connection point (30, 30)."""
    return Source(id="boiler-1", x=0, y=0, width=60, height=60, power=20000)


@pytest.fixture
def radiator():
    """Horizontal radiator; connection point (210, 106)."""
    return Emitter(id="rad-1", x=200, y=100, width=60, height=12, power=1000)


@pytest.fixture
def second_radiator():
    """Horizontal radiator below the first one; connection point (210, 306)."""
    return Emitter(id="rad-2", x=200, y=300, width=60, height=12, power=2000)
