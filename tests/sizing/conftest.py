# File: tests/sizing/conftest.py
"""Shared fixtures for sizing tests."""

import pytest

from hydronic_planner.core import Emitter, PipeKind, PipeSegment, Point, Source


def _supply(pipe_id, *coords, diameter=20):
    return PipeSegment(
        id=f"pipe-supply-{pipe_id}",
        kind=PipeKind.SUPPLY,
        points=[Point(x, y) for x, y in coords],
        diameter=diameter,
    )


def _return_of(pipe, offset=8):
    return PipeSegment(
        id=pipe.id.replace("supply", "return", 1),
        kind=PipeKind.RETURN,
        points=[p.offset(offset, offset) for p in pipe.points],
        diameter=pipe.diameter,
    )


@pytest.fixture
def make_supply():
    """Factory: make_supply("1", (0, 0), (100, 0)) -> pipe-supply-1."""
    return _supply


@pytest.fixture
def make_return():
    """Factory building the offset return partner of a supply pipe."""
    return _return_of


@pytest.fixture
def chain_source():
    return Source(id="boiler-1", x=-30, y=70, width=60, height=60)


@pytest.fixture
def chain_emitters():
    """Three horizontal radiators connecting at x = 100, 200, 300 on y = 100."""
    return [
        Emitter(id="rad-1", x=90, y=94, width=60, height=12, power=1000),
        Emitter(id="rad-2", x=190, y=94, width=60, height=12, power=2000),
        Emitter(id="rad-3", x=290, y=94, width=60, height=12, power=3000),
    ]


@pytest.fixture
def chain_pipes():
    """Supply chain from (0, 100) through each radiator, with returns."""
    supplies = [
        _supply("1", (0, 100), (100, 100)),
        _supply("2", (100, 100), (200, 100)),
        _supply("3", (200, 100), (300, 100)),
    ]
    pipes = []
    for pipe in supplies:
        pipes.extend([pipe, _return_of(pipe)])
    return pipes
