# File: tests/core/test_pipe_segment.py
"""Tests for pipe segments, pairing keys and network validation."""

import pytest

from hydronic_planner.core import (
    PipeKind,
    PipeNetwork,
    PipeSegment,
    Point,
    pipe_pair_key,
    validate_pipe_segment,
)


def make_pipe(pipe_id, kind=PipeKind.SUPPLY, points=None, diameter=20):
    if points is None:
        points = [Point(0, 0), Point(100, 0)]
    return PipeSegment(id=pipe_id, kind=kind, points=points, diameter=diameter)


# =============================================================================
# Validation
# =============================================================================

class TestSegmentValidation:
    """A committed segment needs two points and a table diameter."""

    def test_valid_segment(self):
        """Two points and a valid diameter pass."""
        validate_pipe_segment(make_pipe("pipe-supply-direct-1"))

    @pytest.mark.parametrize("points", [[], [Point(0, 0)]])
    def test_fewer_than_two_points_rejected(self, points):
        """Empty and single-point segments are rejected."""
        network = PipeNetwork()
        with pytest.raises(ValueError, match="at least 2"):
            network.add(make_pipe("p", points=points))
        assert len(network) == 0

    def test_invalid_diameter_rejected(self):
        """Diameters outside the table are a contract violation."""
        with pytest.raises(ValueError, match="Invalid pipe diameter"):
            PipeNetwork([make_pipe("p", diameter=18)])

    def test_non_finite_point_rejected(self):
        """NaN coordinates are rejected."""
        pipe = make_pipe("p", points=[Point(0, 0), Point(float("nan"), 0)])
        with pytest.raises(ValueError, match="non-finite"):
            validate_pipe_segment(pipe)

    def test_duplicate_id_rejected(self):
        """Ids are unique within a network."""
        network = PipeNetwork([make_pipe("p")])
        with pytest.raises(ValueError, match="Duplicate"):
            network.add(make_pipe("p"))

    def test_with_diameter_validates(self):
        """Diameter updates are checked against the table."""
        with pytest.raises(ValueError):
            make_pipe("p").with_diameter(50)

    def test_with_diameter_copies(self):
        """Updating the diameter leaves the original untouched."""
        pipe = make_pipe("p", diameter=20)
        sized = pipe.with_diameter(32)
        assert sized.diameter == 32
        assert pipe.diameter == 20
        assert sized.points == pipe.points
        assert sized.points is not pipe.points


# =============================================================================
# Pairing
# =============================================================================

class TestPairing:
    """Supply and return pipes are correlated through their ids."""

    def test_pair_key_matches(self):
        """Ids differing only in the marker share a key."""
        assert pipe_pair_key("pipe-supply-trunk-3", PipeKind.SUPPLY) == "pipe--trunk-3"
        assert pipe_pair_key("pipe-return-trunk-3", PipeKind.RETURN) == "pipe--trunk-3"

    def test_add_pair_requires_matching_keys(self):
        """A return pipe from another pair is refused."""
        network = PipeNetwork()
        with pytest.raises(ValueError, match="pairing key"):
            network.add_pair(
                make_pipe("pipe-supply-direct-1"),
                make_pipe("pipe-return-direct-2", kind=PipeKind.RETURN),
            )

    def test_add_pair_requires_order(self):
        """The first pipe of a pair must be the supply pipe."""
        network = PipeNetwork()
        with pytest.raises(ValueError, match="Expected"):
            network.add_pair(
                make_pipe("pipe-return-direct-1", kind=PipeKind.RETURN),
                make_pipe("pipe-supply-direct-1"),
            )

    def test_find_partner(self):
        """Partners are found in both directions."""
        supply = make_pipe("pipe-supply-branch-2")
        ret = make_pipe("pipe-return-branch-2", kind=PipeKind.RETURN)
        network = PipeNetwork()
        network.add_pair(supply, ret)

        assert network.find_partner(supply) is ret
        assert network.find_partner(ret) is supply
        assert network.supply_pipes() == [supply]
        assert network.return_pipes() == [ret]


# =============================================================================
# Geometry and serialization
# =============================================================================

class TestPipeRecord:
    """Tests for length and persisted records."""

    def test_polyline_length(self):
        """Length sums the straight runs."""
        pipe = make_pipe("p", points=[Point(0, 0), Point(30, 0), Point(30, 40)])
        assert pipe.polyline_length() == pytest.approx(70.0)

    def test_record_keys(self):
        """Persisted records keep the editor's key names."""
        pipe = make_pipe("pipe-supply-direct-1")
        pipe.to_element_id = "rad-1"
        data = pipe.to_dict()
        assert data["pipeType"] == "supply"
        assert data["type"] == "pipe"
        assert data["points"] == [{"x": 0, "y": 0}, {"x": 100, "y": 0}]
        assert data["toElementId"] == "rad-1"
        assert "fromElementId" not in data
        assert "length" not in data

    def test_record_round_trip(self):
        """A record reads back into an equal segment."""
        pipe = PipeSegment(
            id="pipe-return-branch-4",
            kind=PipeKind.RETURN,
            points=[Point(8, 8), Point(8, 58), Point(50, 50)],
            diameter=25,
            material="copper",
            from_element_id=None,
            to_element_id="rad-9",
            length=100.0,
        )
        assert PipeSegment.from_dict(pipe.to_dict()) == pipe

    def test_kind_alias(self):
        """``kind`` is accepted in place of ``pipeType``."""
        pipe = PipeSegment.from_dict({
            "id": "x", "kind": "return", "points": [], "diameter": 16,
        })
        assert pipe.kind is PipeKind.RETURN

    def test_unknown_kind(self):
        """Unknown pipe types are rejected."""
        with pytest.raises(ValueError, match="Unknown pipe kind"):
            PipeSegment.from_dict({"id": "x", "pipeType": "gas"})
