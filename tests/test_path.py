"""
Unit tests for path reconstruction.
"""

from pathengine.algorithms import Path, Predecessor, reconstruct_path


class TestReconstructPath:
    """Test walking predecessor maps."""

    def test_linear_chain(self):
        """Nodes and edges should come back in source-to-target order."""
        preds = {
            "A": None,
            "B": Predecessor("A", "e1"),
            "C": Predecessor("B", "e2"),
        }
        path = reconstruct_path(preds, "A", "C")
        assert path == Path(nodes=["A", "B", "C"], edges=["e1", "e2"])
        assert len(path) == 2
        assert str(path) == "A -> B -> C"

    def test_source_equals_target(self):
        """Source == target should be a single-node path."""
        assert reconstruct_path({}, "A", "A") == Path(nodes=["A"], edges=[])

    def test_no_predecessor_is_no_path(self):
        """A target without predecessor should give None."""
        assert reconstruct_path({"A": None, "B": None}, "A", "B") is None
        assert reconstruct_path({}, "A", "B") is None

    def test_broken_chain(self):
        """A chain that never reaches the source should give None."""
        preds = {"C": Predecessor("B", "e2"), "B": None}
        assert reconstruct_path(preds, "A", "C") is None

    def test_looping_chain(self):
        """A predecessor loop (negative-cycle leftovers) should give None."""
        preds = {
            "B": Predecessor("D", "e9"),
            "C": Predecessor("B", "e3"),
            "D": Predecessor("C", "e5"),
        }
        assert reconstruct_path(preds, "A", "D") is None

    def test_integer_ids(self):
        """Integer node and edge ids should be supported."""
        preds = {1: None, 2: Predecessor(1, 10), 3: Predecessor(2, 20)}
        assert reconstruct_path(preds, 1, 3) == Path(nodes=[1, 2, 3], edges=[10, 20])

    def test_long_chain_iterative(self):
        """Very long chains should not hit recursion limits."""
        n = 50_000
        preds = {0: None, **{i: Predecessor(i - 1, f"e{i}") for i in range(1, n)}}
        path = reconstruct_path(preds, 0, n - 1)
        assert len(path.nodes) == n
        assert path.edges[0] == "e1"
