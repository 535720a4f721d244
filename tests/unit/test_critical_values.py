"""
Unit tests for the critical-value table.
"""

import dataclasses

import numpy as np
import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from rttrim.critical_values import (
    ANCHOR_SAMPLE_SIZES,
    MODIFIED_RECURSIVE_ANCHORS,
    NONRECURSIVE_ANCHORS,
    CriticalValueTable,
)
from rttrim.exceptions import ConfigurationError, SampleSizeOutOfRange


@pytest.fixture
def table():
    return CriticalValueTable.van_selst_jolicoeur()


class TestPublishedValues:
    """The default table reproduces the published anchors."""

    def test_anchor_values(self, table):
        """Every anchor sample size maps to its published multiplier."""
        for n, nonrec, modrec in zip(
            ANCHOR_SAMPLE_SIZES, NONRECURSIVE_ANCHORS, MODIFIED_RECURSIVE_ANCHORS
        ):
            assert table.nonrecursive_multiplier(n) == pytest.approx(nonrec)
            assert table.modified_recursive_multiplier(n) == pytest.approx(modrec)

    def test_known_values(self, table):
        assert table.nonrecursive_multiplier(6) == pytest.approx(1.841)
        assert table.nonrecursive_multiplier(100) == pytest.approx(2.5)
        assert table.modified_recursive_multiplier(4) == pytest.approx(8.0)

    def test_linear_interpolation_between_anchors(self, table):
        """n = 17 lies 2/5 of the way from n = 15 to n = 20."""
        expected = 2.326 + 0.4 * (2.391 - 2.326)
        assert table.nonrecursive_multiplier(17) == pytest.approx(expected)

        expected = 3.506 + 0.5 * (3.500 - 3.506)
        assert table.modified_recursive_multiplier(75) == pytest.approx(expected)

    def test_small_samples_use_first_anchor(self, table):
        for n in (1, 2, 3):
            assert table.nonrecursive_multiplier(n) == pytest.approx(1.458)
            assert table.modified_recursive_multiplier(n) == pytest.approx(8.0)

    def test_nonrecursive_widens_with_sample_size(self, table):
        values = np.array(table.nonrecursive)
        assert np.all(np.diff(values) >= 0)

    def test_modified_recursive_narrows_with_sample_size(self, table):
        values = np.array(table.modified_recursive)
        assert np.all(np.diff(values) <= 0)


class TestLookup:
    """Sample-size clamping and guarding."""

    def test_large_samples_clamp_to_100(self, table):
        """150 trials use the same multiplier as exactly 100."""
        assert table.nonrecursive_multiplier(150) == table.nonrecursive_multiplier(100)
        assert table.modified_recursive_multiplier(5000) == table.modified_recursive_multiplier(100)

    def test_zero_sample_size_raises(self, table):
        with pytest.raises(SampleSizeOutOfRange):
            table.nonrecursive_multiplier(0)

    def test_sample_size_error_is_lookup_error(self, table):
        with pytest.raises(LookupError) as excinfo:
            table.modified_recursive_multiplier(-3)
        assert excinfo.value.sample_size == -3


class TestConstruction:
    """Custom tables and validation."""

    def test_from_anchors_covers_full_range(self):
        table = CriticalValueTable.from_anchors([1, 100], [1.0, 3.0], [5.0, 3.0])
        assert len(table.nonrecursive) == 100
        assert table.nonrecursive_multiplier(1) == pytest.approx(1.0)
        assert table.nonrecursive_multiplier(100) == pytest.approx(3.0)
        assert table.modified_recursive_multiplier(100) == pytest.approx(3.0)

    def test_unsorted_anchors_rejected(self):
        with pytest.raises(ConfigurationError):
            CriticalValueTable.from_anchors([10, 5], [2.0, 1.5], [4.0, 6.0])

    def test_mismatched_lengths_rejected(self):
        with pytest.raises(ConfigurationError):
            CriticalValueTable.from_anchors([4, 100], [1.5], [8.0, 3.5])

    def test_anchor_outside_range_rejected(self):
        with pytest.raises(ConfigurationError):
            CriticalValueTable.from_anchors([4, 200], [1.5, 2.5], [8.0, 3.5])

    def test_wrong_length_rejected(self):
        with pytest.raises(ConfigurationError):
            CriticalValueTable(nonrecursive=(2.0,) * 10, modified_recursive=(3.5,) * 100)

    def test_non_positive_multiplier_rejected(self):
        with pytest.raises(ConfigurationError):
            CriticalValueTable(nonrecursive=(0.0,) * 100, modified_recursive=(3.5,) * 100)

    def test_table_is_read_only(self, table):
        with pytest.raises(dataclasses.FrozenInstanceError):
            table.nonrecursive = (1.0,) * 100

    def test_to_frame(self, table):
        frame = table.to_frame()
        assert frame.shape == (100, 3)
        assert list(frame["sample_size"])[:3] == [1, 2, 3]
        assert frame.loc[99, "nonrecursive"] == pytest.approx(2.5)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
