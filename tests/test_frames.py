"""Tests for pandas interchange."""

import numpy as np
import pandas as pd
import pytest

from map2d import Map2D, from_frame, from_long_frame, to_frame, to_long_frame


class TestWideFrame:
    """Test to_frame and from_frame."""

    def test_to_frame_layout(self, sample_map):
        df = to_frame(sample_map, sort=True)
        assert list(df.index) == ["A", "B"]
        assert list(df.columns) == ["x", "y"]
        assert df.loc["A", "x"] == 1
        assert df.loc["A", "y"] == 2
        assert df.loc["B", "x"] == 3
        assert np.isnan(df.loc["B", "y"])

    def test_to_frame_fill_value(self, sample_map):
        df = to_frame(sample_map, fill_value=0, sort=True)
        assert df.loc["B", "y"] == 0
        assert df.to_numpy().sum() == 6

    def test_to_frame_keeps_stored_nan(self):
        m = Map2D()
        m.put("A", "x", np.nan)
        m.put("B", "y", 1.0)
        df = to_frame(m, fill_value=-1.0, sort=True)
        assert np.isnan(df.loc["A", "x"])
        assert df.loc["A", "y"] == -1.0

    def test_to_frame_tuple_keys(self):
        m = Map2D()
        m.put(("r", 1), ("c", 1), "v")
        df = to_frame(m)
        assert not isinstance(df.index, pd.MultiIndex)
        assert df.index[0] == ("r", 1)
        assert df.columns[0] == ("c", 1)
        assert df.iloc[0, 0] == "v"

    def test_to_frame_empty(self, empty_map):
        df = to_frame(empty_map)
        assert df.empty

    def test_from_frame_drops_missing(self):
        df = pd.DataFrame({"x": [1.0, 3.0], "y": [2.0, np.nan]}, index=["A", "B"])
        m = from_frame(df)
        assert m.size() == 3
        assert m.get("A", "y") == 2.0
        assert not m.contains_key("B", "y")

    def test_from_frame_keeps_missing(self):
        df = pd.DataFrame({"x": [1.0, 3.0], "y": [2.0, np.nan]}, index=["A", "B"])
        m = from_frame(df, dropna=False)
        assert m.size() == 4
        assert m.contains_key("B", "y")

    def test_to_frame_keeps_stored_none(self):
        m = Map2D()
        m.put("A", "x", None)
        m.put("B", "x", 1.0)
        m.put("B", "y", 2)
        df = to_frame(m, sort=True)
        assert df.loc["A", "x"] is None
        assert df.loc["B", "x"] == 1.0
        assert np.isnan(df.loc["A", "y"])

    def test_from_frame_keeps_none_cells(self):
        df = pd.DataFrame({"x": [None, 1.0]}, index=["A", "B"], dtype=object)
        m = from_frame(df)
        assert m.size() == 2
        assert m.contains_key("A", "x")
        assert m.get("A", "x") is None

    def test_wide_round_trip_with_none(self):
        m = Map2D()
        m.put("A", "x", None)
        m.put("B", "x", 1.0)
        m.put("B", "y", 2)
        rebuilt = from_frame(to_frame(m))
        assert rebuilt.size() == 3
        assert rebuilt.contains_key("A", "x")
        assert rebuilt.get("A", "x") is None
        assert rebuilt == m

    def test_wide_round_trip(self, random_map):
        rebuilt = from_frame(to_frame(random_map))
        assert rebuilt.size() == random_map.size()
        for entry in random_map:
            assert rebuilt.get(entry.row, entry.col) == pytest.approx(entry.value)

    def test_frame_is_independent(self, sample_map):
        df = to_frame(sample_map, sort=True)
        df.loc["A", "x"] = 100
        assert sample_map.get("A", "x") == 1


class TestLongFrame:
    """Test to_long_frame and from_long_frame."""

    def test_to_long_frame(self, sample_map):
        df = to_long_frame(sample_map)
        assert list(df.columns) == ["row", "col", "value"]
        records = sorted(df.itertuples(index=False, name=None))
        assert records == [("A", "x", 1), ("A", "y", 2), ("B", "x", 3)]

    def test_to_long_frame_custom_names(self, sample_map):
        df = to_long_frame(sample_map, "student", "course", "grade")
        assert list(df.columns) == ["student", "course", "grade"]
        assert len(df) == 3

    def test_to_long_frame_duplicate_names(self, sample_map):
        with pytest.raises(ValueError, match="distinct"):
            to_long_frame(sample_map, "a", "a", "b")

    def test_to_long_frame_empty(self, empty_map):
        df = to_long_frame(empty_map)
        assert df.empty
        assert list(df.columns) == ["row", "col", "value"]

    def test_from_long_frame_last_wins(self):
        df = pd.DataFrame(
            {"row": ["A", "A", "B"], "col": ["x", "x", "y"], "value": [1, 2, 3]}
        )
        m = from_long_frame(df)
        assert m.size() == 2
        assert m.get("A", "x") == 2
        assert m.get("B", "y") == 3

    def test_from_long_frame_missing_columns(self):
        df = pd.DataFrame({"row": ["A"], "value": [1]})
        with pytest.raises(KeyError, match="col"):
            from_long_frame(df)

    def test_from_long_frame_missing_key(self):
        df = pd.DataFrame({"row": ["A", None], "col": ["x", "y"], "value": [1, 2]})
        with pytest.raises(ValueError, match="Missing key"):
            from_long_frame(df)

    def test_long_round_trip_with_none(self):
        m = Map2D()
        m.put("A", "x", None)
        m.put("B", "x", 1)
        df = to_long_frame(m)
        values = dict(zip(df["row"], df["value"]))
        assert values["A"] is None
        assert type(values["B"]) is int

        rebuilt = from_long_frame(df)
        assert rebuilt == m
        assert rebuilt.contains_key("A", "x")
        assert type(rebuilt.get("B", "x")) is int

    def test_long_round_trip(self, random_map):
        rebuilt = from_long_frame(to_long_frame(random_map))
        assert rebuilt == random_map
