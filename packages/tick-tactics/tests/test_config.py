"""Tests for BoardConfig."""
from __future__ import annotations

import json

import pytest
from tick_tactics import BoardConfig, load_config


class TestBoardConfig:
    def test_defaults(self) -> None:
        config = BoardConfig()
        assert (config.columns, config.rows) == (20, 20)
        assert config.cell_size == (32, 32)
        assert config.default_move_range == 6
        assert config.walk_easing == "linear"

    def test_frozen(self) -> None:
        config = BoardConfig()
        with pytest.raises(AttributeError):
            config.columns = 3  # type: ignore[misc]

    @pytest.mark.parametrize("kwargs,match", [
        ({"columns": 0}, "grid size"),
        ({"rows": -2}, "grid size"),
        ({"cell_size": (0, 32)}, "cell_size"),
        ({"default_move_range": -1}, "default_move_range"),
        ({"walk_ticks_per_cell": 0}, "walk_ticks_per_cell"),
        ({"walk_easing": "bounce"}, "Unknown easing"),
        ({"tps": 0}, "tps"),
    ])
    def test_invalid_values_raise(self, kwargs, match) -> None:
        with pytest.raises(ValueError, match=match):
            BoardConfig(**kwargs)

    def test_from_dict_converts_cell_size(self) -> None:
        config = BoardConfig.from_dict({"columns": 8, "rows": 6, "cell_size": [16, 16]})
        assert config.cell_size == (16, 16)
        assert config.columns == 8

    @pytest.mark.parametrize("cell_size", [32, [32], [32, 32, 32], "32x32", [16.5, 16], None])
    def test_malformed_cell_size_raises_value_error(self, cell_size) -> None:
        with pytest.raises(ValueError, match="cell_size"):
            BoardConfig.from_dict({"cell_size": cell_size})

    def test_scalar_cell_size_in_constructor_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="cell_size"):
            BoardConfig(cell_size=32)  # type: ignore[arg-type]

    def test_from_dict_unknown_key_raises(self) -> None:
        with pytest.raises(ValueError, match="colums"):
            BoardConfig.from_dict({"colums": 8})

    def test_to_dict_round_trips_through_json(self) -> None:
        config = BoardConfig(columns=7, rows=9, walk_easing="ease_out")
        assert BoardConfig.from_dict(json.loads(json.dumps(config.to_dict()))) == config

    def test_load_config(self, tmp_path) -> None:
        path = tmp_path / "board.json"
        path.write_text(json.dumps({"columns": 12, "rows": 10, "tps": 30}))
        config = load_config(path)
        assert (config.columns, config.rows, config.tps) == (12, 10, 30)
