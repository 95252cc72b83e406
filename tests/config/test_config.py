"""Tests for `costsearch.config`."""

from costsearch.config import SEARCH_CONFIG, MatrixStrategy, SearchConfig


def test_default_crossover_factor() -> None:
    assert SearchConfig().dense_crossover_factor == 3
    assert SEARCH_CONFIG.dense_crossover_factor == 3


def test_select_strategy_boundary() -> None:
    """DENSE only when poi_count * factor strictly exceeds node_count."""
    config = SearchConfig()
    assert config.select_strategy(4, 12) == MatrixStrategy.SPARSE
    assert config.select_strategy(5, 12) == MatrixStrategy.DENSE
    assert config.select_strategy(0, 0) == MatrixStrategy.SPARSE
    assert config.select_strategy(1, 1) == MatrixStrategy.DENSE


def test_custom_factor() -> None:
    config = SearchConfig(dense_crossover_factor=1)
    assert config.select_strategy(11, 12) == MatrixStrategy.SPARSE
    assert config.select_strategy(12, 11) == MatrixStrategy.DENSE


def test_select_strategy_never_returns_auto() -> None:
    config = SearchConfig()
    for pois in range(0, 20):
        assert config.select_strategy(pois, 10) != MatrixStrategy.AUTO
