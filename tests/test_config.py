from pathlib import Path

import pytest
import yaml

from neural_echo.config import CacheConfig, NeuralEchoConfig, load_config
from neural_echo.errors import ConfigurationError, NeuralEchoError


def test_defaults(config: NeuralEchoConfig) -> None:
    assert config.cache.ttl_seconds == 600.0
    assert config.cache.max_entries == 100
    assert config.concepts.max_concepts == 50
    assert config.concepts.min_relevance == 0.1
    assert config.analyzer.debounce_seconds == 0.5
    assert config.emotion.negation_factor == -0.5


def test_load_yaml_with_overrides(workspace: Path) -> None:
    path = workspace / "config.yaml"
    path.write_text(yaml.safe_dump({"cache": {"ttl_seconds": 30}, "structure": {"seed": 4}}))
    config = load_config(path, overrides=[{"cache": {"max_entries": 5}}])
    assert config.cache.ttl_seconds == 30
    assert config.cache.max_entries == 5
    assert config.structure.seed == 4
    assert config.concepts.max_concepts == 50


def test_load_json(workspace: Path) -> None:
    path = workspace / "config.json"
    path.write_text('{"analyzer": {"parallel": false}}')
    assert load_config(path).analyzer.parallel is False


def test_empty_yaml_gives_defaults(workspace: Path) -> None:
    path = workspace / "empty.yaml"
    path.write_text("")
    assert load_config(path) == NeuralEchoConfig()


def test_non_mapping_file_rejected(workspace: Path) -> None:
    path = workspace / "list.yaml"
    path.write_text("- one\n- two\n")
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_unknown_key_rejected() -> None:
    with pytest.raises(ConfigurationError):
        NeuralEchoConfig.from_dict({"cache": {"ttl": 5}})


@pytest.mark.parametrize(
    "data",
    [
        {"cache": {"ttl_seconds": 0}},
        {"cache": {"max_entries": -1}},
        {"concepts": {"min_relevance": 1.5}},
        {"analyzer": {"debounce_seconds": -0.1}},
        {"emotion": {"negation_factor": 0.5}},
    ],
)
def test_invalid_values_rejected(data: dict) -> None:
    with pytest.raises(ConfigurationError):
        NeuralEchoConfig.from_dict(data)


def test_configuration_error_hierarchy() -> None:
    assert issubclass(ConfigurationError, NeuralEchoError)
    assert issubclass(ConfigurationError, ValueError)


def test_to_dict_round_trip() -> None:
    config = NeuralEchoConfig(cache=CacheConfig(ttl_seconds=12.0))
    assert NeuralEchoConfig.from_dict(config.to_dict()) == config
