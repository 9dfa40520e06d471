from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from neural_echo.analyzer import TextAnalyzer
from neural_echo.config import NeuralEchoConfig


@pytest.fixture
def config() -> NeuralEchoConfig:
    return NeuralEchoConfig()


@pytest.fixture
def analyzer(config: NeuralEchoConfig) -> TextAnalyzer:
    return TextAnalyzer(config=config, rng=0)


@pytest.fixture
def workspace(tmp_path: Path) -> Iterator[Path]:
    yield tmp_path
