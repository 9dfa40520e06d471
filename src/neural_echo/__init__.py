"""Neural Echo package."""

from .analyzer import Debouncer, TextAnalyzer
from .cache import AnalysisCache
from .config import NeuralEchoConfig, load_config
from .diagnostics import DiagnosticsSuite
from .errors import ConfigurationError, NeuralEchoError
from .models import AnalysisResult, ScalingTier
from .scaling import ScalingResolver

__all__ = [
    "AnalysisCache",
    "AnalysisResult",
    "ConfigurationError",
    "Debouncer",
    "DiagnosticsSuite",
    "NeuralEchoConfig",
    "NeuralEchoError",
    "ScalingResolver",
    "ScalingTier",
    "TextAnalyzer",
    "load_config",
]

__version__ = "0.1.0"
