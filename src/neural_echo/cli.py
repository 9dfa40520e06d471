"""Command line interface for Neural Echo."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer

from .analyzer import TextAnalyzer
from .complexity import complexity_breakdown
from .config import NeuralEchoConfig, load_config
from .diagnostics import DiagnosticsSuite
from .errors import NeuralEchoError
from .logging import configure_logging, get_logger
from .models import AnalysisResult
from .scaling import TIER_TABLE
from .utils import read_text, save_json

LOGGER = get_logger(__name__)

TEXT_ARGUMENT = typer.Argument(
    None,
    help="Text to analyse. Omit when using --file.",
)
FILE_OPTION = typer.Option(
    None,
    "--file",
    help="Read the text to analyse from a UTF-8 file.",
)
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    help="Path to a YAML or JSON configuration file.",
)
SEED_OPTION = typer.Option(
    None,
    help="Seed for the synthetic-node random source.",
)
OUTPUT_OPTION = typer.Option(
    None,
    help="Optional path to write the analysis as JSON.",
)
SUMMARY_OPTION = typer.Option(
    False,
    "--summary",
    help="Print a short summary instead of the full structure.",
)
DIAG_OUTPUT_OPTION = typer.Option(
    None,
    help="Optional path to write diagnostics report.",
)
LOG_LEVEL_OPTION = typer.Option(
    "WARNING",
    "--log-level",
    help="Logging level (DEBUG, INFO, WARNING, ...).",
)

app = typer.Typer(
    help="Turn text into emotion, concept and complexity scores and a bounded 3D node structure."
)


@app.callback()
def main(log_level: str = LOG_LEVEL_OPTION) -> None:
    """Configure logging before any command runs."""

    try:
        configure_logging(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc


def _load_analyzer(config_path: Path | None, seed: int | None) -> TextAnalyzer:
    try:
        config: NeuralEchoConfig = load_config(config_path)
    except NeuralEchoError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    return TextAnalyzer(config=config, rng=seed)


def _summary(result: AnalysisResult) -> dict[str, Any]:
    strategy = result.scaling_strategy
    dominant = result.sentiment.dominant
    return {
        "words": len(result.words),
        "dominant_emotion": dominant.emotion.value,
        "confidence": round(dominant.confidence, 3),
        "valence": round(result.sentiment.valence, 3),
        "arousal": round(result.sentiment.arousal, 3),
        "intensity": round(result.sentiment.intensity, 3),
        "top_concepts": [concept.word for concept in result.concepts[:5]],
        "complexity": round(result.complexity.overall, 3),
        "complexity_levels": complexity_breakdown(result.complexity),
        "tier": strategy.tier_name,
        "multiplier": strategy.multiplier,
        "node_count": strategy.node_count,
        "particle_count": strategy.particle_count,
        "compression_level": round(strategy.compression_level, 3),
        "connections": len(result.connections),
    }


@app.command()
def analyze(
    text: str | None = TEXT_ARGUMENT,
    file: Path | None = FILE_OPTION,
    config_path: Path | None = CONFIG_OPTION,
    seed: int | None = SEED_OPTION,
    output: Path | None = OUTPUT_OPTION,
    summary: bool = SUMMARY_OPTION,
) -> None:
    """Analyse text and print the resulting structure as JSON."""

    if file is not None:
        text = read_text(file)
    if text is None:
        typer.echo("Provide TEXT or --file.", err=True)
        raise typer.Exit(code=2)

    analyzer = _load_analyzer(config_path, seed)
    result = analyzer.analyze(text)
    payload = _summary(result) if summary else result.to_dict()
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    if output is not None:
        save_json(output, result.to_dict())
        LOGGER.info("Wrote analysis to %s", output)


@app.command()
def tiers() -> None:
    """Print the fixed word-count tier table."""

    for spec in TIER_TABLE:
        typer.echo(
            f"{spec.tier.value:<18}{spec.min_words:>6}-{spec.max_words:<6}"
            f"x{spec.multiplier:<6}particles x{spec.particle_multiplier}"
        )


@app.command()
def diagnostics(
    config_path: Path | None = CONFIG_OPTION,
    output: Path | None = DIAG_OUTPUT_OPTION,
) -> None:
    """Run the pipeline self-checks and optionally export to JSON."""

    analyzer = _load_analyzer(config_path, seed=0)
    result = DiagnosticsSuite(analyzer=analyzer).run()
    typer.echo(json.dumps(result.to_dict(), indent=2))
    if output is not None:
        result.to_json(output)
        LOGGER.info("Wrote diagnostics to %s", output)
    if not result.passed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
