"""Command-line interface for arabic-overlap.

Responsibilities:
- Expose user-facing commands for pairwise and batch comparison.
- Convert CLI arguments into `DetectorConfig` and render results.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_batch_outcomes,
    echo_comparison_json,
    echo_comparison_report,
    exit_with_command_error,
)
from .config import ConfigLoader, DetectorConfig
from .detector import PlagiarismDetector, compare_pairs
from .errors import ComparisonError
from .io.manifest import load_pair_manifest
from .io.reader import read_document_bytes
from .telemetry.logger import RunLogger
from .text.normalizer import decode_document

app = typer.Typer(
    name="arabic-overlap",
    no_args_is_help=True,
    help="Estimate textual overlap between Arabic documents.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with detector settings."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", help="Emit stage-level log lines on stderr."),
]


def _resolve_config(
    config_file: Path | None,
    ngram_size: int | None = None,
    hash_unit: str | None = None,
    strict_yaa: bool = False,
) -> DetectorConfig:
    """Resolve detector config: CLI options > YAML file > environment > defaults."""

    try:
        config = ConfigLoader.from_env()
        if config_file is not None:
            config = ConfigLoader.from_yaml(config_file, base=config)
        return config.with_overrides(
            ngram_size=ngram_size,
            hash_unit=hash_unit.strip().lower() if hash_unit else None,
            fold_alef_maksura=False if strict_yaa else None,
        )
    except FileNotFoundError as exc:
        raise ComparisonError(
            stage="config",
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise ComparisonError(
            stage="config",
            detail=f"Invalid configuration: {exc}",
            hint="Fix config values and rerun.",
        ) from exc


@app.command("compare")
def compare_command(
    first: Annotated[Path, typer.Argument(help="Path to the first UTF-8 document.")],
    second: Annotated[Path, typer.Argument(help="Path to the second UTF-8 document.")],
    ngram_size: Annotated[
        int | None,
        typer.Option("--ngram-size", help="Shingle window width (default 3)."),
    ] = None,
    hash_unit: Annotated[
        str | None,
        typer.Option("--hash-unit", help="Code unit hashed per window: `utf8` or `codepoint`."),
    ] = None,
    strict_yaa: Annotated[
        bool,
        typer.Option("--strict-yaa", help="Keep alef maksura distinct from yaa."),
    ] = False,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the result as a JSON object."),
    ] = False,
) -> None:
    """Compare two documents and report their similarity."""

    try:
        config = _resolve_config(config_file, ngram_size, hash_unit, strict_yaa)
        detector = PlagiarismDetector(
            config=config,
            run_logger=RunLogger() if verbose else None,
        )
        result = detector.compare_files(first, second)
    except Exception as exc:
        exit_with_command_error("compare", exc)

    if as_json:
        echo_comparison_json(first, second, result)
    else:
        echo_comparison_report(first, second, result)


@app.command("batch")
def batch_command(
    manifest: Annotated[
        Path,
        typer.Argument(help="YAML manifest with a `pairs` list of `{a, b}` paths."),
    ],
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Compare every pair listed in a manifest; exit 1 if any pair failed."""

    try:
        config = _resolve_config(config_file)
        try:
            pairs = load_pair_manifest(manifest)
        except (OSError, ValueError) as exc:
            raise ComparisonError(
                stage="manifest",
                detail=f"Failed to load manifest `{manifest}`: {exc}",
                hint="Provide a YAML file with `pairs: [{a: ..., b: ...}]`.",
            ) from exc
        outcomes = compare_pairs(
            pairs,
            config=config,
            run_logger=RunLogger() if verbose else None,
        )
    except Exception as exc:
        exit_with_command_error("batch", exc)

    echo_batch_outcomes(outcomes)
    if not all(outcome.ok for outcome in outcomes):
        raise typer.Exit(code=1)


@app.command("normalize")
def normalize_command(
    document: Annotated[Path, typer.Argument(help="Path to a UTF-8 document.")],
    strict_yaa: Annotated[
        bool,
        typer.Option("--strict-yaa", help="Keep alef maksura distinct from yaa."),
    ] = False,
    config_file: ConfigOption = None,
) -> None:
    """Print the normalized text of one document."""

    try:
        config = _resolve_config(config_file, strict_yaa=strict_yaa)
        text = decode_document(read_document_bytes(document), label=str(document))
        normalized = PlagiarismDetector(config=config).normalize(text)
    except Exception as exc:
        exit_with_command_error("normalize", exc)

    typer.echo(normalized)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
