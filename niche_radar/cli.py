"""
niche-radar — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Run the questionnaire or score a profile.
  5. Report result to stdout.

Install and run::

    pip install -e .
    niche-radar --help
    niche-radar wizard
    niche-radar score --spec corporate_ma --size medium --intl mixed --pricing standard
    niche-radar score --spec esg_advisory --size small --intl local --pricing premium --json
    niche-radar heatmap
    niche-radar validate-config
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="niche-radar",
    help="Competitive positioning scan for independent advisory firms.",
    add_completion=False,
)

_INTRO = """
=== Niche Radar ===
  Four questions about your firm.  The scan estimates pressure from the
  Big 4 and international networks, rates how defensible your niche is,
  and suggests three partner archetypes for a consortium.
"""


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from niche_radar.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from niche_radar.utils.logging import configure_logging
    configure_logging(config.logging)


def _prompt_choice(n_options: int) -> int:
    """Prompt until the user enters a number in 1..n_options; return 0-based index."""
    while True:
        choice = typer.prompt("  Your choice", type=int)
        if 1 <= choice <= n_options:
            return choice - 1
        typer.echo(f"  Please enter a number between 1 and {n_options}.")


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("wizard")
def wizard(
    no_delay: bool = typer.Option(
        False,
        "--no-delay",
        help="Skip the pause between questions.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Answer four questions and get a positioning report.

    \b
    Steps:
      1. Specialization
      2. Firm size
      3. International exposure
      4. Pricing model

    After the report you can start over; answers from the previous run
    are discarded.
    """
    from niche_radar.reporting.formatters import format_assessment, format_step
    from niche_radar.wizard.session import WizardSession
    from niche_radar.wizard.steps import TOTAL_STEPS

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    delay = 0 if no_delay else config.wizard.step_delay_ms
    session = WizardSession(step_delay_ms=delay)

    while True:
        typer.echo(_INTRO)
        session.start()

        report = None
        while report is None:
            step = session.current
            typer.echo(format_step(step, session.current_step, TOTAL_STEPS))
            idx = _prompt_choice(len(step.options))
            report = asyncio.run(session.select(step.options[idx].value))

        typer.echo(format_assessment(report, show_heatmap=config.report.show_heatmap))
        typer.echo("")

        if not typer.confirm("Start over?", default=False):
            break
        session.reset()

    typer.echo("[OK] Done.")


@app.command("score")
def score(
    spec: str = typer.Option(
        ...,
        "--spec",
        help="Specialization: tax_litigation, corporate_ma, esg_advisory, audit_assurance.",
    ),
    size: str = typer.Option(
        ...,
        "--size",
        help="Firm size: small, medium, large.",
    ),
    intl: str = typer.Option(
        ...,
        "--intl",
        help="International exposure: global, local, mixed.",
    ),
    pricing: str = typer.Option(
        ...,
        "--pricing",
        help="Pricing model: premium, standard, volume.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the full report as JSON instead of text.",
    ),
    no_heatmap: bool = typer.Option(
        False,
        "--no-heatmap",
        help="Omit the service heatmap from the text report.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Score a firm profile without the interactive questionnaire.

    Exits with code 1 if the specialization or size is not recognized.
    """
    from niche_radar.models.selection import SelectionSet
    from niche_radar.reporting.formatters import format_assessment
    from niche_radar.scoring.assessment import build_assessment
    from niche_radar.scoring.engine import InvalidInputError

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    selection = SelectionSet(spec=spec, size=size, intl=intl, pricing=pricing)
    try:
        report = build_assessment(selection)
    except InvalidInputError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(
            json.dumps(report.model_dump(mode="json"), indent=config.report.json_indent)
        )
        return

    show_heatmap = config.report.show_heatmap and not no_heatmap
    typer.echo(format_assessment(report, show_heatmap=show_heatmap))


@app.command("heatmap")
def heatmap() -> None:
    """Print the Big 4 service heatmap (same for every profile)."""
    from niche_radar.reporting.formatters import format_heatmap
    from niche_radar.scoring.heatmap import build_heatmap

    typer.echo(format_heatmap(build_heatmap()))


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Step delay:    {config.wizard.step_delay_ms} ms")
    typer.echo(f"  Show heatmap:  {config.report.show_heatmap}")
    typer.echo(f"  Log level:     {config.logging.level}")
    typer.echo(f"  Debug mode:    {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
