import logging
from pathlib import Path
from typing import Annotated

import typer

from pitch_tunnel_matrix.cli._logging import configure_logging
from pitch_tunnel_matrix.cli._output import (
    print_error,
    print_league_summary,
    print_pitch_catalog,
    print_pitcher_matrix,
)
from pitch_tunnel_matrix.config import MatrixSettings, create_config, load_matrix_settings
from pitch_tunnel_matrix.domain.errors import TunnelError
from pitch_tunnel_matrix.domain.pitch_type import PITCH_CATALOG
from pitch_tunnel_matrix.domain.tunnel import TunnelMatrix
from pitch_tunnel_matrix.roster import load_roster
from pitch_tunnel_matrix.serialization import matrix_to_json
from pitch_tunnel_matrix.services.league import build_league_matrix
from pitch_tunnel_matrix.services.noise import TunnelNoise

logger = logging.getLogger(__name__)

app = typer.Typer(help="Pitch tunneling deception matrix.")


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    configure_logging(verbose=verbose)


def _settings(
    config_file: str, seed: int | None, workers: int | None, roster: Path | None
) -> MatrixSettings:
    cfg = create_config(
        yaml_path=config_file,
        seed=seed,
        max_workers=workers,
        roster_file=str(roster) if roster is not None else None,
    )
    return load_matrix_settings(cfg)


def _build(settings: MatrixSettings) -> TunnelMatrix:
    specs = load_roster(Path(settings.roster_file))
    logger.debug("Loaded %d arsenal(s) from %s", len(specs), settings.roster_file)
    return build_league_matrix(specs, TunnelNoise(seed=settings.seed), max_workers=settings.max_workers)


_RosterArg = Annotated[Path | None, typer.Argument(help="YAML roster file (default: matrix.roster_file).")]
_SeedOpt = Annotated[int | None, typer.Option("--seed", help="Noise seed for reproducible scores.")]
_ConfigOpt = Annotated[str, typer.Option("--config", help="YAML settings file.")]


@app.command(name="pitches")
def pitches_cmd() -> None:
    """List the pitch type catalog."""
    print_pitch_catalog(list(PITCH_CATALOG.values()))


@app.command(name="league")
def league_cmd(
    roster: _RosterArg = None,
    seed: _SeedOpt = None,
    workers: Annotated[int | None, typer.Option("--workers", help="Worker processes for profile building.")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the matrix as JSON.")] = False,
    config_file: _ConfigOpt = "tunnel.yaml",
) -> None:
    """Build tunnel profiles for every pitcher in a roster plus league averages."""
    try:
        matrix = _build(_settings(config_file, seed, workers, roster))
    except TunnelError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if as_json:
        typer.echo(matrix_to_json(matrix))
    else:
        print_league_summary(matrix)


@app.command(name="pitcher")
def pitcher_cmd(
    player_id: Annotated[int, typer.Argument(help="Player ID from the roster.")],
    roster: _RosterArg = None,
    seed: _SeedOpt = None,
    config_file: _ConfigOpt = "tunnel.yaml",
) -> None:
    """Show the full pair matrix for one pitcher against league averages."""
    try:
        matrix = _build(_settings(config_file, seed, None, roster))
    except TunnelError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    profile = matrix.pitcher(player_id)
    if profile is None:
        rejection = next((r for r in matrix.rejected if r.player_id == player_id), None)
        if rejection is not None:
            print_error(f"Arsenal for player {player_id} is invalid: {rejection.message}")
        else:
            print_error(f"No pitcher with player_id {player_id} in roster")
        raise typer.Exit(code=1)

    print_pitcher_matrix(profile, matrix.league_averages)
