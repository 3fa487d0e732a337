from rich.console import Console
from rich.table import Table

from pitch_tunnel_matrix.domain.pitch_type import PitchTypeInfo
from pitch_tunnel_matrix.domain.tunnel import LeagueTunnelAverages, PitcherArsenalProfile, TunnelMatrix
from pitch_tunnel_matrix.services.league import pair_delta, population_percentile
from pitch_tunnel_matrix.services.scouting import scouting_note

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def _fmt_optional(value: object) -> str:
    return "-" if value is None else str(value)


def print_pitch_catalog(catalog: list[PitchTypeInfo]) -> None:
    table = Table(title="Pitch types")
    table.add_column("Tag")
    table.add_column("Pitch")
    table.add_column("Velo", justify="right")
    table.add_column("VBrk", justify="right")
    table.add_column("HBrk", justify="right")
    table.add_column("Release", justify="right")
    for info in catalog:
        table.add_row(
            info.pitch_type.value,
            info.label,
            f"{info.avg_velocity:.1f}",
            f"{info.vertical_break:+.1f}",
            f"{info.horizontal_break:+.1f}",
            f"{info.release_height:.1f}",
        )
    console.print(table)


def print_league_summary(matrix: TunnelMatrix) -> None:
    if not matrix.pitchers:
        console.print("No pitchers to report.")
    else:
        table = Table(title="Pitcher tunnel profiles")
        table.add_column("ID", justify="right")
        table.add_column("Name")
        table.add_column("Team")
        table.add_column("Role")
        table.add_column("Arsenal")
        table.add_column("Score", justify="right")
        table.add_column("Grade")
        table.add_column("Best pair")
        table.add_column("Worst pair")
        table.add_column("Pctl (est)", justify="right")
        table.add_column("Pctl (rank)", justify="right")
        for p in matrix.pitchers:
            table.add_row(
                str(p.player_id),
                p.name,
                p.team,
                p.role.value,
                " ".join(pt.value for pt in p.pitch_types),
                _fmt_optional(p.overall_tunnel_score),
                _fmt_optional(p.overall_grade),
                f"{p.best_pair.key} ({p.best_pair.tunnel_score})" if p.best_pair else "-",
                f"{p.worst_pair.key} ({p.worst_pair.tunnel_score})" if p.worst_pair else "-",
                _fmt_optional(p.league_percentile),
                _fmt_optional(population_percentile(p, matrix.pitchers)),
            )
        console.print(table)

    print_league_averages(matrix.league_averages)

    for rejection in matrix.rejected:
        err_console.print(f"[yellow]Skipped[/yellow] {rejection.name} ({rejection.player_id}): {rejection.message}")


def print_league_averages(averages: LeagueTunnelAverages) -> None:
    table = Table(title=f"League pair averages (overall {averages.overall_avg})")
    table.add_column("Pair")
    table.add_column("Avg", justify="right")
    for key, avg in averages.pair_averages.items():
        table.add_row(str(key), str(avg))
    console.print(table)


def print_pitcher_matrix(profile: PitcherArsenalProfile, averages: LeagueTunnelAverages) -> None:
    console.print(f"[bold]{profile.name}[/bold] ({profile.team} {profile.role.value}) — skill {profile.skill_level:.2f}")
    if profile.is_degenerate:
        console.print("  Fewer than two pitch types; no tunnel pairs.")
        return
    console.print(
        f"  Overall: {profile.overall_tunnel_score} ({profile.overall_grade}),"
        f" est. percentile {profile.league_percentile}"
    )

    table = Table()
    table.add_column("Pair")
    table.add_column("Release", justify="right")
    table.add_column("Movement", justify="right")
    table.add_column("ΔVelo", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Grade")
    table.add_column("Whiff+", justify="right")
    table.add_column("vs Lg", justify="right")
    table.add_column("Scouting")
    for pair in profile.tunnel_pairs:
        delta = pair_delta(pair, averages)
        table.add_row(
            str(pair.key),
            str(pair.release_similarity),
            str(pair.movement_divergence),
            f"{pair.velo_differential:.1f}",
            str(pair.tunnel_score),
            pair.grade,
            f"{pair.whiff_rate_delta:.1f}",
            "-" if delta is None else f"{delta:+d}",
            scouting_note(pair.pitch_a, pair.pitch_b, pair.tunnel_score),
        )
    console.print(table)
