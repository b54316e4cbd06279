"""Rendering helpers using Rich."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from rich.table import Table


def _team_label(team: Optional[Mapping[str, Any]]) -> str:
    if not team:
        return "[dim]TBD[/dim]"
    return f"{team.get('team', '')} [dim]({team.get('manager', '')})[/dim]"


def _points_color(mine: float, theirs: Optional[float]) -> str:
    if theirs is None or mine == theirs:
        return "white"
    return "green" if mine > theirs else "red"


def render_roster_table(teams: Sequence[Mapping[str, Any]], league_name: str) -> Table:
    table = Table(title=f"{league_name} Teams")
    table.add_column("ID", justify="right")
    table.add_column("Team", justify="left")
    table.add_column("Manager", justify="left")
    table.add_column("Username", justify="left", style="dim")
    for team in teams:
        table.add_row(
            str(team.get("roster_id", "")),
            team.get("team", ""),
            team.get("manager", ""),
            team.get("username", ""),
        )
    return table


def render_roster_detail(detail: Mapping[str, Any]) -> List[Table]:
    """One table per slot group: starters, bench, reserve."""
    tables = []
    for group in ("starters", "bench", "reserve"):
        players = detail.get(group) or []
        if not players and group == "reserve":
            continue
        table = Table(title=f"Roster {detail.get('roster_id')} - {group.title()}")
        table.add_column("#", justify="right")
        table.add_column("Player", justify="left")
        table.add_column("Pos", justify="center", style="cyan")
        table.add_column("NFL", justify="center")
        for idx, player in enumerate(players, start=1):
            table.add_row(
                str(idx),
                player.get("name", ""),
                player.get("pos", ""),
                player.get("team", ""),
            )
        tables.append(table)
    return tables


def render_matchups_table(result: Mapping[str, Any]) -> Table:
    meta = result.get("meta") or {}
    table = Table(title=f"Week {result.get('week')} Matchups ({meta.get('source', '')})")
    table.add_column("Home", justify="left")
    table.add_column("Pts", justify="right")
    table.add_column("Pts", justify="right")
    table.add_column("Away", justify="left")

    for matchup in result.get("matchups") or []:
        a, b = matchup.get("a"), matchup.get("b")
        a_points = a.get("points") if a else None
        b_points = b.get("points") if b else None
        table.add_row(
            _team_label(a),
            f"[{_points_color(a_points, b_points)}]{a_points:.2f}[/]" if a else "-",
            f"[{_points_color(b_points, a_points)}]{b_points:.2f}[/]" if b else "-",
            _team_label(b),
        )
    return table


def _moves(players: Sequence[Mapping[str, Any]], direction: str) -> str:
    lines = []
    for player in players:
        team = player.get(direction) or {}
        arrow = "->" if direction == "to" else "<-"
        lines.append(
            f"{player.get('name', '')} {player.get('pos', '')} {arrow} {team.get('team', '?')}"
        )
    return "\n".join(lines) or "-"


def render_transactions_table(result: Mapping[str, Any]) -> Table:
    table = Table(title=f"Round {result.get('round')} Transactions ({result.get('count', 0)})")
    table.add_column("When", justify="left", style="dim")
    table.add_column("Type", justify="left", style="cyan")
    table.add_column("Status", justify="left")
    table.add_column("Adds", justify="left", style="green")
    table.add_column("Drops", justify="left", style="red")
    table.add_column("Bid", justify="right")

    for item in result.get("items") or []:
        bid = item.get("waiver_bid") or 0
        table.add_row(
            str(item.get("when", ""))[:16].replace("T", " "),
            item.get("type", ""),
            item.get("status", ""),
            _moves(item.get("adds") or [], "to"),
            _moves(item.get("drops") or [], "from"),
            f"${bid}" if bid else "-",
        )
    return table


def _slot(node: Mapping[str, Any], side: str) -> str:
    team = node.get(side)
    if team:
        return _team_label(team)
    source = node.get(f"{side}_from") or {}
    if "w" in source:
        return f"[dim]Winner of M{source['w']}[/dim]"
    if "l" in source:
        return f"[dim]Loser of M{source['l']}[/dim]"
    return "[dim]TBD[/dim]"


def render_bracket_tables(result: Mapping[str, Any]) -> List[Table]:
    tables = []
    start = result.get("playoff_start_week")
    for name in ("winners", "losers"):
        title = f"{name.title()} Bracket"
        if start:
            title += f" (playoffs start week {start})"
        table = Table(title=title)
        table.add_column("Round", justify="right")
        table.add_column("Match", justify="right")
        table.add_column("Team 1", justify="left")
        table.add_column("Team 2", justify="left")
        table.add_column("Winner", justify="right", style="green")
        for node in result.get(name) or []:
            table.add_row(
                str(node.get("r") or ""),
                str(node.get("m") or ""),
                _slot(node, "t1"),
                _slot(node, "t2"),
                str(node.get("w") or "-"),
            )
        tables.append(table)
    return tables


def render_games_table(games: Dict[str, Any]) -> Table:
    table = Table(title=f"NFL Games {games.get('date')} ({games.get('count', 0)})")
    table.add_column("Kickoff", justify="left", style="dim")
    table.add_column("Away", justify="left")
    table.add_column("Score", justify="center")
    table.add_column("Home", justify="left")
    table.add_column("Status", justify="left", style="cyan")
    table.add_column("TV", justify="left", style="dim")

    for game in games.get("games") or []:
        away, home = game.get("away") or {}, game.get("home") or {}
        if away.get("score") is None and home.get("score") is None:
            score = "-"
        else:
            score = f"{away.get('score', 0)} - {home.get('score', 0)}"
        table.add_row(
            (game.get("startLocal") or "")[11:16],
            away.get("abbrev") or away.get("name") or "",
            score,
            home.get("abbrev") or home.get("name") or "",
            str(game.get("status", "")).replace("STATUS_", "").title(),
            game.get("network") or "",
        )
    return table


def render_cache_stats(stats: Mapping[str, Any]) -> Table:
    table = Table(title=f"Cache ({stats.get('hits', 0)} hits / {stats.get('misses', 0)} misses)")
    table.add_column("Namespace", justify="left")
    table.add_column("Fresh", justify="right", style="green")
    table.add_column("Stale", justify="right", style="yellow")
    for namespace, counts in sorted((stats.get("namespaces") or {}).items()):
        table.add_row(namespace, str(counts.get("fresh", 0)), str(counts.get("stale", 0)))
    return table
