"""Main CLI interface for the NBA totals analytics engine."""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

from .analysis import analyze_matchup
from .backtest import BacktestConfig, run_backtest
from .data.loader import DataLoader
from .data.normalize import lookup_team
from .data.scrapers import OddsApiScraper, SeasonFeedScraper
from .data.seasons import SEASONS, default_season, get_season, season_path
from .features import (
    SeasonSnapshot,
    advanced_ratings,
    build_season_snapshot,
    calculate_market_insights,
    generate_match_insights,
    quarter_averages,
    recent_form,
)
from .features.team_aggregator import index_team_stats
from .live import SIGNAL_FILTERS, detect_line_movements, evaluate_live_signals, export_live_edges_csv
from .live.signals import coerce_live_games
from .llm import generate_summary
from .strategies import DEFAULT_EFFICIENCY_THRESHOLD, DEFAULT_MARGIN, STRATEGY_IDS, create_strategy
from .strategies.rules import format_number


def load_snapshot(args) -> Optional[SeasonSnapshot]:
    """
    Build the season snapshot for a command.

    ``--input`` wins; otherwise the season file is read from the data
    directory, falling back to ``--feed-url`` when it is not on disk.
    """
    if getattr(args, "input", None):
        try:
            raw = DataLoader.load_raw_matches(args.input)
        except (OSError, ValueError) as e:
            print(f"Error loading data: {e}")
            return None
        return build_season_snapshot(raw, season_id=Path(args.input).stem)

    season_id = getattr(args, "season", None) or default_season().id
    season = get_season(season_id)
    if season is None:
        print(f"Unknown season: {season_id}. Available: {', '.join(s.id for s in SEASONS)}")
        return None

    path = season_path(season, getattr(args, "data_dir", None))
    if path.exists():
        try:
            raw = DataLoader.load_raw_matches(str(path))
        except (OSError, ValueError) as e:
            print(f"Error loading data: {e}")
            return None
    elif getattr(args, "feed_url", None):
        raw = SeasonFeedScraper(args.feed_url, cache_dir=getattr(args, "cache_dir", None)).fetch_season(season.id)
    else:
        print(f"Season file not found: {path}")
        return None

    return build_season_snapshot(raw, season_id=season.id)


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date (expected YYYY-MM-DD): {value}")


def _find_team(snapshot: SeasonSnapshot, name: str):
    return lookup_team(index_team_stats(snapshot.teams), name)


def _write_json(payload, output: str) -> None:
    with open(output, "w") as f:
        json.dump(payload, f, indent=2)


def create_sample(args):
    """Create sample season file."""
    print(f"Creating sample season data at {args.output}...")
    DataLoader.create_sample_data(args.output, num_games=args.games, seed=args.seed)
    print("✓ Sample data created!")
    print("\nYou can now run a backtest with:")
    print(f"  hoops-totals backtest --input {args.output} --strategy TEAM_MODEL")
    return 0


def process_season(args):
    """Process raw matches and write derived records."""
    snapshot = load_snapshot(args)
    if snapshot is None:
        return 1

    print(f"Processed {len(snapshot.matches)} matches, {len(snapshot.teams)} teams")
    DataLoader.save_processed(snapshot.matches, args.output)
    print(f"✓ Processed matches written to {args.output}")
    if args.teams_output:
        DataLoader.save_team_stats(snapshot.teams, args.teams_output)
        print(f"✓ Team stats written to {args.teams_output}")
    return 0


def show_teams(args):
    """Print the team table or a single team's profile."""
    snapshot = load_snapshot(args)
    if snapshot is None:
        return 1

    if args.team:
        stats = _find_team(snapshot, args.team)
        if stats is None:
            print(f"Team not found: {args.team}")
            return 1

        ratings = advanced_ratings(stats)
        quarters = quarter_averages(stats.name, snapshot.matches)
        print(f"\n{stats.name} ({stats.games_played} games)")
        print(f"  PPG {stats.avg_points_for:.1f}  OPP {stats.avg_points_against:.1f}  Pace {stats.avg_pace:.1f}")
        print(f"  TS% {stats.avg_ts:.1f}  FG% {stats.avg_fg_pct:.1f}  3P% {stats.avg_3p_pct:.1f}  Over {stats.over_rate:.1f}%")
        print(f"  ORtg {ratings.ortg:.1f}  DRtg {ratings.drtg:.1f}  Net {ratings.net_rating:+.1f}  TOV% {ratings.tov_pct:.1f}")
        print("  Quarter avg: " + "  ".join(f"Q{i + 1} {q:.1f}" for i, q in enumerate(quarters)))
        print("  Recent form:")
        for game in recent_form(stats.name, snapshot.matches):
            print(f"    {game.date.isoformat()}  {game.result} vs {game.opponent}  {game.score}  {game.total_result} {format_number(game.line)}")
        return 0

    print(f"\n{'Team':<28}{'GP':>4}{'PPG':>8}{'OPP':>8}{'Pace':>8}{'TS%':>7}{'Over%':>8}")
    for stats in sorted(snapshot.teams, key=lambda t: t.name):
        print(
            f"{stats.name:<28}{stats.games_played:>4}{stats.avg_points_for:>8.1f}"
            f"{stats.avg_points_against:>8.1f}{stats.avg_pace:>8.1f}{stats.avg_ts:>7.1f}{stats.over_rate:>8.1f}"
        )
    if args.output:
        DataLoader.save_team_stats(snapshot.teams, args.output)
        print(f"\n✓ Team stats written to {args.output}")
    return 0


def show_matchup(args):
    """Rule-based signals for a pairing."""
    snapshot = load_snapshot(args)
    if snapshot is None:
        return 1

    team_a = _find_team(snapshot, args.team_a)
    team_b = _find_team(snapshot, args.team_b)
    for name, stats in ((args.team_a, team_a), (args.team_b, team_b)):
        if stats is None:
            print(f"Team not found: {name}")
            return 1

    insights = analyze_matchup(team_a, team_b)
    print(f"\n{team_a.name} vs {team_b.name}")
    if not insights:
        print("  No matchup signals.")
    for insight in insights:
        print(f"  [{insight.type.value}] {insight.title}: {insight.desc}")
    return 0


def show_insights(args):
    """Market insights for the season, or look-back insights for one match."""
    snapshot = load_snapshot(args)
    if snapshot is None:
        return 1

    if args.match_id:
        match = next((m for m in snapshot.matches if m.id == args.match_id), None)
        if match is None:
            print(f"Match not found: {args.match_id}")
            return 1
        insights = generate_match_insights(match, snapshot.matches)
        print(f"\n{match.home_team} vs {match.away_team} ({match.date.isoformat()})")
        print(f"  Last 15 avg total: {insights.mean15:.1f} (SD {insights.sd15:.1f})")
        print(f"  240+ rate (last 10): {insights.high_scoring_rate:.0f}%")
        print(f"  Q4 trend: {insights.q4_trend} ({insights.q4_trend_value:+.1f})")
        return 0

    market = calculate_market_insights(snapshot.matches)
    labels = [
        ("Most volatile", market.most_volatile),
        ("Most predictable", market.most_predictable),
        ("Over machine", market.most_over),
        ("Under machine", market.most_under),
    ]
    print("\nMarket insights")
    for label, profile in labels:
        if profile is None:
            print(f"  {label}: -")
        else:
            print(f"  {label}: {profile.name} (avg diff {profile.avg_diff:.1f}, over {profile.over_pct:.1f}%)")
    return 0


def backtest(args):
    """Run a strategy backtest."""
    snapshot = load_snapshot(args)
    if snapshot is None:
        return 1

    team = None
    if args.team:
        stats = _find_team(snapshot, args.team)
        team = stats.name if stats else args.team

    try:
        strategy = create_strategy(args.strategy, margin=args.margin, efficiency_threshold=args.efficiency_threshold)
        config = BacktestConfig(
            strategy=strategy,
            wager=args.wager,
            team=team,
            start_date=args.start,
            end_date=args.end,
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    result = run_backtest(config, snapshot.matches, snapshot.backtest_teams)

    print(f"\n{'='*60}")
    print(f"BACKTEST - {strategy.label}")
    print(f"{'='*60}\n")
    print(f"Bets: {result.total_bets}  W-L-P: {result.wins}-{result.losses}-{result.pushes}")
    print(f"Win rate: {result.win_rate:.1f}%")
    print(f"Profit: {result.profit:+.2f}  ROI: {result.roi:+.2f}%")
    print(f"League avg total: {result.league_avg:.1f}")

    if args.show_bets:
        print()
        for entry in result.history[: args.show_bets]:
            print(
                f"  {entry.date.isoformat()}  {entry.home} vs {entry.away}  {entry.score} / "
                f"{format_number(entry.line)}  {entry.pick.value} {entry.result} {entry.pnl:+.2f}  ({entry.reason})"
            )

    if args.output:
        _write_json(result.to_dict(), args.output)
        print(f"\n✓ Backtest results written to {args.output}")
    return 0


def live(args):
    """Evaluate a live odds snapshot against the current season."""
    snapshot = load_snapshot(args)
    if snapshot is None:
        return 1

    previous = []
    if args.odds_file:
        with open(args.odds_file, "r") as f:
            games = coerce_live_games(json.load(f))
    else:
        scraper = OddsApiScraper(cache_dir=args.cache_dir)
        if args.refresh:
            previous = scraper.cached_games()
        games = scraper.fetch_live_games(force_refresh=args.refresh)

    if not games:
        print("No live games available.")
        return 0

    try:
        signals = evaluate_live_signals(
            games,
            snapshot.teams,
            snapshot.matches,
            margin=args.margin,
            efficiency_threshold=args.efficiency_threshold,
            signal_filter=args.filter,
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    movements = detect_line_movements(previous, games)
    if movements:
        names = {game.id: f"{game.home_team} vs {game.away_team}" for game in games}
        print(f"\nLine movements ({len(movements)})")
        for move in movements.values():
            print(
                f"  {names.get(move.game_id, move.game_id)}  "
                f"{format_number(move.old_line)} -> {format_number(move.new_line)} {move.direction}"
            )

    print(f"\nLive signals ({len(signals)} of {len(games)} games, filter {args.filter})")
    for signal in signals:
        picks = []
        if signal.model_pick:
            picks.append(f"MODEL {signal.model_pick.value} ({signal.model_edge:+.1f})")
        if signal.reversion_pick:
            picks.append(f"REVERSION {signal.reversion_pick.value}")
        if signal.efficiency_pick:
            picks.append(f"EFFICIENCY {signal.efficiency_pick.value} ({signal.combined_fg:.1f}%)")
        print(
            f"  {signal.home} vs {signal.away}  line {format_number(signal.line)}  "
            f"proj {signal.projected:.1f}  {', '.join(picks) or '-'}"
        )

    if args.csv:
        rows = export_live_edges_csv(args.csv, games, snapshot.teams, tz=args.timezone)
        print(f"\n✓ {rows} live edges written to {args.csv}")
    return 0


def summary(args):
    """AI summary of the season's totals trends."""
    snapshot = load_snapshot(args)
    if snapshot is None:
        return 1

    text = generate_summary(snapshot.matches, snapshot.teams)
    if text is None:
        print("Failed to generate summary. Please try again later.")
        return 1
    print(text)
    return 0


def _add_season_arguments(parser, with_season: bool = True) -> None:
    if with_season:
        parser.add_argument("--input", "-i", default=None, help="Season JSON file (overrides --season)")
        parser.add_argument(
            "--season",
            choices=[s.id for s in SEASONS],
            default=None,
            help=f"Season id (default: {default_season().id})",
        )
    else:
        # live edges always come from the current season
        parser.add_argument("--input", "-i", default=None, help="Current season JSON file")
    parser.add_argument("--data-dir", default=None, help="Directory with season files (default: $HOOPS_TOTALS_DATA_DIR)")
    parser.add_argument("--feed-url", default=None, help="Base URL to fetch missing season files from")
    parser.add_argument("--cache-dir", default=None, help="Cache directory for HTTP responses")


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="NBA totals analytics - match processing, backtests and live edges"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    sample_parser = subparsers.add_parser("sample", help="Create sample season data")
    sample_parser.add_argument("--output", "-o", default="sample_season.json", help="Output JSON file")
    sample_parser.add_argument("--games", type=int, default=60, help="Number of games (default: 60)")
    sample_parser.add_argument("--seed", type=int, default=2025, help="Random seed")

    process_parser = subparsers.add_parser("process", help="Process raw matches into derived records")
    _add_season_arguments(process_parser)
    process_parser.add_argument("--output", "-o", default="processed_matches.json", help="Output JSON file")
    process_parser.add_argument("--teams-output", default=None, help="Optional team stats JSON file")

    teams_parser = subparsers.add_parser("teams", help="Show team season averages")
    _add_season_arguments(teams_parser)
    teams_parser.add_argument("--team", default=None, help="Show a single team's profile")
    teams_parser.add_argument("--output", "-o", default=None, help="Optional team stats JSON file")

    matchup_parser = subparsers.add_parser("matchup", help="Rule-based matchup signals")
    _add_season_arguments(matchup_parser)
    matchup_parser.add_argument("team_a", help="First team")
    matchup_parser.add_argument("team_b", help="Second team")

    insights_parser = subparsers.add_parser("insights", help="Market or single-match insights")
    _add_season_arguments(insights_parser)
    insights_parser.add_argument("--match-id", default=None, help="Look-back insights for one match")

    backtest_parser = subparsers.add_parser("backtest", help="Backtest a totals strategy")
    _add_season_arguments(backtest_parser)
    backtest_parser.add_argument("--strategy", choices=STRATEGY_IDS, default=STRATEGY_IDS[0], help="Strategy id")
    backtest_parser.add_argument("--wager", type=float, default=100.0, help="Stake per bet (default: 100)")
    backtest_parser.add_argument("--team", default=None, help="Only games involving this team")
    backtest_parser.add_argument("--start", type=_parse_date, default=None, help="Start date YYYY-MM-DD (inclusive)")
    backtest_parser.add_argument("--end", type=_parse_date, default=None, help="End date YYYY-MM-DD (inclusive)")
    backtest_parser.add_argument("--margin", type=float, default=DEFAULT_MARGIN, help="Value margin in points")
    backtest_parser.add_argument(
        "--efficiency-threshold",
        type=float,
        default=DEFAULT_EFFICIENCY_THRESHOLD,
        help="Combined FG%% threshold for HIGH_EFFICIENCY_OVER",
    )
    backtest_parser.add_argument("--show-bets", type=int, default=0, help="Print the first N bet log entries")
    backtest_parser.add_argument("--output", "-o", default=None, help="Optional results JSON file")

    live_parser = subparsers.add_parser("live", help="Evaluate live odds")
    _add_season_arguments(live_parser, with_season=False)
    live_parser.add_argument("--odds-file", default=None, help="Odds snapshot JSON instead of the live API")
    live_parser.add_argument("--refresh", action="store_true", help="Ignore cached odds")
    live_parser.add_argument("--filter", choices=SIGNAL_FILTERS, default=SIGNAL_FILTERS[0], help="Signal filter")
    live_parser.add_argument("--margin", type=float, default=DEFAULT_MARGIN, help="Model edge in points")
    live_parser.add_argument(
        "--efficiency-threshold",
        type=float,
        default=DEFAULT_EFFICIENCY_THRESHOLD,
        help="Combined FG%% threshold",
    )
    live_parser.add_argument("--csv", default=None, help="Export live edges to CSV")
    live_parser.add_argument("--timezone", default="US/Eastern", help="Timezone for game dates in the CSV")

    summary_parser = subparsers.add_parser("summary", help="AI summary of season trends")
    _add_season_arguments(summary_parser)

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "sample":
        return create_sample(args)
    elif args.command == "process":
        return process_season(args)
    elif args.command == "teams":
        return show_teams(args)
    elif args.command == "matchup":
        return show_matchup(args)
    elif args.command == "insights":
        return show_insights(args)
    elif args.command == "backtest":
        return backtest(args)
    elif args.command == "live":
        return live(args)
    elif args.command == "summary":
        return summary(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
