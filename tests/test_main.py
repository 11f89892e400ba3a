"""Tests for the command line interface."""

import json
from types import SimpleNamespace

import pytest

import hoops_totals.main as main_mod
from hoops_totals.data.seasons import DATA_DIR_ENV
from hoops_totals.live.signals import coerce_live_games
from hoops_totals.llm.summary import GEMINI_API_KEY_ENV

LIVE_ODDS = [
    {
        "id": "g1",
        "commence_time": "2025-01-20T00:30:00Z",
        "home_team": "LA Clippers",
        "away_team": "Miami Heat",
        "bookmakers": [
            {
                "key": "pinnacle",
                "markets": [
                    {
                        "key": "totals",
                        "outcomes": [
                            {"name": "Over", "price": 1.95, "point": 180.5},
                            {"name": "Under", "price": 1.87, "point": 180.5},
                        ],
                    }
                ],
            }
        ],
    }
]


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "season.json"
    assert main_mod.main(["sample", "--output", str(path), "--games", "30", "--seed", "11"]) == 0
    return path


def test_sample_command(sample_file):
    """Test sample command."""
    data = json.loads(sample_file.read_text())
    assert len(data) == 30


def test_process_command(tmp_path, sample_file):
    """Test process command."""
    output = tmp_path / "processed.json"
    teams_output = tmp_path / "teams.json"
    code = main_mod.main(
        ["process", "--input", str(sample_file), "--output", str(output), "--teams-output", str(teams_output)]
    )

    assert code == 0
    assert len(json.loads(output.read_text())["matches"]) == 30
    assert json.loads(teams_output.read_text())["teams"]


def test_teams_command_resolves_feed_names(sample_file, capsys):
    """Test teams command with feed spellings."""
    assert main_mod.main(["teams", "--input", str(sample_file), "--team", "LA Clippers"]) == 0
    assert "Los Angeles Clippers" in capsys.readouterr().out

    assert main_mod.main(["teams", "--input", str(sample_file), "--team", "Nowhere FC"]) == 1


def test_matchup_command(sample_file, capsys):
    """Test matchup command."""
    code = main_mod.main(["matchup", "--input", str(sample_file), "Boston Celtics", "Miami Heat"])
    assert code == 0
    assert "Boston Celtics vs Miami Heat" in capsys.readouterr().out


def test_insights_command(sample_file, capsys):
    """Test insights command."""
    assert main_mod.main(["insights", "--input", str(sample_file)]) == 0
    assert "Most volatile" in capsys.readouterr().out

    assert main_mod.main(["insights", "--input", str(sample_file), "--match-id", "sample-0030"]) == 0
    assert "Q4 trend" in capsys.readouterr().out


def test_backtest_command_writes_results(tmp_path, sample_file):
    """Test backtest command output file."""
    output = tmp_path / "backtest.json"
    code = main_mod.main(
        ["backtest", "--input", str(sample_file), "--strategy", "ALL_OVER", "--wager", "50", "--output", str(output)]
    )

    assert code == 0
    result = json.loads(output.read_text())
    assert result["total_bets"] == 30
    assert result["wins"] + result["losses"] + result["pushes"] == 30


def test_backtest_command_rejects_invalid_wager(sample_file, capsys):
    """Test backtest command with a bad wager."""
    assert main_mod.main(["backtest", "--input", str(sample_file), "--wager", "0"]) == 1
    assert "Error" in capsys.readouterr().out


def test_live_command_with_odds_file(tmp_path, sample_file, capsys):
    """Test live command with an odds file."""
    odds_file = tmp_path / "odds.json"
    odds_file.write_text(json.dumps(LIVE_ODDS))
    csv_path = tmp_path / "edges.csv"

    code = main_mod.main(
        ["live", "--input", str(sample_file), "--odds-file", str(odds_file), "--csv", str(csv_path)]
    )

    assert code == 0
    out = capsys.readouterr().out
    assert "LA Clippers vs Miami Heat" in out
    assert "REVERSION OVER" in out
    assert csv_path.exists()


def test_live_command_always_uses_current_season(tmp_path, sample_file, capsys):
    """Test that live edges ignore older seasons and require the current one."""
    with pytest.raises(SystemExit):
        main_mod.main(["live", "--season", "2024"])

    data_dir = tmp_path / "seasons"
    data_dir.mkdir()
    (data_dir / "nba_2024.json").write_text(sample_file.read_text())
    odds_file = tmp_path / "odds.json"
    odds_file.write_text(json.dumps(LIVE_ODDS))

    assert main_mod.main(["live", "--data-dir", str(data_dir), "--odds-file", str(odds_file)]) == 1
    assert "nba_2025.json" in capsys.readouterr().out

    (data_dir / "nba_2025.json").write_text(sample_file.read_text())
    assert main_mod.main(["live", "--data-dir", str(data_dir), "--odds-file", str(odds_file)]) == 0
    assert "LA Clippers vs Miami Heat" in capsys.readouterr().out


def test_live_refresh_reports_line_movements(monkeypatch, sample_file, capsys):
    """Test that a refreshed odds snapshot is diffed against the cached one."""
    moved = json.loads(json.dumps(LIVE_ODDS))
    for outcome in moved[0]["bookmakers"][0]["markets"][0]["outcomes"]:
        outcome["point"] = 183.5

    class FakeOdds:
        def __init__(self, config=None, cache_dir=None):
            pass

        def cached_games(self):
            return coerce_live_games(LIVE_ODDS)

        def fetch_live_games(self, force_refresh=False):
            return coerce_live_games(moved if force_refresh else LIVE_ODDS)

    monkeypatch.setattr(main_mod, "OddsApiScraper", FakeOdds)

    assert main_mod.main(["live", "--input", str(sample_file), "--refresh"]) == 0
    out = capsys.readouterr().out
    assert "Line movements (1)" in out
    assert "180.5 -> 183.5 UP" in out

    assert main_mod.main(["live", "--input", str(sample_file)]) == 0
    assert "Line movements" not in capsys.readouterr().out


def test_summary_command_without_key(monkeypatch, sample_file, capsys):
    """Test summary command without an API key."""
    monkeypatch.delenv(GEMINI_API_KEY_ENV, raising=False)
    assert main_mod.main(["summary", "--input", str(sample_file)]) == 0
    assert "API Key Missing" in capsys.readouterr().out


def test_missing_season_file(tmp_path, monkeypatch, capsys):
    """Test commands with a missing season file."""
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))
    assert main_mod.main(["teams"]) == 1
    assert "Season file not found" in capsys.readouterr().out


def test_load_snapshot_uses_data_dir(tmp_path, sample_file):
    """Test season loading from the data directory."""
    target = tmp_path / "data"
    target.mkdir()
    (target / "nba_2024.json").write_text(sample_file.read_text())

    args = SimpleNamespace(input=None, season="2024", data_dir=str(target), feed_url=None, cache_dir=None)
    snapshot = main_mod.load_snapshot(args)

    assert snapshot.season_id == "2024"
    assert len(snapshot.matches) == 30


def test_load_snapshot_falls_back_to_feed(tmp_path, monkeypatch, raw_match_factory):
    """Test season loading from the feed."""
    class FakeFeed:
        def __init__(self, base_url, cache_dir=None):
            self.base_url = base_url

        def fetch_season(self, season_id):
            return [raw_match_factory()]

    monkeypatch.setattr(main_mod, "SeasonFeedScraper", FakeFeed)
    args = SimpleNamespace(input=None, season=None, data_dir=str(tmp_path), feed_url="https://example.test", cache_dir=None)

    snapshot = main_mod.load_snapshot(args)
    assert snapshot.season_id == "2025"
    assert len(snapshot.matches) == 1


def test_no_command_prints_help():
    """Test running without a command."""
    assert main_mod.main([]) == 1
