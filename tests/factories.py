"""
Test Factories for League Dashboard tests

Provides factory functions to create test instances of models and raw ESPN
payloads with sensible defaults.
"""
from typing import Optional, Dict, Any, List
from unittest.mock import AsyncMock, MagicMock

from api.client import LeagueClient
from config import LeagueConfig
from models.boxscore import Boxscore, PlayerSlot
from models.division import Division
from models.league import LeagueInfo
from models.team import Team


class TeamFactory:
    """Factory for creating Team test instances."""

    @staticmethod
    def create(
        id: int = 1,
        name: Optional[str] = None,
        wins: int = 5,
        losses: int = 3,
        ties: int = 0,
        total_points_scored: float = 1000.0,
        points_against: float = 950.0,
        **kwargs
    ) -> Team:
        """Create a Team instance with sensible defaults."""
        defaults = {
            "id": id,
            "name": name or f"Team {id}",
            "wins": wins,
            "losses": losses,
            "ties": ties,
            "total_points_scored": total_points_scored,
            "points_against": points_against,
        }
        defaults.update(kwargs)
        return Team(**defaults)


class PlayerSlotFactory:
    """Factory for creating PlayerSlot test instances."""

    @staticmethod
    def create(
        full_name: str = "Test Player",
        rostered_position: str = "WR",
        default_position: Optional[str] = None,
        pro_team_abbreviation: str = "KC",
        total_points: Optional[float] = 10.0,
        projected_point_breakdown: Optional[Dict[str, float]] = None,
        **kwargs
    ) -> PlayerSlot:
        """Create a PlayerSlot instance with sensible defaults."""
        defaults = {
            "full_name": full_name,
            "rostered_position": rostered_position,
            "default_position": default_position or rostered_position,
            "pro_team_abbreviation": pro_team_abbreviation,
            "total_points": total_points,
            "projected_point_breakdown": projected_point_breakdown,
        }
        defaults.update(kwargs)
        return PlayerSlot(**defaults)

    @staticmethod
    def lineup() -> List[PlayerSlot]:
        """A scrambled lineup covering every slot type, bench and IR."""
        return [
            PlayerSlotFactory.create("Bench Runner", "Bench", default_position="RB"),
            PlayerSlotFactory.create("Kicker", "K"),
            PlayerSlotFactory.create("Wideout One", "WR"),
            PlayerSlotFactory.create("Hurt Guy", "IR", default_position="TE"),
            PlayerSlotFactory.create("Quarterback", "QB", projected_point_breakdown={"53": 12.5, "3": 6.0}),
            PlayerSlotFactory.create("Flex Back", "RB/WR/TE", default_position="RB"),
            PlayerSlotFactory.create("Defense", "D/ST"),
            PlayerSlotFactory.create("Bench Wideout", "Bench", default_position="WR"),
            PlayerSlotFactory.create("Running Back", "RB"),
            PlayerSlotFactory.create("Wideout Two", "WR"),
            PlayerSlotFactory.create("Tight End", "TE"),
        ]


class BoxscoreFactory:
    """Factory for creating Boxscore test instances."""

    @staticmethod
    def create(
        home_team_id: int = 1,
        away_team_id: int = 2,
        home_score: float = 100.0,
        away_score: float = 90.0,
        home_roster: Optional[List[PlayerSlot]] = None,
        away_roster: Optional[List[PlayerSlot]] = None,
    ) -> Boxscore:
        """Create a Boxscore instance with sensible defaults."""
        return Boxscore(
            home_team_id=home_team_id,
            away_team_id=away_team_id,
            home_score=home_score,
            away_score=away_score,
            home_roster=home_roster if home_roster is not None else [],
            away_roster=away_roster if away_roster is not None else [],
        )


def league_config(division: Division = Division.GREEN, **kwargs) -> LeagueConfig:
    """Create a LeagueConfig with sensible defaults."""
    defaults = {
        "division": division,
        "league_id": 111111,
        "season_id": 2025,
    }
    defaults.update(kwargs)
    return LeagueConfig(**defaults)


class ESPNPayloadFactory:
    """Raw ESPN read API payloads as returned by the league endpoint."""

    @staticmethod
    def league_info(name: str = "Green Division", matchup_period: int = 7, scoring_period: int = 7) -> Dict[str, Any]:
        return {
            "id": 111111,
            "seasonId": 2025,
            "scoringPeriodId": scoring_period,
            "settings": {"name": name},
            "status": {"currentMatchupPeriod": matchup_period, "latestScoringPeriod": scoring_period},
        }

    @staticmethod
    def team(id: int = 1, name: str = "Team One", wins: int = 5, losses: int = 2, ties: int = 0,
             points: float = 812.4, points_against: float = 700.1) -> Dict[str, Any]:
        return {
            "id": id,
            "name": name,
            "points": points,
            "record": {
                "overall": {
                    "wins": wins,
                    "losses": losses,
                    "ties": ties,
                    "pointsFor": points,
                    "pointsAgainst": points_against,
                }
            },
        }

    @staticmethod
    def roster_entry(full_name: str = "Patrick Mahomes", lineup_slot_id: int = 0, default_position_id: int = 1,
                     pro_team_id: int = 12, applied_total: Optional[float] = 22.5,
                     projected: Optional[Dict[str, float]] = None, scoring_period: int = 7) -> Dict[str, Any]:
        stats = [{"statSourceId": 0, "scoringPeriodId": scoring_period, "appliedStats": {"3": 12.0}}]
        if projected is not None:
            stats.append({"statSourceId": 1, "scoringPeriodId": scoring_period, "appliedStats": projected})
        pool_entry: Dict[str, Any] = {
            "player": {
                "fullName": full_name,
                "defaultPositionId": default_position_id,
                "proTeamId": pro_team_id,
                "stats": stats,
            }
        }
        if applied_total is not None:
            pool_entry["appliedStatTotal"] = applied_total
        return {"lineupSlotId": lineup_slot_id, "playerPoolEntry": pool_entry}

    @staticmethod
    def schedule_item(home_team_id: int = 1, away_team_id: Optional[int] = 2, matchup_period: int = 7,
                      home_points: float = 101.5, away_points: float = 88.0,
                      home_entries: Optional[List[Dict[str, Any]]] = None,
                      away_entries: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
        item: Dict[str, Any] = {
            "matchupPeriodId": matchup_period,
            "home": {
                "teamId": home_team_id,
                "totalPoints": home_points,
                "rosterForCurrentScoringPeriod": {"entries": home_entries or []},
            },
        }
        if away_team_id is not None:
            item["away"] = {
                "teamId": away_team_id,
                "totalPoints": away_points,
                "rosterForCurrentScoringPeriod": {"entries": away_entries or []},
            }
        return item


class LeagueClientFactory:
    """Factory for LeagueClient doubles that never touch HTTP."""

    @staticmethod
    def double(division: Division, name: str, matchup_period: int = 7, scoring_period: int = 7) -> MagicMock:
        """League client returning four teams split over two matchups."""
        client = MagicMock(spec=LeagueClient)
        client.league = league_config(division)
        client.fetch_league_info = AsyncMock(return_value=LeagueInfo(
            name=name,
            current_matchup_period_id=matchup_period,
            current_scoring_period_id=scoring_period
        ))
        client.fetch_teams = AsyncMock(return_value=[
            TeamFactory.create(id=1, name=f"{name} One", wins=8, total_points_scored=1150.0),
            TeamFactory.create(id=2, name=f"{name} Two", wins=8, total_points_scored=1200.0),
            TeamFactory.create(id=3, name=f"{name} Three", wins=3, total_points_scored=990.0),
            TeamFactory.create(id=4, name=f"{name} Four", wins=5, total_points_scored=1010.0),
        ])
        client.fetch_boxscores = AsyncMock(return_value=[
            BoxscoreFactory.create(1, 2, home_score=110.0, away_score=105.5,
                                   home_roster=PlayerSlotFactory.lineup(),
                                   away_roster=[PlayerSlotFactory.create("Away Kicker", "K")]),
            BoxscoreFactory.create(3, 4, home_score=90.0, away_score=95.0),
        ])
        client.close = AsyncMock()
        return client
