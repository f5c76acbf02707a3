"""
Ownership registry for the League Dashboard backend

Static lookup of owner names and championship years, loaded once at startup.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Any, Union

from exceptions import ConfigurationException
from models.division import Division
from models.ownership import OwnershipRecord

logger = logging.getLogger(f'{__name__}.OwnershipRegistry')

EMPTY_RECORD = OwnershipRecord()


class OwnershipRegistry:
    """
    Read-only (division, team id) -> OwnershipRecord mapping.

    Lookups never fail: a team missing from the registry gets an empty
    record. The registry is never mutated after construction, so a single
    instance is shared by all concurrent requests.
    """

    def __init__(self, records: Dict[str, Dict[str, OwnershipRecord]]):
        self._records = {division: dict(teams) for division, teams in records.items()}

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> 'OwnershipRegistry':
        """
        Build the registry from the raw keyed structure.

        Expected format:
        {
            'green': {'1': {'owner': 'Pat', 'wins': ['2019', '']}},
            'white': {...}
        }

        Raises:
            ConfigurationException: If the structure is not a mapping of mappings
        """
        if not isinstance(data, dict):
            raise ConfigurationException("Ownership data must be an object keyed by division")

        records: Dict[str, Dict[str, OwnershipRecord]] = {}
        for division_key, teams in data.items():
            try:
                division = Division(division_key)
            except ValueError:
                logger.warning(f"Ignoring unknown division '{division_key}' in ownership data")
                continue

            if not isinstance(teams, dict):
                raise ConfigurationException(f"Ownership data for {division} must be an object keyed by team id")

            try:
                records[division.value] = {
                    str(team_id): OwnershipRecord.from_api_data(entry)
                    for team_id, entry in teams.items()
                }
            except Exception as e:
                raise ConfigurationException(f"Invalid ownership entry for {division}: {e}")

        logger.info(
            "Loaded ownership registry: "
            + ", ".join(f"{division}={len(teams)}" for division, teams in records.items())
        )
        return cls(records)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'OwnershipRegistry':
        """
        Load the registry from a JSON file.

        Raises:
            ConfigurationException: If the file is missing or unreadable
        """
        path = Path(path)
        try:
            with path.open('r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            raise ConfigurationException(f"Ownership file not found: {path}")
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationException(f"Could not read ownership file {path}: {e}")

        logger.debug(f"Read ownership data from {path}")
        return cls.from_mapping(data)

    def lookup(self, division: Union[str, Division], team_id: Union[int, str]) -> OwnershipRecord:
        """
        Get the ownership record for a team.

        Args:
            division: Division the team plays in
            team_id: ESPN team id (int or string)

        Returns:
            The team's OwnershipRecord, or an empty record if unknown
        """
        division_key = division.value if isinstance(division, Division) else str(division)
        return self._records.get(division_key, {}).get(str(team_id), EMPTY_RECORD)

    def __len__(self) -> int:
        return sum(len(teams) for teams in self._records.values())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(teams={len(self)})"
