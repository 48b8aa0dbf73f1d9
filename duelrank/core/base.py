"""base class for skill calculators"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from numbers import Integral
from typing import Mapping, Sequence
from duelrank.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class Range:
    """an inclusive integer range, maximum None means unbounded"""

    minimum: int
    maximum: int = None

    @classmethod
    def exactly(cls, value: int) -> 'Range':
        return cls(value, value)

    @classmethod
    def at_least(cls, minimum: int) -> 'Range':
        return cls(minimum, None)

    @classmethod
    def at_most(cls, maximum: int) -> 'Range':
        return cls(0, maximum)

    @classmethod
    def inclusive(cls, minimum: int, maximum: int) -> 'Range':
        return cls(minimum, maximum)

    def __contains__(self, value: int) -> bool:
        if value < self.minimum:
            return False
        return self.maximum is None or value <= self.maximum

    def __str__(self):
        upper = 'inf' if self.maximum is None else self.maximum
        return f'[{self.minimum}, {upper}]'


class SkillCalculator(ABC):
    """
    Base class for calculators that turn a ranked match into new ratings.

    Attributes:
        team_range (Range): allowed number of teams in a match.
        player_range (Range): allowed number of players on each team.
    """

    def __init__(self, team_range: Range, player_range: Range):
        self.team_range = team_range
        self.player_range = player_range

    @abstractmethod
    def calculate_new_ratings(self, game_info, teams: Sequence[Mapping], ranks: Sequence[int]) -> dict:
        """
        Computes new ratings for every player in the match.

        Parameters:
            game_info (GameInfo): scale parameters, passed through untouched.
            teams (sequence of mappings): each team maps Player -> Rating.
            ranks (sequence of int): one rank per team, lower is better, ties are draws.

        Returns:
            dict: Player -> new Rating, one entry for every player in every team.
        """

    @abstractmethod
    def calculate_match_quality(self, game_info, teams: Sequence[Mapping]) -> float:
        """a number in [0, 1], higher means a more evenly matched game"""

    def validate_team_count_and_players_count_per_team(self, teams: Sequence[Mapping]):
        if teams is None:
            raise ConfigurationError('teams must not be None')
        team_count = len(teams)
        if team_count not in self.team_range:
            raise ConfigurationError(f'{team_count} teams given, {type(self).__name__} expects {self.team_range}')
        for idx, team in enumerate(teams):
            if len(team) not in self.player_range:
                raise ConfigurationError(
                    f'team {idx} has {len(team)} players, {type(self).__name__} expects {self.player_range}'
                )

    def validate_ranks(self, teams: Sequence[Mapping], ranks: Sequence[int]):
        if ranks is None or len(ranks) != len(teams):
            given = None if ranks is None else len(ranks)
            raise ConfigurationError(f'{len(teams)} teams but {given} ranks')
        for rank in ranks:
            if isinstance(rank, bool) or not isinstance(rank, Integral):
                raise ConfigurationError(f'ranks must be integers, got {rank!r}')
