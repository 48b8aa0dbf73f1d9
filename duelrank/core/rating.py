"""players, ratings and teams"""
from dataclasses import dataclass
from typing import Any, Iterable
from duelrank.utils.math_utils import mean


@dataclass(frozen=True)
class Player:
    """
    An opaque identity used as a key in teams and results.

    Attributes:
        id: anything hashable identifying the player.
    """

    id: Any

    def __str__(self):
        return f'Player[{self.id}]'


@dataclass(frozen=True)
class Rating:
    """a belief about skill, updates always produce a new Rating"""

    mean: float
    standard_deviation: float = 0.0
    conservative_multiplier: float = 3.0

    @property
    def variance(self) -> float:
        return self.standard_deviation**2.0

    @property
    def conservative_rating(self) -> float:
        """a pessimistic estimate of skill, mean minus k standard deviations"""
        return self.mean - (self.conservative_multiplier * self.standard_deviation)

    @staticmethod
    def mean_of_means(ratings: Iterable['Rating']) -> float:
        return mean(rating.mean for rating in ratings)

    @staticmethod
    def partial_update(prior: 'Rating', full_posterior: 'Rating', update_fraction: float) -> 'Rating':
        """move a fraction of the way from prior to full_posterior, in precision space

        mean only ratings have no precision, their means are interpolated directly
        """
        if prior.variance == 0.0 or full_posterior.variance == 0.0:
            return Rating(
                mean=prior.mean + update_fraction * (full_posterior.mean - prior.mean),
                standard_deviation=0.0,
                conservative_multiplier=prior.conservative_multiplier,
            )
        prior_precision = 1.0 / prior.variance
        posterior_precision = 1.0 / full_posterior.variance
        prior_precision_mean = prior.mean * prior_precision
        posterior_precision_mean = full_posterior.mean * posterior_precision

        precision = prior_precision + update_fraction * (posterior_precision - prior_precision)
        precision_mean = prior_precision_mean + update_fraction * (posterior_precision_mean - prior_precision_mean)
        return Rating(
            mean=precision_mean / precision,
            standard_deviation=(1.0 / precision) ** 0.5,
            conservative_multiplier=prior.conservative_multiplier,
        )

    def __str__(self):
        return f'mean={self.mean:.4f}, standard_deviation={self.standard_deviation:.4f}'


class EloRating(Rating):
    """a rating that only carries a mean"""

    def __init__(self, mean: float):
        super().__init__(mean=mean, standard_deviation=0.0)

    def __repr__(self):
        return f'EloRating(mean={self.mean!r})'


class Team(dict):
    """an ordered mapping of Player -> Rating with a fluent builder"""

    def __init__(self, players=None):
        super().__init__()
        if players is not None:
            for player, rating in dict(players).items():
                self.add_player(player, rating)

    def add_player(self, player, rating: Rating) -> 'Team':
        if player in self:
            raise ValueError(f'{player} is already on this team')
        self[player] = rating
        return self

    @property
    def players(self):
        return list(self.keys())

    @property
    def ratings(self):
        return list(self.values())

    @staticmethod
    def concat(*teams):
        return list(teams)
