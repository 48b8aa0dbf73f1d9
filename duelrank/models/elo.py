"""The Elo rating system for exactly two players"""
import math
from abc import abstractmethod
from duelrank.configs import GameInfo
from duelrank.core.base import Range, SkillCalculator
from duelrank.core.comparison import PairwiseComparison, sort_by_rank
from duelrank.core.rating import EloRating
from duelrank.utils.constants import FIDE_K_FACTOR_THRESHOLD, SQRT_2, SQRT_PI, STABLE_DYNAMICS_K_FACTOR
from duelrank.utils.math_utils import base_10_sigmoid, norm_cdf

SCORES = {
    PairwiseComparison.WIN: 1.0,
    PairwiseComparison.DRAW: 0.5,
    PairwiseComparison.LOSE: 0.0,
}


class KFactor:
    """how far a single game can move a rating"""

    def __init__(self, value: float):
        self.value = value

    def value_for_rating(self, rating: float) -> float:
        return self.value


class GaussianKFactor(KFactor):
    """
    With no arguments this is the stable dynamics value from the TrueSkill paper. Given a
    game info and a weighting for the latest game it is weight * beta * sqrt(pi).
    """

    def __init__(self, game_info: GameInfo = None, latest_game_weighting_factor: float = None):
        if game_info is None or latest_game_weighting_factor is None:
            super().__init__(STABLE_DYNAMICS_K_FACTOR)
        else:
            super().__init__(latest_game_weighting_factor * game_info.beta * SQRT_PI)


class FideKFactor(KFactor):
    """FIDE uses a smaller K for established strong players"""

    def __init__(self):
        super().__init__(15.0)

    def value_for_rating(self, rating: float) -> float:
        if rating < FIDE_K_FACTOR_THRESHOLD:
            return 15.0
        return 10.0


class ProvisionalFideKFactor(KFactor):
    """players with fewer than 30 rated games"""

    def __init__(self):
        super().__init__(25.0)


class TwoPlayerEloCalculator(SkillCalculator):
    """
    Elo for a match between exactly two single player teams.

    Subclasses decide the shape of the win probability curve, everything else is the
    classic update: new = old + K * (actual score - expected score).
    """

    def __init__(self, k_factor: KFactor):
        super().__init__(Range.exactly(2), Range.exactly(1))
        self.k_factor = k_factor

    @abstractmethod
    def player_win_probability(self, game_info: GameInfo, rating: float, opponent_rating: float) -> float:
        """probability that a player rated rating beats one rated opponent_rating"""

    def calculate_new_ratings(self, game_info, teams, ranks):
        self.validate_team_count_and_players_count_per_team(teams)
        self.validate_ranks(teams, ranks)
        teams, ranks = sort_by_rank(teams, ranks)

        is_draw = ranks[0] == ranks[1]
        (player_1, rating_1), = teams[0].items()
        (player_2, rating_2), = teams[1].items()
        return {
            player_1: self.calculate_new_rating(
                game_info,
                rating_1.mean,
                rating_2.mean,
                PairwiseComparison.DRAW if is_draw else PairwiseComparison.WIN,
            ),
            player_2: self.calculate_new_rating(
                game_info,
                rating_2.mean,
                rating_1.mean,
                PairwiseComparison.DRAW if is_draw else PairwiseComparison.LOSE,
            ),
        }

    def calculate_new_rating(self, game_info, rating, opponent_rating, comparison) -> EloRating:
        expected = self.player_win_probability(game_info, rating, opponent_rating)
        actual = SCORES[comparison]
        k = self.k_factor.value_for_rating(rating)
        return EloRating(rating + k * (actual - expected))

    def calculate_match_quality(self, game_info, teams):
        self.validate_team_count_and_players_count_per_team(teams)
        (rating_1,) = teams[0].values()
        (rating_2,) = teams[1].values()
        # the TrueSkill paper uses s1 - s2 for quality, expressed here as distance from a coin flip
        delta_from_half = math.fabs(self.player_win_probability(game_info, rating_1.mean, rating_2.mean) - 0.5)
        return (0.5 - delta_from_half) / 0.5


class GaussianEloCalculator(TwoPlayerEloCalculator):
    """Elo with the normal cdf in place of the logistic curve, eq 1.1 of the TrueSkill paper"""

    def __init__(self, k_factor: KFactor = None):
        super().__init__(k_factor if k_factor is not None else GaussianKFactor())

    def player_win_probability(self, game_info, rating, opponent_rating):
        return norm_cdf((rating - opponent_rating) / (SQRT_2 * game_info.beta))


class FideEloCalculator(TwoPlayerEloCalculator):
    """the logistic curve used by FIDE, beta is half the usual 400 point scale"""

    def __init__(self, k_factor: KFactor = None):
        super().__init__(k_factor if k_factor is not None else FideKFactor())

    def player_win_probability(self, game_info, rating, opponent_rating):
        return base_10_sigmoid((rating - opponent_rating) / (2.0 * game_info.beta))
