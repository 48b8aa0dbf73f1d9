"""
Duelling Elo

From page 6 of the TrueSkill paper: "When we had to process a team game or a game with
more than two teams we used the so-called *duelling* heuristic: For each player, compute
the deltas in comparison to all other players based on the team outcome of the player and
every other player and perform an update with the average of the deltas."

Any two player calculator can be plugged in, each cross team pair of players is resolved
as its own one on one game.
"""
from collections import defaultdict
from duelrank.core.base import Range, SkillCalculator
from duelrank.core.comparison import PairwiseComparison, sort_by_rank
from duelrank.core.rating import EloRating, Player, Rating, Team
from duelrank.models.elo import GaussianEloCalculator, TwoPlayerEloCalculator
from duelrank.utils.log_utils import get_logger
from duelrank.utils.math_utils import mean

logger = get_logger(__name__)


class DuellingEloCalculator(SkillCalculator):
    """
    Extends a two player Elo calculator to any number of teams of any size.

    Parameters:
        two_player_calculator (TwoPlayerEloCalculator, optional): resolves each individual duel.
            Defaults to GaussianEloCalculator().
    """

    def __init__(self, two_player_calculator: TwoPlayerEloCalculator = None):
        super().__init__(Range.at_least(2), Range.at_least(1))
        if two_player_calculator is None:
            two_player_calculator = GaussianEloCalculator()
        self.two_player_calculator = two_player_calculator

    def calculate_new_ratings(self, game_info, teams, ranks):
        self.validate_team_count_and_players_count_per_team(teams)
        self.validate_ranks(teams, ranks)
        teams, ranks = sort_by_rank(list(teams), list(ranks))

        # player -> opponent -> delta, a repeat of the same duel overwrites rather than double counts
        deltas = defaultdict(dict)
        for current_idx, current_team in enumerate(teams):
            for other_idx, other_team in enumerate(teams):
                if current_idx == other_idx:
                    continue
                # bigger rank numbers are worse placements, so other - current is positive for a win
                comparison = PairwiseComparison.from_ranks(ranks[current_idx], ranks[other_idx])
                for current_player, current_rating in current_team.items():
                    for other_player, other_rating in other_team.items():
                        self._update_duels(
                            game_info,
                            deltas,
                            current_player,
                            current_rating,
                            other_player,
                            other_rating,
                            comparison,
                        )

        new_ratings = {}
        for team in teams:
            for player, rating in team.items():
                average_delta = mean(deltas[player].values())
                logger.debug('%s averaged %.4f over %d opponents', player, average_delta, len(deltas[player]))
                new_ratings[player] = EloRating(rating.mean + average_delta)
        return new_ratings

    def _update_duels(self, game_info, deltas, player_1, rating_1, player_2, rating_2, comparison):
        duel_outcomes = self.two_player_calculator.calculate_new_ratings(
            game_info,
            Team.concat(Team().add_player(player_1, rating_1), Team().add_player(player_2, rating_2)),
            comparison.to_ranks(),
        )
        deltas[player_1][player_2] = duel_outcomes[player_1].mean - rating_1.mean
        deltas[player_2][player_1] = duel_outcomes[player_2].mean - rating_2.mean
        logger.debug(
            '%s vs %s (%s): %.4f / %.4f',
            player_1,
            player_2,
            comparison.name,
            deltas[player_1][player_2],
            deltas[player_2][player_1],
        )

    def calculate_match_quality(self, game_info, teams):
        """
        The worst two player quality over every pair of teams, each team collapsed to a single
        player rated at the mean of its players' means. A stand-in until there is a proper
        multi team measure.
        """
        self.validate_team_count_and_players_count_per_team(teams)
        teams = list(teams)
        team_averages = [
            Team().add_player(Player(idx), EloRating(Rating.mean_of_means(team.values())))
            for idx, team in enumerate(teams)
        ]

        min_quality = 1.0
        for current_idx in range(len(team_averages)):
            for other_idx in range(current_idx + 1, len(team_averages)):
                quality = self.two_player_calculator.calculate_match_quality(
                    game_info, Team.concat(team_averages[current_idx], team_averages[other_idx])
                )
                min_quality = min(min_quality, quality)
        return min_quality
