"""
two player Elo
reference values verified against http://ratings.fide.com/calculator_rtd.phtml and eq 1.1 of the TrueSkill paper
"""
import math
import pytest
from scipy.stats import norm
from duelrank.configs import get_game_info
from duelrank.core.comparison import PairwiseComparison
from duelrank.core.exceptions import ConfigurationError
from duelrank.core.rating import EloRating, Player, Team
from duelrank.models.elo import (
    FideEloCalculator,
    FideKFactor,
    GaussianEloCalculator,
    GaussianKFactor,
    ProvisionalFideKFactor,
)


def assert_chess_rating(calculator, rating_1, rating_2, result, expected_1, expected_2):
    player_1, player_2 = Player(1), Player(2)
    teams = Team.concat(
        Team().add_player(player_1, EloRating(rating_1)),
        Team().add_player(player_2, EloRating(rating_2)),
    )
    new_ratings = calculator.calculate_new_ratings(get_game_info('chess'), teams, result.to_ranks())
    assert new_ratings[player_1].mean == pytest.approx(expected_1, abs=0.1)
    assert new_ratings[player_2].mean == pytest.approx(expected_2, abs=0.1)


def test_fide_provisional():
    calculator = FideEloCalculator(ProvisionalFideKFactor())
    assert_chess_rating(calculator, 1200, 1500, PairwiseComparison.WIN, 1221.25, 1478.75)
    assert_chess_rating(calculator, 1200, 1500, PairwiseComparison.DRAW, 1208.75, 1491.25)
    assert_chess_rating(calculator, 1200, 1500, PairwiseComparison.LOSE, 1196.25, 1503.75)


def test_fide_non_provisional():
    calculator = FideEloCalculator()
    assert_chess_rating(calculator, 1200, 1200, PairwiseComparison.WIN, 1207.5, 1192.5)
    assert_chess_rating(calculator, 2600, 2500, PairwiseComparison.WIN, 2603.6, 2496.4)


def test_gaussian_elo():
    calculator = GaussianEloCalculator()
    assert_chess_rating(calculator, 1200, 1200, PairwiseComparison.WIN, 1212, 1188)
    assert_chess_rating(calculator, 1200, 1200, PairwiseComparison.DRAW, 1200, 1200)
    assert_chess_rating(calculator, 1200, 1200, PairwiseComparison.LOSE, 1188, 1212)

    expected = norm.cdf(200.0 / (math.sqrt(2.0) * 200.0))
    assert_chess_rating(
        calculator,
        1200,
        1000,
        PairwiseComparison.WIN,
        1200 + 24.0 * (1.0 - expected),
        1000 - 24.0 * (1.0 - expected),
    )


def test_fide_k_factor_threshold():
    k_factor = FideKFactor()
    assert k_factor.value_for_rating(2399.0) == 15.0
    assert k_factor.value_for_rating(2400.0) == 10.0


def test_gaussian_k_factor():
    assert GaussianKFactor().value_for_rating(1500.0) == 24.0
    game_info = get_game_info('chess')
    assert GaussianKFactor(game_info, 0.5).value == pytest.approx(0.5 * 200.0 * math.sqrt(math.pi))


def test_match_quality():
    calculator = GaussianEloCalculator()
    game_info = get_game_info()
    even = [Team().add_player(Player(1), EloRating(25.0)), Team().add_player(Player(2), EloRating(25.0))]
    uneven = [Team().add_player(Player(1), EloRating(25.0)), Team().add_player(Player(2), EloRating(35.0))]
    assert calculator.calculate_match_quality(game_info, even) == 1.0
    assert 0.0 < calculator.calculate_match_quality(game_info, uneven) < 1.0


def test_needs_exactly_two_single_player_teams():
    calculator = GaussianEloCalculator()
    game_info = get_game_info()
    pair = Team().add_player(Player(1), EloRating(25.0)).add_player(Player(2), EloRating(25.0))
    single = Team().add_player(Player(3), EloRating(25.0))
    with pytest.raises(ConfigurationError):
        calculator.calculate_new_ratings(game_info, [pair, single], [1, 2])
    with pytest.raises(ConfigurationError):
        calculator.calculate_new_ratings(game_info, [single], [1])
