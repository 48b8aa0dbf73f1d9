"""players, ratings, teams, ranks and game configurations"""
import logging
import pytest
from duelrank.configs import GAME_INFO_PRESETS, GameInfo, get_game_info
from duelrank.core.base import Range
from duelrank.core.comparison import PairwiseComparison, sort_by_rank
from duelrank.core.exceptions import ConfigurationError
from duelrank.core.rating import EloRating, Player, Rating, Team
from duelrank.utils.log_utils import get_logger


@pytest.mark.parametrize(
    'multiplier,comparison',
    [(5, PairwiseComparison.WIN), (0, PairwiseComparison.DRAW), (-2, PairwiseComparison.LOSE)],
)
def test_comparison_from_multiplier(multiplier, comparison):
    assert PairwiseComparison.from_multiplier(multiplier) is comparison


def test_comparison_from_ranks():
    assert PairwiseComparison.from_ranks(1, 3) is PairwiseComparison.WIN
    assert PairwiseComparison.from_ranks(3, 1) is PairwiseComparison.LOSE
    assert PairwiseComparison.from_ranks(2, 2) is PairwiseComparison.DRAW
    assert PairwiseComparison.WIN.to_ranks() == (1, 2)
    assert PairwiseComparison.LOSE.to_ranks() == (2, 1)
    assert PairwiseComparison.DRAW.to_ranks() == (1, 1)


def test_sort_by_rank_is_stable():
    items, ranks = sort_by_rank(['c', 'a', 'b', 'd'], [3, 1, 2, 1])
    assert items == ['a', 'd', 'b', 'c']
    assert ranks == [1, 1, 2, 3]


def test_range():
    assert 2 in Range.exactly(2)
    assert 3 not in Range.exactly(2)
    assert 100 in Range.at_least(2)
    assert 1 not in Range.at_least(2)
    assert 0 in Range.at_most(4)
    assert 5 not in Range.inclusive(1, 4)


def test_team():
    player = Player(1)
    team = Team().add_player(player, EloRating(25.0))
    assert team.players == [player]
    assert team.ratings == [EloRating(25.0)]
    with pytest.raises(ValueError):
        team.add_player(player, EloRating(30.0))


def test_rating():
    rating = Rating(25.0, 25.0 / 3.0)
    assert rating.conservative_rating == pytest.approx(0.0)
    assert Rating.mean_of_means([Rating(20.0), EloRating(30.0)]) == pytest.approx(25.0)
    assert EloRating(25.0).standard_deviation == 0.0


def test_partial_update():
    prior = Rating(25.0, 8.0)
    posterior = Rating(30.0, 6.0)
    assert Rating.partial_update(prior, posterior, 0.0).mean == pytest.approx(25.0)
    full = Rating.partial_update(prior, posterior, 1.0)
    assert full.mean == pytest.approx(30.0)
    assert full.standard_deviation == pytest.approx(6.0)
    half = Rating.partial_update(prior, posterior, 0.5)
    assert 25.0 < half.mean < 30.0


def test_partial_update_mean_only():
    half = Rating.partial_update(EloRating(25.0), EloRating(30.0), 0.5)
    assert half.mean == pytest.approx(27.5)
    assert half.standard_deviation == 0.0
    assert Rating.partial_update(Rating(25.0, 8.0), EloRating(30.0), 1.0).mean == pytest.approx(30.0)


def test_default_game_info():
    game_info = get_game_info()
    assert game_info == GameInfo()
    assert game_info.default_rating == Rating(25.0, 25.0 / 3.0)
    assert game_info.beta == pytest.approx(25.0 / 6.0)


def test_chess_preset_with_overrides():
    game_info = get_game_info('chess', beta=100.0)
    assert game_info.initial_mean == 1200.0
    assert game_info.beta == 100.0
    assert GAME_INFO_PRESETS['chess']['beta'] == 200.0


def test_bad_game_info():
    with pytest.raises(ConfigurationError):
        get_game_info('go')
    with pytest.raises(ConfigurationError):
        get_game_info(beta=0.0)
    with pytest.raises(ConfigurationError):
        get_game_info(tau=1.0)
    with pytest.raises(ConfigurationError):
        GameInfo.from_dict({'initial_mean': 25.0, 'k': 32.0})
    with pytest.raises(ConfigurationError):
        GameInfo(draw_probability=1.0)


def test_get_logger_attaches_one_handler():
    logger = get_logger('duelrank.tests')
    get_logger('duelrank.tests')
    assert len(logger.handlers) == 1
    assert logger.level == logging.NOTSET
    assert get_logger('duelrank.tests.loud', level=logging.WARNING).level == logging.WARNING
