"""game configurations, every calculator takes one of these explicitly"""
from dataclasses import dataclass, fields, replace
from duelrank.core.exceptions import ConfigurationError
from duelrank.core.rating import Rating

DEFAULT_INITIAL_MEAN = 25.0


@dataclass(frozen=True)
class GameInfo:
    """
    Scale parameters for a game.

    Attributes:
        initial_mean (float): mean rating of a new player.
        initial_standard_deviation (float): uncertainty of a new player's rating.
        beta (float): skill spread, the rating gap that gives roughly a 76% win chance.
        dynamics_factor (float): how much skill is assumed to drift between games.
        draw_probability (float): how often games between equals end in a draw.
    """

    initial_mean: float = DEFAULT_INITIAL_MEAN
    initial_standard_deviation: float = DEFAULT_INITIAL_MEAN / 3.0
    beta: float = DEFAULT_INITIAL_MEAN / 6.0
    dynamics_factor: float = DEFAULT_INITIAL_MEAN / 300.0
    draw_probability: float = 0.10

    def __post_init__(self):
        if self.beta <= 0.0:
            raise ConfigurationError(f'beta must be positive, got {self.beta}')
        if self.initial_standard_deviation < 0.0:
            raise ConfigurationError(
                f'initial_standard_deviation must be non-negative, got {self.initial_standard_deviation}'
            )
        if self.dynamics_factor < 0.0:
            raise ConfigurationError(f'dynamics_factor must be non-negative, got {self.dynamics_factor}')
        if not 0.0 <= self.draw_probability < 1.0:
            raise ConfigurationError(f'draw_probability must be in [0, 1), got {self.draw_probability}')

    @property
    def default_rating(self) -> Rating:
        return Rating(self.initial_mean, self.initial_standard_deviation)

    @classmethod
    def from_dict(cls, raw: dict) -> 'GameInfo':
        known = {field.name for field in fields(cls)}
        unknown = set(raw) - known
        if unknown:
            raise ConfigurationError(f'unknown game info keys: {sorted(unknown)}')
        return cls(**{key: float(value) for key, value in raw.items()})


GAME_INFO_PRESETS = {
    'default': {},
    'chess': {
        'initial_mean': 1200.0,
        'initial_standard_deviation': 0.0,
        'beta': 200.0,
        'dynamics_factor': 0.0,
        'draw_probability': 0.0,
    },
}


def get_game_info(name: str = 'default', **overrides) -> GameInfo:
    """build the named preset, keyword arguments replace individual parameters"""
    if name not in GAME_INFO_PRESETS:
        raise ConfigurationError(f'unknown game info preset {name!r}, choose from {sorted(GAME_INFO_PRESETS)}')
    game_info = GameInfo.from_dict(GAME_INFO_PRESETS[name])
    if overrides:
        try:
            game_info = replace(game_info, **overrides)
        except TypeError as err:
            raise ConfigurationError(str(err)) from err
    return game_info
