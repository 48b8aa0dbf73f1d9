"""errors raised by duelrank"""


class DuelrankError(Exception):
    """base class for every error raised on purpose by this package"""


class ConfigurationError(DuelrankError, ValueError):
    """
    The inputs to a calculation are malformed: too few or too many teams, a team with
    an unsupported number of players, ranks that do not line up with the teams, or a
    bad game configuration. Raised before any rating is computed.
    """
