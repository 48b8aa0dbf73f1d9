"""messages carry a factor's gaussian contribution to a single variable"""
from duelrank.numerics.gaussian import GaussianDistribution


class Message:
    """
    A mutable gaussian value with a diagnostic label.

    Parameters:
        value (GaussianDistribution): the current contribution.
        name_format (str): str.format template, e.g. 'message from {0} to {1}'.
        *args: objects substituted into name_format when the label is rendered.
    """

    def __init__(self, value: GaussianDistribution = None, name_format: str = '', *args):
        self.value = value if value is not None else GaussianDistribution()
        self.name_format = name_format
        self.name_args = args

    @property
    def name(self) -> str:
        return self.name_format.format(*self.name_args)

    def __repr__(self):
        return self.name
