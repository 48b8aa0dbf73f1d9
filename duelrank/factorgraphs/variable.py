"""variables hold the evolving marginal belief that factors read and write"""
from duelrank.numerics.gaussian import GaussianDistribution


class Variable:
    """a named marginal with the prior it can be reset to"""

    def __init__(self, name: str, prior: GaussianDistribution = None):
        self.name = 'Variable[' + name + ']'
        self.prior = prior if prior is not None else GaussianDistribution()
        self.value = self.prior

    def reset_to_prior(self):
        self.value = self.prior

    def __repr__(self):
        return self.name


class KeyedVariable(Variable):
    """a variable tied to the player (or any hashable key) it describes"""

    def __init__(self, key, name: str, prior: GaussianDistribution = None):
        super().__init__(name, prior)
        self.key = key
