"""gaussian factors, the shared update step used by every concrete TrueSkill factor"""
from duelrank.factorgraphs.factor import Factor
from duelrank.factorgraphs.message import Message
from duelrank.factorgraphs.variable import Variable
from duelrank.numerics.gaussian import GaussianDistribution, log_product_normalization


class GaussianFactor(Factor):
    """
    Base class for factors over gaussian valued variables.

    Sending a message multiplies it into the variable's marginal. The product adds
    precisions and precision-weighted means, so an uninformative message (precision 0)
    leaves the marginal exactly as it was and the order messages arrive in does not
    change the final marginal.
    """

    def send_message_to(self, message: Message, variable: Variable) -> float:
        marginal = variable.value
        message_value = message.value
        log_z = log_product_normalization(marginal, message_value)
        variable.value = marginal * message_value
        return log_z

    def create_variable_to_message_binding(self, variable: Variable) -> Message:
        return self._bind(
            variable,
            Message(GaussianDistribution.from_precision_mean(0.0, 0.0), 'message from {0} to {1}', self, variable),
        )


class GaussianPriorFactor(GaussianFactor):
    """supplies a fixed prior belief (e.g. a player's skill before the match) to one variable"""

    def __init__(self, mean: float, variance: float, variable: Variable):
        super().__init__(f'Prior value going to {variable}')
        self.new_message = GaussianDistribution.from_mean_and_standard_deviation(mean, variance**0.5)
        self.create_variable_to_message_binding(variable)

    def update_message_to(self, message: Message, variable: Variable) -> float:
        old_marginal = variable.value
        old_message = message.value
        # swap the old contribution for the prior without touching the rest of the marginal
        new_marginal = GaussianDistribution.from_precision_mean(
            old_marginal.precision_mean + self.new_message.precision_mean - old_message.precision_mean,
            old_marginal.precision + self.new_message.precision - old_message.precision,
        )
        variable.value = new_marginal
        message.value = self.new_message
        return old_marginal - new_marginal
