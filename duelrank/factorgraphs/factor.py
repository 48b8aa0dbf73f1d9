"""base class for nodes in a factor graph"""
from abc import ABC, abstractmethod
from duelrank.factorgraphs.message import Message
from duelrank.factorgraphs.variable import Variable


class Factor(ABC):
    """
    A factor connects to one or more variables through one message per variable.
    Message i is always bound to variable i. The factor owns the messages, but the marginals
    themselves live on the variables.
    """

    def __init__(self, name: str):
        self.name = 'Factor[' + name + ']'
        self._messages = []
        self._variables = []

    @property
    def log_normalization(self) -> float:
        return 0.0

    @property
    def number_of_messages(self) -> int:
        return len(self._messages)

    @property
    def variables(self):
        return list(self._variables)

    @property
    def messages(self):
        return list(self._messages)

    def _bound(self, message_index: int):
        if not 0 <= message_index < len(self._messages):
            raise IndexError(f'{self.name} has no message at index {message_index}')
        message = self._messages[message_index]
        return message, self._variables[message_index]

    def update_message(self, message_index: int) -> float:
        message, variable = self._bound(message_index)
        return self.update_message_to(message, variable)

    def update_message_to(self, message: Message, variable: Variable) -> float:
        raise NotImplementedError(f'{type(self).__name__} does not compute outgoing messages')

    def send_message(self, message_index: int) -> float:
        message, variable = self._bound(message_index)
        return self.send_message_to(message, variable)

    @abstractmethod
    def send_message_to(self, message: Message, variable: Variable) -> float:
        """incorporate message into variable's marginal, returns the log normalization constant"""

    def reset_marginals(self):
        for variable in self._variables:
            variable.reset_to_prior()

    @abstractmethod
    def create_variable_to_message_binding(self, variable: Variable) -> Message:
        """create the message that links this factor to variable"""

    def _bind(self, variable: Variable, message: Message) -> Message:
        self._messages.append(message)
        self._variables.append(variable)
        return message

    def __repr__(self):
        return self.name
