"""pairwise outcomes and rank ordering"""
from enum import Enum
from typing import Sequence, Tuple
from duelrank.utils.math_utils import sign


class PairwiseComparison(Enum):
    """outcome of one side against another, the value is the direction multiplier"""

    WIN = 1
    DRAW = 0
    LOSE = -1

    @property
    def multiplier(self) -> int:
        return self.value

    @classmethod
    def from_multiplier(cls, multiplier: int) -> 'PairwiseComparison':
        return cls(sign(multiplier))

    @classmethod
    def from_ranks(cls, rank: int, other_rank: int) -> 'PairwiseComparison':
        """lower rank numbers are better placements"""
        return cls.from_multiplier(other_rank - rank)

    def to_ranks(self) -> Tuple[int, int]:
        """the two-sided ranks that reproduce this outcome for the first side"""
        if self is PairwiseComparison.WIN:
            return (1, 2)
        if self is PairwiseComparison.LOSE:
            return (2, 1)
        return (1, 1)


def sort_by_rank(items: Sequence, ranks: Sequence[int]):
    """
    Order items by ascending rank, ties keep their input order.

    Returns:
        (list, list): the sorted items and their ranks, still aligned.
    """
    order = sorted(range(len(items)), key=lambda idx: ranks[idx])
    return [items[idx] for idx in order], [ranks[idx] for idx in order]
