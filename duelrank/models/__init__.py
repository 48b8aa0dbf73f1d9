"""
Models Module
=============

Rating calculators built on the SkillCalculator base class.

Included Calculators:
- GaussianEloCalculator: two player Elo using the normal cdf, as in the TrueSkill paper.
- FideEloCalculator: two player Elo using the logistic curve and FIDE K-factors.
- DuellingEloCalculator: any number of teams of any size, by resolving every cross team pair of players
  with a two player calculator and averaging each player's deltas over their opponents.

Every calculator takes a GameInfo explicitly on each call and never keeps ratings between calls.
"""
