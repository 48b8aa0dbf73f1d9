"""duelrank: multi team Elo via the duelling heuristic, plus the gaussian factor graph primitives behind TrueSkill"""
