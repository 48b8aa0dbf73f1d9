"""players, ratings, teams and the base class every skill calculator derives from"""
