"""mathematical constants computed once here to avoid recomputation"""
import math

# general math constants
SQRT_2 = math.sqrt(2.0)
INV_SQRT_2 = 1.0 / SQRT_2
SQRT_PI = math.sqrt(math.pi)
LOG_SQRT_2_PI = math.log(math.sqrt(2.0 * math.pi))

# elo constants
STABLE_DYNAMICS_K_FACTOR = 24.0
FIDE_K_FACTOR_THRESHOLD = 2400.0
