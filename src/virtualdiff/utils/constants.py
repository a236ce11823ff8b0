"""Physical and numerical constants used across the library."""

GRAVITY: float = 9.81
KMH_PER_MS: float = 3.6
SMALL_EPS: float = 1e-9
