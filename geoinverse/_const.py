"""
Constants declarations for geoinverse
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_B = (1 - WGS84_F) * WGS84_A

# Vincenty iteration limits
MAX_ITERATIONS = 200
CONVERGENCE_THRESHOLD = 1e-12

# Meters per unit
METERS_PER_KILOMETER = 1000.0
METERS_PER_NAUTICAL_MILE = 1852.0
METERS_PER_MILE = 1609.344
METERS_PER_FOOT = 0.3048
