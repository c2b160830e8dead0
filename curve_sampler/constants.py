"""
Default curve and display parameters.
"""

# Discretization
SEGMENT_COUNT = 500  # Straight segments approximating the curve

# Display vector lengths (in canvas units)
TANGENT_LENGTH = 40.0
CURVATURE_LENGTH = 30.0

# Sampling
DEFAULT_SAMPLE_COUNT = 0
