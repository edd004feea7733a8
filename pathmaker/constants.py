ALL_PATH_TYPES = ["line", "circle", "arc"]

FULL_CIRCLE = 360.0  # degrees
STRAIGHT_ANGLE = 180.0  # degrees

PRECISION = 1e-9  # absolute tolerance for point equality
