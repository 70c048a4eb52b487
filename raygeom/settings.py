# raygeom global settings

# Float scalar used by matrices, rays and the float helpers in raygeom.scalar.
# "float64" matches Python's float, "float32" matches single precision renderers.
FLOAT_PRECISION = "float64"

# Root of the module loggers
LOGGER_NAME = "raygeom"
