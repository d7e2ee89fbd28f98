"""Fixed physical and tolerance parameters for geoshape geometry."""

# Sphere radius used for every distance and area (meters)
EARTH_RADIUS = 6370996.81

# Tolerance for point equality and collinearity tests
EPSILON = 2e-10

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# Latitudes are clamped to this band before distance computation
MIN_LATITUDE = -74.0
MAX_LATITUDE = 74.0

# Max distance (radians) between a candidate angle sum and (n - 2) * pi
# for the candidate to be accepted in polygon area computation
AREA_SELECTION_THRESHOLD = 1.0
