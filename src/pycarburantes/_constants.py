"""Internal constants shared across the library."""

BASE_URL = "https://sedeaplicaciones.minetur.gob.es/ServiciosRESTCarburantes/PreciosCarburantes"
IP_LOCATION_URL = "https://ipapi.co/json/"
REVERSE_GEOCODE_URL = "https://nominatim.openstreetmap.org/reverse"
USER_AGENT = "pycarburantes/0.1 (+https://github.com/pycarburantes)"

EARTH_RADIUS_KM = 6371.0

# ------------------------------------------------------------------
# Spain bounding box (approximate, peninsula + Balearics)
# ------------------------------------------------------------------

SPAIN_NORTH = 43.9
SPAIN_SOUTH = 35.2
SPAIN_WEST = -9.5
SPAIN_EAST = 4.5

# Statistics defaults used when the query leaves them unset.
DEFAULT_STATS_RADIUS_KM = 50.0

UNKNOWN_PLACE = "Desconocida"
DEFAULT_COUNTRY = "España"
