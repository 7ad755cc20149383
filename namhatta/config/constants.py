"""Configuration constants."""

# Maximum size of a config file; larger files are rejected before parsing
MAX_CONFIG_SIZE_BYTES = 1 * 1024 * 1024

DEFAULT_CONFIG_FILENAME = "namhatta.yaml"
DEFAULT_ENV_PREFIX = "NAMHATTA_"
