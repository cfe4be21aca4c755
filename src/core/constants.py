"""Access key constraints shared by the draft model and the quota normalizer."""

# Name field
ACCESS_KEY_NAME_MAX_LENGTH = 64

# Data limit magnitude, in the selected unit, before conversion
DATA_LIMIT_MIN = 0
DATA_LIMIT_MAX = 1_000_000_000_000_000

# Binary (power-of-1024) scaling. Stored quotas were written with these
# multipliers, so SI (1000-based) scaling would break existing records.
BYTES_PER_KB = 1024
BYTES_PER_MB = 1024**2
BYTES_PER_GB = 1024**3

NEW_ACCESS_KEY_TITLE = "New Access Key"
EDIT_ACCESS_KEY_TITLE = 'Access Key "{name}"'
