"""Constants for regcheck."""

# Extra elements in the "too long" bounds probe
DEFAULT_TOO_LONG_PADDING = 3

# Elements removed in the "too short" bounds probe. Only this one short length
# is probed; num_parameters() == 0 skips the probe entirely.
TOO_SHORT_TRIM = 1

# dtype of every buffer the verifier allocates
BUFFER_DTYPE = "float64"
