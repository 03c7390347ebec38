"""Default configuration values for email-syntax.

This module centralizes the limits used by the validator and the
defaults used by the command-line interface.
"""

# RFC 5321 section 4.5.3.1.1 part limits, counted in code points
LOCAL_PART_MAX_LENGTH = 64
DOMAIN_PART_MAX_LENGTH = 255

# RFC 1034 label limit
DOMAIN_LABEL_MAX_LENGTH = 63

# Output defaults
DEFAULT_JSON_OUTPUT = False
DEFAULT_SHOW_REASONS = False

# Logging defaults
DEFAULT_VERBOSE = False
DEFAULT_LOG_JSON = False

# Input file argument meaning "read from stdin"
STDIN_PATH = "-"
