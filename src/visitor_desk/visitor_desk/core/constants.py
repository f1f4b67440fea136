"""Constants and defaults."""

DATE_FORMAT = "%Y-%m-%d"
DEFAULT_SESSION_HOURS = 24
DEFAULT_TICKET_PREFIX = "NAZ"

# Shown instead of an average stay when no visitor in the set has left yet.
DURATION_UNAVAILABLE = "-"
