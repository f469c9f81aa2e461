"""
Process-wide constants for the Davis and LG TV binding adapters.
"""

# Millimetres of rain per tipping-bucket click (0.2 mm collector).
RAIN_CLICK_BASE = 0.2

# Width in bytes of a rain counter inside a LOOP payload.
RAIN_VALUE_WIDTH = 2

LGTV_BINDING_TYPE = "lgtv"

# Reserved tokens inside an lgtv binding string. Only the advanced marker
# changes parsing; the others are interpreted by the host at lookup time.
ADVANCED_COMMAND_KEY = "#"
WILDCARD_COMMAND_KEY = "*"
INIT_COMMAND_KEY = "INIT"

ENTRY_SEPARATOR = ","
FIELD_SEPARATOR = ":"
