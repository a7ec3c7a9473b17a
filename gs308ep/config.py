"""Configuration constants for the GS308EP PoE switch client."""

# Credentials can also be supplied via GS308EP_HOST / GS308EP_PASSWORD env vars
ENV_HOST = "GS308EP_HOST"
ENV_PASSWORD = "GS308EP_PASSWORD"

VERSION = "0.5.0"
PROGRAM_NAME = "gs308ep"

LOGIN_URL       = "/login.cgi"
POE_CONFIG_URL  = "/PoEPortConfig.cgi"
POE_STATUS_URL  = "/getPoePortStatus.cgi"

REQUEST_TIMEOUT        = 5       # seconds per HTTP request
MAX_PORTS              = 8
DEFAULT_CYCLE_DELAY_MS = 2000    # off -> on delay for a power cycle
POE_BUDGET_W           = 65.0    # total PoE budget of the GS308EP

# Login page / config page hidden inputs
RAND_FIELD = "rand"
HASH_FIELD = "hash"
SID_MARKER = "SID="
SUCCESS_MARKER = "SUCCESS"

# getPoePortStatus.cgi field markers.  The device templates emit message ids
# (ml5xx) as hidden span text right before the span carrying the value.
POWER_FLAG_MARKER  = "hidPortPwr"
STATUS_MARKER      = "poe-power-mode"
CLASS_MARKER       = "powClassShow"
CLASS_TOKEN_PREFIX = "ml003@"
VOLTAGE_MARKER     = "ml570"
CURRENT_MARKER     = "ml572"
POWER_MARKER       = "ml574"
TEMPERATURE_MARKER = "ml575"
FAULT_MARKER       = "ml581"

DELIVERING_POWER = "Delivering Power"
UNKNOWN = "Unknown"

# Search windows (bytes) around a port's anchor.  Every lookup is also cut
# off at the neighbouring port's anchor, whichever comes first.
POWER_FLAG_WINDOW = 1000
TELEMETRY_WINDOW  = 2000
STATUS_LOOKBEHIND = 500

# Attribute text right before each port's ``value="N"`` anchor
PORT_TAGS = ('"port" ', "'port' ")

# Fixed PoEPortConfig.cgi form fields sent with every port mutation
POE_FORM_DEFAULTS = (
    ("PORT_PRIO", "0"),
    ("POW_MOD", "3"),          # 802.3at
    ("POW_LIMT_TYP", "0"),
    ("DETEC_TYP", "2"),        # IEEE 802
    ("DISCONNECT_TYP", "2"),
)
