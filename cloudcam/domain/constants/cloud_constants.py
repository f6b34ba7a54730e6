"""
Fixed vocabulary of the device cloud API.

Category tags, command codes and endpoint paths used by the clients in
infrastructure.external. Single place for easier updates.
"""

# -----------------------------------------------------------------------------
# Device categories
# -----------------------------------------------------------------------------
CATEGORY_SMART_CAMERA = "sp"
CATEGORY_IP_CAMERA = "ipc"
CATEGORY_DOORBELL = "dghd"
CATEGORY_GENERIC_CAMERA = "camera"

CAMERA_CATEGORIES = frozenset({
    CATEGORY_SMART_CAMERA,
    CATEGORY_IP_CAMERA,
    CATEGORY_DOORBELL,
    CATEGORY_GENERIC_CAMERA,
})
PTZ_CATEGORIES = frozenset({CATEGORY_SMART_CAMERA, CATEGORY_IP_CAMERA})

DEFAULT_CAMERA_NAME = "Camera"

# -----------------------------------------------------------------------------
# Commands
# -----------------------------------------------------------------------------
PTZ_CONTROL_CODE = "ptz_control"

# -----------------------------------------------------------------------------
# Token lifecycle
# -----------------------------------------------------------------------------
# Tokens are treated as expired this long before the server says they are
TOKEN_EXPIRY_SKEW_MS = 60_000

# -----------------------------------------------------------------------------
# Endpoints
# -----------------------------------------------------------------------------
TOKEN_PATH = "/v1.0/token?grant_type=1"
USER_DEVICES_PATH = "/v1.0/users/{uid}/devices"
DEVICE_PATH = "/v1.0/devices/{device_id}"
DEVICE_STATUS_PATH = "/v1.0/devices/{device_id}/status"
DEVICE_COMMANDS_PATH = "/v1.0/devices/{device_id}/commands"
STREAM_ALLOCATE_PATH = "/v1.0/devices/{device_id}/stream/actions/allocate"
RECORD_DATES_PATH = "/v1.0/devices/{device_id}/ipc/playback/get-dates"
RECORD_EVENTS_PATH = (
    "/v1.0/devices/{device_id}/ipc/playback/video"
    "?start_time={start_time}&end_time={end_time}"
)
