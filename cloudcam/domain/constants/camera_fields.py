"""Constants for Camera field names as exposed to the presentation layer"""


class CameraFields:
    """Field name constants for Camera JSON payloads"""
    ID = "id"
    NAME = "name"
    DEVICE_ID = "deviceId"
    IS_ONLINE = "isOnline"
    SUPPORTS_PTZ = "supportsPTZ"
    CATEGORY = "category"
    LAST_SEEN = "lastSeen"
    STREAM_URL = "streamUrl"
