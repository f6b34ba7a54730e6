# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, HTTPException, Query, status

# Local application imports
from ...application.dto.camera_dto import (
    CameraListResponse,
    CommandRequest,
    DeviceStatusResponse,
    PtzRequest,
    RecordingDatesResponse,
    RecordingEventsResponse,
    StreamUrlResponse,
    SuccessResponse,
)
from ...application.use_cases.camera.list_cameras import ListCamerasUseCase
from ...application.use_cases.camera.get_camera_stream import GetCameraStreamUseCase
from ...application.use_cases.camera.get_camera_status import GetCameraStatusUseCase
from ...application.use_cases.camera.control_ptz import ControlPtzUseCase
from ...application.use_cases.camera.send_command import SendCommandUseCase
from ...application.use_cases.camera.list_recordings import (
    ListRecordingDatesUseCase,
    ListRecordingEventsUseCase,
)
from ...core.exceptions import CloudError
from ...di.container import get_container
from .errors import ERROR_RESPONSES, to_http_exception


router = APIRouter(tags=["cameras"], responses=ERROR_RESPONSES)


@router.get("", response_model=CameraListResponse)
async def list_cameras(
    include_streams: Optional[str] = Query(default=None, alias="includeStreams"),
) -> CameraListResponse:
    """
    List the account's cameras

    Args:
        include_streams: "true" to also allocate stream URLs for online cameras

    Returns:
        CameraListResponse with cameras in discovery order
    """
    container = get_container()
    list_cameras_use_case = container.get(ListCamerasUseCase)

    try:
        cameras = await list_cameras_use_case.execute(
            include_streams=include_streams == "true",
        )
    except CloudError as exception:
        raise to_http_exception("Failed to fetch cameras", exception)
    return CameraListResponse(cameras=cameras)


@router.get("/{device_id}/stream", response_model=StreamUrlResponse)
async def get_camera_stream(device_id: str) -> StreamUrlResponse:
    """
    Allocate a live stream URL (HLS, falling back to RTSP)

    Args:
        device_id: Cloud device id of the camera

    Returns:
        StreamUrlResponse with the allocated URL

    Raises:
        HTTPException: 404 if no stream could be allocated
    """
    container = get_container()
    get_stream_use_case = container.get(GetCameraStreamUseCase)

    try:
        stream_url = await get_stream_use_case.execute(device_id)
    except CloudError as exception:
        raise to_http_exception("Failed to get stream URL", exception)

    if not stream_url:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Stream not available"
        )
    return StreamUrlResponse(stream_url=stream_url)


@router.get("/{device_id}/status", response_model=DeviceStatusResponse)
async def get_camera_status(device_id: str) -> DeviceStatusResponse:
    """
    Get the raw device status data points

    Args:
        device_id: Cloud device id of the camera

    Returns:
        DeviceStatusResponse wrapping the cloud payload
    """
    container = get_container()
    get_status_use_case = container.get(GetCameraStatusUseCase)

    try:
        device_status = await get_status_use_case.execute(device_id)
    except CloudError as exception:
        raise to_http_exception("Failed to get device status", exception)
    return DeviceStatusResponse(status=device_status)


@router.post("/{device_id}/ptz", response_model=SuccessResponse)
async def control_ptz(device_id: str, request: PtzRequest) -> SuccessResponse:
    """
    Move a PTZ camera one step

    Args:
        device_id: Cloud device id of the camera
        request: Body with direction up/down/left/right

    Returns:
        SuccessResponse

    Raises:
        HTTPException: 400 for an invalid direction, 500 if the move failed
    """
    container = get_container()
    control_ptz_use_case = container.get(ControlPtzUseCase)

    try:
        success = await control_ptz_use_case.execute(device_id, request.direction)
    except CloudError as exception:
        raise to_http_exception("Failed to control PTZ", exception)

    if not success:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to control PTZ"
        )
    return SuccessResponse(success=True)


@router.post("/{device_id}/command", response_model=SuccessResponse)
async def send_command(device_id: str, request: CommandRequest) -> SuccessResponse:
    """
    Send a generic data point command

    Args:
        device_id: Cloud device id
        request: Body with code and value

    Returns:
        SuccessResponse

    Raises:
        HTTPException: 400 if code is missing, 500 if the command failed
    """
    container = get_container()
    send_command_use_case = container.get(SendCommandUseCase)

    try:
        success = await send_command_use_case.execute(device_id, request.code, request.value)
    except CloudError as exception:
        raise to_http_exception("Failed to send command", exception)

    if not success:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send command"
        )
    return SuccessResponse(success=True)


@router.get("/{device_id}/recordings/dates", response_model=RecordingDatesResponse)
async def list_recording_dates(device_id: str) -> RecordingDatesResponse:
    """
    List dates that have cloud recordings

    Args:
        device_id: Cloud device id of the camera

    Returns:
        RecordingDatesResponse (empty list when nothing is recorded)
    """
    container = get_container()
    list_dates_use_case = container.get(ListRecordingDatesUseCase)

    try:
        dates = await list_dates_use_case.execute(device_id)
    except CloudError as exception:
        raise to_http_exception("Failed to get recording dates", exception)
    return RecordingDatesResponse(dates=dates)


@router.get("/{device_id}/recordings", response_model=RecordingEventsResponse)
async def list_recording_events(
    device_id: str,
    start_time: Optional[str] = Query(default=None, alias="startTime"),
    end_time: Optional[str] = Query(default=None, alias="endTime"),
) -> RecordingEventsResponse:
    """
    List recorded events in a time range

    Args:
        device_id: Cloud device id of the camera
        start_time: Range start, epoch seconds
        end_time: Range end, epoch seconds

    Returns:
        RecordingEventsResponse (empty list when nothing is recorded)

    Raises:
        HTTPException: 400 if either bound is missing or malformed
    """
    container = get_container()
    list_events_use_case = container.get(ListRecordingEventsUseCase)

    try:
        events = await list_events_use_case.execute(device_id, start_time, end_time)
    except CloudError as exception:
        raise to_http_exception("Failed to get recordings", exception)
    return RecordingEventsResponse(events=events)
