# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.device_dto import DeviceListResponse
from ...application.use_cases.device.list_devices import ListDevicesUseCase
from ...core.exceptions import CloudError
from ...di.container import get_container
from .errors import ERROR_RESPONSES, to_http_exception


router = APIRouter(tags=["devices"], responses=ERROR_RESPONSES)


@router.get("", response_model=DeviceListResponse)
async def list_devices() -> DeviceListResponse:
    """
    List every raw device record visible to the project (debugging aid)

    Returns:
        DeviceListResponse with the records as the cloud returned them
    """
    container = get_container()
    list_devices_use_case = container.get(ListDevicesUseCase)

    try:
        devices = await list_devices_use_case.execute()
    except CloudError as exception:
        raise to_http_exception("Failed to fetch devices", exception)
    return DeviceListResponse(devices=devices)
