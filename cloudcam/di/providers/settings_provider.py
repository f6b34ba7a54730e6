from typing import TYPE_CHECKING

from ...core.config import Settings, get_settings

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SettingsProvider:
    """Settings provider - registers the process configuration"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(Settings, get_settings())
