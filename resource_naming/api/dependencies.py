"""FastAPI dependencies: settings and session clock."""

from typing import Annotated

from fastapi import Depends

from resource_naming.core.config import Settings, get_settings
from resource_naming.services.timestamps import Clock, epoch_millis


def get_naming_settings() -> Settings:
    """Return cached naming defaults; overridden in tests."""
    return get_settings()


def get_clock() -> Clock:
    return epoch_millis


SettingsDep = Annotated[Settings, Depends(get_naming_settings)]
ClockDep = Annotated[Clock, Depends(get_clock)]
