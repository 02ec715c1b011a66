from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .attendance.repository import AttendanceLogRepository
from .common.logging_config import configure_logging
from .container import Container, build_container
from .placement.repository import PlacementSessionRepository
from .subjects.repository import SubjectRepository

logger = logging.getLogger(__name__)


def create_container(
    *,
    subjects_repo: SubjectRepository,
    logs_repo: AttendanceLogRepository,
    placement_repo: Optional[PlacementSessionRepository] = None,
) -> Container:
    """Load settings for APP_ENV and wire services around the given storage."""
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if getattr(settings, "DEBUG", False):
        logger.debug("settings=%s", settings_module)

    return build_container(
        settings=settings,
        subjects_repo=subjects_repo,
        logs_repo=logs_repo,
        placement_repo=placement_repo,
    )
