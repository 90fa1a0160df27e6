from dataclasses import dataclass

from ..application.services.user_service import UsersService
from .config import Settings


@dataclass(slots=True)
class ApplicationContainer:
    """Dependency registry shared across the FastAPI application lifecycle."""

    settings: Settings
    users_service: UsersService
