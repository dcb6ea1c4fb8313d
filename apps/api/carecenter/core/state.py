from __future__ import annotations

from fastapi import Request

from carecenter.services.directory import FamilyDirectory
from carecenter.services.profile import ProfileStore


def get_directory(request: Request) -> FamilyDirectory:
    """The directory is owned by the application instance built in create_app()."""
    return request.app.state.directory


def get_profile_store(request: Request) -> ProfileStore:
    return request.app.state.profile_store
