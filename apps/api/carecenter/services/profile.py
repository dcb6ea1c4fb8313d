from __future__ import annotations

import copy
import logging
import threading
from dataclasses import fields
from typing import Any

from carecenter.models.entities import Profile

logger = logging.getLogger(__name__)

_PROFILE_FIELDS = {item.name for item in fields(Profile)}


class ProfileStore:
    def __init__(self, profile: Profile):
        self._profile = profile
        self._lock = threading.Lock()

    def get(self) -> Profile:
        with self._lock:
            return copy.deepcopy(self._profile)

    def update(self, changes: dict[str, Any]) -> Profile:
        """
        Merges ``changes`` into the stored profile.

        Only the keys present are touched; unknown keys raise ValueError.
        """
        unknown = set(changes) - _PROFILE_FIELDS
        if unknown:
            raise ValueError(f"unknown profile field(s): {', '.join(sorted(unknown))}")
        with self._lock:
            for key, value in changes.items():
                setattr(self._profile, key, value)
            updated = copy.deepcopy(self._profile)
        logger.info("Profile updated: fields=%s", sorted(changes))
        return updated

    def set_photo(self, photo_url: str | None) -> str | None:
        with self._lock:
            self._profile.photo_url = photo_url
        logger.info("Profile photo %s", "cleared" if photo_url is None else "replaced")
        return photo_url
