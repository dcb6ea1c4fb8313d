from fastapi import APIRouter, Depends

from carecenter.core.state import get_profile_store
from carecenter.schemas.profile import (
    PhotoEnvelope,
    PhotoUpload,
    ProfileEnvelope,
    ProfileResponse,
    ProfileUpdate,
    ProfileUpdatedEnvelope,
)
from carecenter.services.profile import ProfileStore

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileEnvelope)
def get_profile(store: ProfileStore = Depends(get_profile_store)):
    return ProfileEnvelope(data=ProfileResponse.model_validate(store.get()))


@router.put("", response_model=ProfileUpdatedEnvelope)
def update_profile(payload: ProfileUpdate, store: ProfileStore = Depends(get_profile_store)):
    # Only fields present in the body are merged.
    profile = store.update(payload.model_dump(exclude_unset=True))
    return ProfileUpdatedEnvelope(
        data=ProfileResponse.model_validate(profile),
        message="Profile updated successfully",
    )


@router.post("/photo", response_model=PhotoEnvelope)
def upload_photo(payload: PhotoUpload, store: ProfileStore = Depends(get_profile_store)):
    photo_url = store.set_photo(payload.photo_url)
    return PhotoEnvelope(data=PhotoUpload(photo_url=photo_url), message="Photo uploaded successfully")
