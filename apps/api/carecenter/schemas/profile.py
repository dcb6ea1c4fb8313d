from pydantic import BaseModel

from carecenter.schemas.common import CamelModel


class ProfileResponse(CamelModel):
    user_id: str
    status: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    prefix: str | None = None
    suffix: str | None = None
    phone_number: str | None = None
    email: str | None = None
    second_number: str | None = None
    country: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    state: str | None = None
    city: str | None = None
    zip_code: str | None = None
    initials: str | None = None
    photo_url: str | None = None


class ProfileUpdate(CamelModel):
    status: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    prefix: str | None = None
    suffix: str | None = None
    phone_number: str | None = None
    email: str | None = None
    second_number: str | None = None
    country: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    state: str | None = None
    city: str | None = None
    zip_code: str | None = None
    initials: str | None = None


class ProfileEnvelope(BaseModel):
    success: bool = True
    data: ProfileResponse


class ProfileUpdatedEnvelope(BaseModel):
    success: bool = True
    data: ProfileResponse
    message: str


class PhotoUpload(CamelModel):
    photo_url: str | None = None


class PhotoEnvelope(BaseModel):
    success: bool = True
    data: PhotoUpload
    message: str
