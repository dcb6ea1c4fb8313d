from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


MY_WISHES_LABEL = "My Wishes"


class AccessTypeEnum(str, Enum):
    viewer = "viewer"


@dataclass
class Access:
    label: str
    type: AccessTypeEnum = AccessTypeEnum.viewer
    # Contract number; the synthetic wishes entry has none.
    id: str | None = None


@dataclass(frozen=True)
class Contract:
    id: int
    contract_number: str


@dataclass
class FamilyMember:
    id: int
    name: str
    relationship: str
    email: str
    initials: str
    phone: str = ""
    accesses: list[Access] = field(default_factory=list)
    is_starred: bool = False


@dataclass
class Profile:
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
