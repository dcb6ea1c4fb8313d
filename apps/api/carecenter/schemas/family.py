from typing import Any

from pydantic import BaseModel, SerializerFunctionWrapHandler, field_validator, model_serializer

from carecenter.models.entities import AccessTypeEnum
from carecenter.schemas.common import CamelModel


class AccessResponse(CamelModel):
    id: str | None = None
    type: AccessTypeEnum
    label: str

    @model_serializer(mode="wrap")
    def _omit_missing_id(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if self.id is None:
            data.pop("id", None)
        return data


class FamilyMemberResponse(CamelModel):
    id: int
    name: str
    relationship: str
    phone: str
    email: str
    initials: str
    accesses: list[AccessResponse]
    is_starred: bool


class FamilyDirectoryResponse(CamelModel):
    next_of_kin: FamilyMemberResponse | None
    starred_members: list[FamilyMemberResponse]
    all_members: list[FamilyMemberResponse]


class FamilyDirectoryEnvelope(BaseModel):
    success: bool = True
    data: FamilyDirectoryResponse


class FamilyMemberEnvelope(BaseModel):
    success: bool = True
    data: FamilyMemberResponse
    message: str


class FamilyMemberCreate(CamelModel):
    status: str | None = None
    # Names are checked by the directory so a missing name gets the same 400 as an empty one.
    first_name: str | None = None
    last_name: str | None = None
    family_status: str
    email: str
    phone: str | None = None
    contract_id: int | None = None

    @field_validator("contract_id", mode="before")
    @classmethod
    def _lenient_contract_id(cls, value: Any) -> int | None:
        # Form selects post ids as strings; anything unparseable means "no contract".
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if value.is_integer() else None
        text = str(value).strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None


class NextOfKinAssign(CamelModel):
    member_id: int | None = None
    email: str | None = None


class NextOfKinEnvelope(BaseModel):
    success: bool = True
    data: FamilyMemberResponse | None = None
    message: str


class AccessesUpdate(CamelModel):
    contracts: list[str]


class ContractResponse(CamelModel):
    id: int
    contract_number: str


class ContractListEnvelope(BaseModel):
    success: bool = True
    data: list[ContractResponse]
