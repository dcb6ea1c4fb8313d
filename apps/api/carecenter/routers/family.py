from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from carecenter.core.state import get_directory
from carecenter.schemas.common import ErrorResponse, MessageResponse
from carecenter.schemas.family import (
    AccessesUpdate,
    FamilyDirectoryEnvelope,
    FamilyDirectoryResponse,
    FamilyMemberCreate,
    FamilyMemberEnvelope,
    FamilyMemberResponse,
    NextOfKinAssign,
    NextOfKinEnvelope,
)
from carecenter.services.directory import FamilyDirectory, InvalidMemberInput, MemberNotFound, NewFamilyMember

router = APIRouter(prefix="/family", tags=["family"])

_NOT_FOUND = {404: {"model": ErrorResponse}}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


def _not_found(exc: MemberNotFound) -> JSONResponse:
    return _error(404, str(exc))


@router.get("", response_model=FamilyDirectoryEnvelope)
def get_family(directory: FamilyDirectory = Depends(get_directory)):
    snapshot = directory.snapshot()
    return FamilyDirectoryEnvelope(data=FamilyDirectoryResponse.model_validate(snapshot))


@router.post(
    "",
    response_model=FamilyMemberEnvelope,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
def add_family_member(payload: FamilyMemberCreate, directory: FamilyDirectory = Depends(get_directory)):
    try:
        member = directory.add_member(
            NewFamilyMember(
                first_name=payload.first_name,
                last_name=payload.last_name,
                relationship=payload.family_status,
                email=payload.email,
                phone=payload.phone,
                contract_id=payload.contract_id,
                status=payload.status,
            )
        )
    except InvalidMemberInput as exc:
        return _error(400, str(exc))
    return FamilyMemberEnvelope(
        data=FamilyMemberResponse.model_validate(member),
        message="Family member added successfully",
    )


@router.post(
    "/next-of-kin",
    response_model=NextOfKinEnvelope,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, **_NOT_FOUND},
)
def assign_next_of_kin(payload: NextOfKinAssign, directory: FamilyDirectory = Depends(get_directory)):
    """
    Assigns an existing member as next of kin, or acknowledges an email invitation.

    ``memberId`` takes precedence when both are supplied.
    """
    if payload.member_id:
        try:
            member = directory.assign_next_of_kin(payload.member_id)
        except MemberNotFound as exc:
            return _not_found(exc)
        return NextOfKinEnvelope(
            data=FamilyMemberResponse.model_validate(member),
            message="Next of kin assigned successfully",
        )

    try:
        message = directory.invite_next_of_kin(payload.email or "")
    except InvalidMemberInput as exc:
        return _error(400, str(exc))
    return NextOfKinEnvelope(message=message)


@router.patch("/{member_id}/star", response_model=FamilyMemberEnvelope, responses=_NOT_FOUND)
def toggle_star(member_id: int, directory: FamilyDirectory = Depends(get_directory)):
    try:
        member = directory.toggle_star(member_id)
    except MemberNotFound as exc:
        return _not_found(exc)
    return FamilyMemberEnvelope(
        data=FamilyMemberResponse.model_validate(member),
        message="Star status updated",
    )


@router.patch("/{member_id}/accesses", response_model=FamilyMemberEnvelope, responses=_NOT_FOUND)
def update_accesses(
    member_id: int,
    payload: AccessesUpdate,
    directory: FamilyDirectory = Depends(get_directory),
):
    try:
        member = directory.update_accesses(member_id, payload.contracts)
    except MemberNotFound as exc:
        return _not_found(exc)
    return FamilyMemberEnvelope(
        data=FamilyMemberResponse.model_validate(member),
        message="Accesses updated successfully",
    )


@router.delete("/{member_id}", response_model=MessageResponse, responses=_NOT_FOUND)
def delete_family_member(member_id: int, directory: FamilyDirectory = Depends(get_directory)):
    try:
        outcome = directory.remove_member(member_id)
    except MemberNotFound as exc:
        return _not_found(exc)
    if outcome.was_next_of_kin:
        return MessageResponse(message="Next of kin removed successfully")
    return MessageResponse(message="Family member deleted successfully")
