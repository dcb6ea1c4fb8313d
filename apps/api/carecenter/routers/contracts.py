from fastapi import APIRouter, Depends

from carecenter.core.state import get_directory
from carecenter.schemas.family import ContractListEnvelope, ContractResponse
from carecenter.services.directory import FamilyDirectory

router = APIRouter(prefix="/contracts", tags=["contracts"])


@router.get("", response_model=ContractListEnvelope)
def list_contracts(directory: FamilyDirectory = Depends(get_directory)):
    return ContractListEnvelope(data=[ContractResponse.model_validate(item) for item in directory.contracts()])
