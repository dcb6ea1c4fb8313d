from __future__ import annotations

from typing import Iterable

from carecenter.models.entities import MY_WISHES_LABEL, Access, Contract


def compose_name(first_name: str, last_name: str) -> str:
    return f"{first_name} {last_name}"


def derive_initials(first_name: str, last_name: str) -> str:
    # Some letters upper-case to several characters ("ß" -> "SS"); keep one per name.
    return first_name[0].upper()[:1] + last_name[0].upper()[:1]


def resolve_contract_number(contracts: Iterable[Contract], contract_id: int | None) -> str:
    """
    Returns the contract number for ``contract_id``, or an empty string.

    Unknown or missing ids are treated as "no contract" rather than an error.
    """
    if contract_id is None:
        return ""
    for contract in contracts:
        if contract.id == contract_id:
            return contract.contract_number
    return ""


def contract_access(contract_number: str) -> Access:
    return Access(id=contract_number, label=f"ID: {contract_number}")


def wishes_access() -> Access:
    return Access(label=MY_WISHES_LABEL)


def build_accesses(contract_numbers: Iterable[str]) -> list[Access]:
    # The wishes entry always closes the list.
    return [contract_access(number) for number in contract_numbers] + [wishes_access()]
