from __future__ import annotations

import copy
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from carecenter.models.entities import Contract, FamilyMember
from carecenter.services.members import (
    build_accesses,
    compose_name,
    derive_initials,
    resolve_contract_number,
)

logger = logging.getLogger(__name__)


class MemberNotFound(LookupError):
    def __init__(self, member_id: int):
        super().__init__("Member not found")
        self.member_id = member_id


class InvalidMemberInput(ValueError):
    pass


class Partition(str, Enum):
    starred = "starred"
    unstarred = "unstarred"
    next_of_kin = "next_of_kin"


@dataclass
class NewFamilyMember:
    first_name: str | None
    last_name: str | None
    relationship: str
    email: str
    phone: str | None = None
    contract_id: int | None = None
    # Salutation from the add-member form; accepted but not stored.
    status: str | None = None


@dataclass(frozen=True)
class DirectorySnapshot:
    next_of_kin: FamilyMember | None
    starred_members: list[FamilyMember]
    all_members: list[FamilyMember]


@dataclass(frozen=True)
class RemovalOutcome:
    member_id: int
    was_next_of_kin: bool


class MemberRepository:
    """
    Owns the next-of-kin slot, the starred/unstarred partitions and the id counter.

    Not synchronised; FamilyDirectory serialises access to it.
    """

    def __init__(
        self,
        *,
        next_of_kin: FamilyMember | None = None,
        starred_members: Iterable[FamilyMember] = (),
        all_members: Iterable[FamilyMember] = (),
        next_id: int | None = None,
    ):
        self.next_of_kin = next_of_kin
        self.starred_members = list(starred_members)
        self.all_members = list(all_members)

        if any(not member.is_starred for member in self.starred_members):
            raise ValueError("starred partition holds an unstarred member")
        if any(member.is_starred for member in self.all_members):
            raise ValueError("unstarred partition holds a starred member")

        ids = [member.id for member in self.members()]
        if len(ids) != len(set(ids)):
            raise ValueError("member ids must be unique across the directory")

        floor = max(ids, default=0) + 1
        if next_id is None:
            next_id = floor
        elif next_id < floor:
            raise ValueError("next_id would reuse an existing member id")
        self._next_id = next_id

    @property
    def upcoming_id(self) -> int:
        return self._next_id

    def next_id(self) -> int:
        value = self._next_id
        self._next_id += 1
        return value

    def members(self) -> list[FamilyMember]:
        out = [*self.starred_members, *self.all_members]
        if self.next_of_kin is not None:
            out.append(self.next_of_kin)
        return out

    def locate(self, member_id: int) -> tuple[Partition, FamilyMember]:
        # Scan order is starred, unstarred, next of kin; the first hit wins.
        for member in self.starred_members:
            if member.id == member_id:
                return Partition.starred, member
        for member in self.all_members:
            if member.id == member_id:
                return Partition.unstarred, member
        if self.next_of_kin is not None and self.next_of_kin.id == member_id:
            return Partition.next_of_kin, self.next_of_kin
        raise MemberNotFound(member_id)

    def find_by_id(self, member_id: int) -> FamilyMember:
        return self.locate(member_id)[1]

    def detach(self, partition: Partition, member: FamilyMember) -> None:
        if partition is Partition.next_of_kin:
            self.next_of_kin = None
            return
        items = self.starred_members if partition is Partition.starred else self.all_members
        for index, item in enumerate(items):
            if item is member:
                del items[index]
                return
        raise MemberNotFound(member.id)

    def place(self, member: FamilyMember) -> None:
        if member.is_starred:
            self.starred_members.append(member)
        else:
            self.all_members.append(member)


class FamilyDirectory:
    """
    Family directory operations over a MemberRepository.

    Every command holds the directory lock for its whole duration, so the
    partition invariant holds between commands even under a threaded server.
    """

    def __init__(self, repository: MemberRepository, contracts: Iterable[Contract] = ()):
        self._repository = repository
        self._contracts = tuple(contracts)
        self._lock = threading.Lock()

    @property
    def repository(self) -> MemberRepository:
        return self._repository

    def contracts(self) -> list[Contract]:
        return list(self._contracts)

    def _locate(self, member_id: int) -> tuple[Partition, FamilyMember]:
        try:
            return self._repository.locate(member_id)
        except MemberNotFound:
            logger.warning("Family member not found: id=%s", member_id)
            raise

    def snapshot(self) -> DirectorySnapshot:
        with self._lock:
            return DirectorySnapshot(
                next_of_kin=copy.deepcopy(self._repository.next_of_kin),
                starred_members=copy.deepcopy(self._repository.starred_members),
                all_members=copy.deepcopy(self._repository.all_members),
            )

    def find_member(self, member_id: int) -> FamilyMember:
        with self._lock:
            return copy.deepcopy(self._locate(member_id)[1])

    def toggle_star(self, member_id: int) -> FamilyMember:
        with self._lock:
            partition, member = self._locate(member_id)
            if partition is Partition.starred:
                self._repository.detach(partition, member)
                member.is_starred = False
                self._repository.all_members.append(member)
            elif partition is Partition.unstarred:
                self._repository.detach(partition, member)
                member.is_starred = True
                self._repository.starred_members.append(member)
            else:
                # The next of kin keeps its slot; only the flag changes.
                member.is_starred = not member.is_starred
            result = copy.deepcopy(member)

        logger.info("Toggled star: id=%s partition=%s starred=%s", result.id, partition.value, result.is_starred)
        return result

    def add_member(self, payload: NewFamilyMember) -> FamilyMember:
        first_name = (payload.first_name or "").strip()
        last_name = (payload.last_name or "").strip()
        if not first_name or not last_name:
            logger.warning("Rejected family member without a full name")
            raise InvalidMemberInput("First name and last name are required")

        contract_number = resolve_contract_number(self._contracts, payload.contract_id)

        with self._lock:
            member = FamilyMember(
                id=self._repository.next_id(),
                name=compose_name(first_name, last_name),
                relationship=payload.relationship,
                phone=payload.phone or "",
                email=payload.email,
                initials=derive_initials(first_name, last_name),
                accesses=build_accesses([contract_number]),
                is_starred=False,
            )
            self._repository.all_members.append(member)
            result = copy.deepcopy(member)

        logger.info("Added family member: id=%s contract=%r", result.id, contract_number)
        return result

    def assign_next_of_kin(self, member_id: int) -> FamilyMember:
        with self._lock:
            partition, member = self._locate(member_id)
            if partition is Partition.next_of_kin:
                return copy.deepcopy(member)

            self._repository.detach(partition, member)
            previous = self._repository.next_of_kin
            if previous is not None:
                self._repository.place(previous)
            self._repository.next_of_kin = member
            result = copy.deepcopy(member)

        logger.info(
            "Assigned next of kin: id=%s previous=%s",
            result.id,
            previous.id if previous is not None else None,
        )
        return result

    def invite_next_of_kin(self, email: str) -> str:
        email = (email or "").strip()
        if not email:
            raise InvalidMemberInput("Either memberId or email is required")
        # No mail transport exists; the invitation is acknowledged only.
        logger.info("Next of kin invitation requested for %s", email)
        return f"Invitation sent to {email}"

    def update_accesses(self, member_id: int, contract_numbers: Iterable[str]) -> FamilyMember:
        numbers = list(contract_numbers)
        with self._lock:
            _, member = self._locate(member_id)
            member.accesses = build_accesses(numbers)
            result = copy.deepcopy(member)

        logger.info("Updated accesses: id=%s contracts=%s", result.id, numbers)
        return result

    def remove_member(self, member_id: int) -> RemovalOutcome:
        with self._lock:
            partition, member = self._locate(member_id)
            self._repository.detach(partition, member)
            if partition is Partition.next_of_kin:
                # Losing the next-of-kin role does not delete the member.
                self._repository.place(member)

        outcome = RemovalOutcome(member_id=member.id, was_next_of_kin=partition is Partition.next_of_kin)
        logger.info("Removed family member: id=%s next_of_kin=%s", outcome.member_id, outcome.was_next_of_kin)
        return outcome
