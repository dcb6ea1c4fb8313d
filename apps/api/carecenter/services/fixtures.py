from __future__ import annotations

from carecenter.models.entities import Contract, FamilyMember, Profile
from carecenter.services.directory import FamilyDirectory, MemberRepository
from carecenter.services.members import build_accesses
from carecenter.services.profile import ProfileStore

FIRST_GENERATED_MEMBER_ID = 6


def seed_contracts() -> list[Contract]:
    return [
        Contract(id=1, contract_number="FU8434434"),
        Contract(id=2, contract_number="FU8434435"),
        Contract(id=3, contract_number="FU8434436"),
        Contract(id=4, contract_number="FU8434437"),
        Contract(id=5, contract_number="FU8434438"),
    ]


def seed_next_of_kin() -> FamilyMember:
    return FamilyMember(
        id=1,
        name="Obi-Wan Kenobi",
        relationship="Mentor",
        phone="+1 555 JEDI 042",
        email="ben.kenobi@jediorder.org",
        initials="OK",
        accesses=build_accesses(["FU8434434", "FU8434435", "FU8434436"]),
        is_starred=False,
    )


def seed_starred_members() -> list[FamilyMember]:
    return [
        FamilyMember(
            id=2,
            name="Leia Organa",
            relationship="Sister",
            phone="+1 555 REBEL 777",
            email="leia.organa@rebellion.org",
            initials="LO",
            accesses=build_accesses(["FU8434434", "FU8434435"]),
            is_starred=True,
        ),
        FamilyMember(
            id=3,
            name="Han Solo",
            relationship="Brother-in-law",
            phone="+1 555 FCON 420",
            email="han.solo@millenniumfalcon.com",
            initials="HS",
            accesses=build_accesses(["FU8434434"]),
            is_starred=True,
        ),
    ]


def seed_all_members() -> list[FamilyMember]:
    return [
        FamilyMember(
            id=4,
            name="Chewbacca",
            relationship="Co-pilot & Friend",
            phone="+1 555 WOOKIE 190",
            email="chewie@millenniumfalcon.com",
            initials="CB",
            accesses=build_accesses(["FU8434436", "FU8434437"]),
            is_starred=False,
        ),
        FamilyMember(
            id=5,
            name="R2-D2",
            relationship="Droid Companion",
            phone="+1 555 BEEP BOOP",
            email="r2d2@astromech.droid",
            initials="R2",
            accesses=build_accesses(["FU8434438"]),
            is_starred=False,
        ),
    ]


def seed_profile() -> Profile:
    return Profile(
        user_id="JEDI-2187",
        status="Mister",
        first_name="Luke",
        last_name="Skywalker",
        middle_name="Force",
        prefix="Jedi Master",
        suffix="Jr.",
        phone_number="+1 555 JEDI 001",
        email="luke.skywalker@jediorder.org",
        second_number="+1 555 REBEL 123",
        country="USA",
        address_line1="1138 Desert View Lane, Tatooine District, AZ 85001",
        address_line2="Moisture Farm #42",
        state="AZ",
        city="Mos Eisley",
        zip_code="77777",
        initials="LS",
        photo_url=None,
    )


def build_directory() -> FamilyDirectory:
    repository = MemberRepository(
        next_of_kin=seed_next_of_kin(),
        starred_members=seed_starred_members(),
        all_members=seed_all_members(),
        next_id=FIRST_GENERATED_MEMBER_ID,
    )
    return FamilyDirectory(repository, contracts=seed_contracts())


def build_profile_store() -> ProfileStore:
    return ProfileStore(seed_profile())
