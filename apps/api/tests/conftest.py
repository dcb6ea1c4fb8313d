import pytest
from fastapi.testclient import TestClient

from carecenter.core.config import Settings
from carecenter.main import create_app
from carecenter.models.entities import FamilyMember
from carecenter.services.directory import FamilyDirectory, MemberRepository
from carecenter.services.fixtures import seed_contracts
from carecenter.services.members import build_accesses


def make_member(member_id: int, *, starred: bool = False, name: str | None = None) -> FamilyMember:
    return FamilyMember(
        id=member_id,
        name=name or f"Member {member_id}",
        relationship="Friend",
        phone="",
        email=f"member{member_id}@example.com",
        initials="MM",
        accesses=build_accesses([]),
        is_starred=starred,
    )


@pytest.fixture
def app():
    # A fresh app per test, so every test starts from the seeded fixtures.
    return create_app(Settings(api_prefix="/api", cors_allow_origins="*"))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def member_factory():
    return make_member


@pytest.fixture
def small_directory():
    repository = MemberRepository(
        next_of_kin=make_member(1),
        starred_members=[make_member(2, starred=True)],
        all_members=[make_member(4), make_member(5)],
        next_id=6,
    )
    return FamilyDirectory(repository, contracts=seed_contracts())
