import threading

import pytest

from carecenter.services.directory import (
    FamilyDirectory,
    InvalidMemberInput,
    MemberNotFound,
    MemberRepository,
    NewFamilyMember,
    Partition,
)
from carecenter.services.fixtures import build_directory


def _ids(members):
    return [member.id for member in members]


def _assert_partitions_consistent(directory: FamilyDirectory):
    repo = directory.repository
    assert all(member.is_starred for member in repo.starred_members)
    assert not any(member.is_starred for member in repo.all_members)
    ids = _ids(repo.members())
    assert len(ids) == len(set(ids))
    if repo.next_of_kin is not None:
        assert repo.next_of_kin.id not in _ids(repo.starred_members + repo.all_members)


def _new_member(**overrides):
    values = {
        "first_name": "Anakin",
        "last_name": "Skywalker",
        "relationship": "Father",
        "email": "a@x.com",
        "contract_id": 1,
    }
    values.update(overrides)
    return NewFamilyMember(**values)


def test_toggle_starred_member_moves_to_end_of_all_members(small_directory):
    member = small_directory.toggle_star(2)

    repo = small_directory.repository
    assert member.id == 2
    assert member.is_starred is False
    assert _ids(repo.starred_members) == []
    assert _ids(repo.all_members) == [4, 5, 2]
    _assert_partitions_consistent(small_directory)


def test_toggle_unstarred_member_moves_to_end_of_starred(small_directory):
    member = small_directory.toggle_star(5)

    repo = small_directory.repository
    assert member.is_starred is True
    assert _ids(repo.starred_members) == [2, 5]
    assert _ids(repo.all_members) == [4]
    _assert_partitions_consistent(small_directory)


def test_toggle_next_of_kin_flips_flag_in_place(small_directory):
    repo = small_directory.repository
    next_of_kin = repo.next_of_kin
    assert next_of_kin.is_starred is False

    returned = small_directory.toggle_star(1)

    assert returned == next_of_kin
    assert repo.next_of_kin is next_of_kin
    assert next_of_kin.is_starred is True
    assert _ids(repo.starred_members) == [2]
    assert _ids(repo.all_members) == [4, 5]

    small_directory.toggle_star(1)
    assert repo.next_of_kin.is_starred is False


def test_toggle_missing_member_leaves_directory_unchanged(small_directory):
    before = small_directory.snapshot()

    with pytest.raises(MemberNotFound) as exc_info:
        small_directory.toggle_star(999)

    assert exc_info.value.member_id == 999
    assert str(exc_info.value) == "Member not found"
    assert small_directory.snapshot() == before


@pytest.mark.parametrize("member_id", [2, 3, 4, 5])
def test_double_toggle_restores_partition_and_flag(member_id):
    directory = build_directory()
    repo = directory.repository
    partition, member = repo.locate(member_id)
    original_flag = member.is_starred

    directory.toggle_star(member_id)
    directory.toggle_star(member_id)

    assert repo.locate(member_id)[0] is partition
    assert member.is_starred is original_flag
    _assert_partitions_consistent(directory)


def test_locate_scans_starred_before_all_members_before_next_of_kin(member_factory):
    # Collisions cannot be built through the constructor, so inject them after.
    repo = MemberRepository(
        next_of_kin=member_factory(1),
        starred_members=[member_factory(2, starred=True)],
        all_members=[member_factory(3)],
    )
    repo.all_members.append(member_factory(2, name="Shadow"))
    repo.next_of_kin = member_factory(3, name="Shadow")

    assert repo.locate(2)[0] is Partition.starred
    assert repo.locate(3)[0] is Partition.unstarred
    assert repo.find_by_id(3).name == "Member 3"


def test_repository_rejects_inconsistent_seed(member_factory):
    with pytest.raises(ValueError):
        MemberRepository(starred_members=[member_factory(1)])
    with pytest.raises(ValueError):
        MemberRepository(all_members=[member_factory(1, starred=True)])
    with pytest.raises(ValueError):
        MemberRepository(next_of_kin=member_factory(1), all_members=[member_factory(1)])
    with pytest.raises(ValueError):
        MemberRepository(all_members=[member_factory(7)], next_id=5)


def test_next_id_defaults_past_highest_existing_id(member_factory):
    repo = MemberRepository(all_members=[member_factory(3), member_factory(9)])
    assert repo.upcoming_id == 10
    assert repo.next_id() == 10
    assert repo.next_id() == 11


def test_created_ids_are_sequential_from_counter(small_directory):
    start = small_directory.repository.upcoming_id
    created = [small_directory.add_member(_new_member(first_name=f"N{i}")) for i in range(4)]

    assert _ids(created) == [start, start + 1, start + 2, start + 3]


def test_add_member_builds_unstarred_record_with_contract_access(small_directory):
    member = small_directory.add_member(_new_member())

    assert member.id == 6
    assert member.name == "Anakin Skywalker"
    assert member.relationship == "Father"
    assert member.initials == "AS"
    assert member.phone == ""
    assert member.is_starred is False
    assert [(item.id, item.type.value, item.label) for item in member.accesses] == [
        ("FU8434434", "viewer", "ID: FU8434434"),
        (None, "viewer", "My Wishes"),
    ]
    assert small_directory.repository.all_members[-1] == member
    _assert_partitions_consistent(small_directory)


def test_add_member_with_unknown_contract_keeps_empty_contract_entry(small_directory):
    member = small_directory.add_member(_new_member(contract_id=42, phone="+1 555 0100"))

    assert member.phone == "+1 555 0100"
    assert member.accesses[0].id == ""
    assert member.accesses[0].label == "ID: "
    assert member.accesses[1].label == "My Wishes"


def test_add_member_initials_from_leia_organa(small_directory):
    member = small_directory.add_member(_new_member(first_name="Leia", last_name="Organa"))
    assert member.initials == "LO"


@pytest.mark.parametrize("first_name,last_name", [("", "Organa"), ("Leia", ""), ("   ", "Organa")])
def test_add_member_rejects_missing_names(small_directory, first_name, last_name):
    start = small_directory.repository.upcoming_id

    with pytest.raises(InvalidMemberInput):
        small_directory.add_member(_new_member(first_name=first_name, last_name=last_name))

    assert small_directory.repository.upcoming_id == start
    assert _ids(small_directory.repository.all_members) == [4, 5]


def test_snapshot_is_detached_from_live_state(small_directory):
    snapshot = small_directory.snapshot()
    snapshot.all_members.clear()
    snapshot.next_of_kin.is_starred = True

    repo = small_directory.repository
    assert _ids(repo.all_members) == [4, 5]
    assert repo.next_of_kin.is_starred is False


def test_assign_next_of_kin_demotes_previous_by_flag(small_directory):
    repo = small_directory.repository
    repo.next_of_kin.is_starred = True

    member = small_directory.assign_next_of_kin(4)

    assert repo.next_of_kin == member
    assert member.id == 4
    assert _ids(repo.all_members) == [5]
    assert _ids(repo.starred_members) == [2, 1]
    _assert_partitions_consistent(small_directory)


def test_assign_current_next_of_kin_is_noop(small_directory):
    before = small_directory.snapshot()
    member = small_directory.assign_next_of_kin(1)
    assert member.id == 1
    assert small_directory.snapshot() == before


def test_assign_missing_next_of_kin_leaves_slot(small_directory):
    with pytest.raises(MemberNotFound):
        small_directory.assign_next_of_kin(404)
    assert small_directory.repository.next_of_kin.id == 1


def test_invite_next_of_kin_requires_email(small_directory):
    assert small_directory.invite_next_of_kin("obi@wan.org") == "Invitation sent to obi@wan.org"
    with pytest.raises(InvalidMemberInput):
        small_directory.invite_next_of_kin("  ")


def test_update_accesses_replaces_list(small_directory):
    member = small_directory.update_accesses(1, ["FU8434436", "FU8434437"])

    assert [item.label for item in member.accesses] == ["ID: FU8434436", "ID: FU8434437", "My Wishes"]
    with pytest.raises(MemberNotFound):
        small_directory.update_accesses(77, [])


def test_remove_member_deletes_from_partition(small_directory):
    outcome = small_directory.remove_member(4)

    assert outcome.was_next_of_kin is False
    assert _ids(small_directory.repository.all_members) == [5]
    with pytest.raises(MemberNotFound):
        small_directory.find_member(4)


def test_remove_next_of_kin_keeps_member_in_partition(small_directory):
    outcome = small_directory.remove_member(1)

    repo = small_directory.repository
    assert outcome.was_next_of_kin is True
    assert repo.next_of_kin is None
    assert _ids(repo.all_members) == [4, 5, 1]
    _assert_partitions_consistent(small_directory)


def test_removed_ids_are_not_reused(small_directory):
    small_directory.remove_member(5)
    member = small_directory.add_member(_new_member())
    assert member.id == 6
    small_directory.remove_member(6)
    assert small_directory.add_member(_new_member()).id == 7


def test_concurrent_toggles_keep_partitions_consistent():
    directory = build_directory()

    def worker():
        for _ in range(200):
            for member_id in (1, 2, 3, 4, 5):
                directory.toggle_star(member_id)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    _assert_partitions_consistent(directory)
    assert sorted(_ids(directory.repository.members())) == [1, 2, 3, 4, 5]


def test_commands_return_detached_copies(small_directory):
    repo = small_directory.repository

    toggled = small_directory.toggle_star(4)
    small_directory.toggle_star(4)
    assert toggled.is_starred is True
    assert repo.find_by_id(4).is_starred is False

    assigned = small_directory.assign_next_of_kin(5)
    small_directory.update_accesses(5, ["FU8434438"])
    assert [item.label for item in assigned.accesses] == ["My Wishes"]

    created = small_directory.add_member(_new_member())
    created.is_starred = True
    assert repo.find_by_id(created.id).is_starred is False


def test_add_member_rejects_none_names(small_directory):
    with pytest.raises(InvalidMemberInput):
        small_directory.add_member(_new_member(first_name=None))
