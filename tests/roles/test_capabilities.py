from __future__ import annotations

import pytest

from chama_system.core.enums import Capability, Role
from chama_system.core.exceptions import InvalidRoleError
from chama_system.roles.capabilities import BASE_ENTRIES, capabilities_for, role_has_capability


@pytest.mark.parametrize("role", list(Role))
def test_every_role_contains_member_entries(role):
    member = capabilities_for(Role.MEMBER)
    entries = capabilities_for(role)

    assert set(member) <= set(entries)
    # base entries keep their order at the front
    assert entries[: len(member)] == member


@pytest.mark.parametrize("role", list(Role))
def test_capabilities_for_is_deterministic(role):
    assert capabilities_for(role) == capabilities_for(role)


def test_member_gets_only_base_entries():
    assert capabilities_for(Role.MEMBER) == BASE_ENTRIES
    assert [e.capability for e in BASE_ENTRIES] == [
        Capability.DASHBOARD,
        Capability.VIEW_OWN_CONTRIBUTIONS,
        Capability.SUBMIT_CONTRIBUTION,
        Capability.VIEW_MEMBER_LIST,
        Capability.VIEW_OWN_PROFILE,
        Capability.VIEW_DIVIDEND_DISTRIBUTION,
    ]


@pytest.mark.parametrize("role", [Role.SECRETARY, Role.CHAIRMAN, Role.TREASURER])
def test_officers_manage_member_directory(role):
    entries = capabilities_for(role)

    assert entries[-1].capability == Capability.MANAGE_MEMBER_DIRECTORY
    assert entries[-1].destination == "/members"
    assert role_has_capability(role, Capability.MANAGE_MEMBER_DIRECTORY)


def test_member_cannot_manage_member_directory():
    assert not role_has_capability(Role.MEMBER, Capability.MANAGE_MEMBER_DIRECTORY)


def test_role_value_strings_are_accepted():
    assert capabilities_for("chairman") == capabilities_for(Role.CHAIRMAN)


@pytest.mark.parametrize("bad", ["admin", "", None, "Chairman"])
def test_unknown_role_is_rejected(bad):
    with pytest.raises(InvalidRoleError):
        capabilities_for(bad)
