from __future__ import annotations

import dataclasses
from decimal import Decimal

import pytest

from chama_system.auth.context import AuthContext
from chama_system.auth.policy import CredentialPolicy
from chama_system.core.enums import Capability, Role, SlotStatus
from chama_system.core.exceptions import DuplicateEmailError, ValidationError, WeakCredentialError
from chama_system.groups.registration import GroupRegistrationWorkflow
from chama_system.navigation.service import navigation_for

REQUIRED_FIELDS = [
    "group_name",
    "email",
    "account_no",
    "chairman_name",
    "chairman_email",
    "chairman_password",
    "secretary_name",
    "secretary_email",
    "treasurer_name",
    "treasurer_email",
    "document",
]


def test_umoja_scenario(workflow, auth, umoja_input, fixed_now):
    registered = workflow.register_group(umoja_input, auth=auth)
    group, chairman = registered.group, registered.chairman

    assert group.name == "Umoja Chama"
    assert group.email == "umoja@x.com"
    assert group.account_no == "001122"
    assert group.created_at == fixed_now

    assert group.chairman is chairman
    assert chairman.role == Role.CHAIRMAN
    assert chairman.email == "asha@x.com"
    assert chairman.total_contributions == Decimal("0")
    assert chairman.identity_id != group.group_id

    assert group.secretary.email == "beno@x.com"
    assert group.secretary.status == SlotStatus.PENDING_ACTIVATION
    assert group.treasurer.email == "cleo@x.com"
    assert group.treasurer.status == SlotStatus.PENDING_ACTIVATION

    assert auth.current_identity() == chairman
    capabilities = [e.capability for e in navigation_for(chairman)]
    assert Capability.MANAGE_MEMBER_DIRECTORY in capabilities


@pytest.mark.parametrize("field_name", REQUIRED_FIELDS)
@pytest.mark.parametrize("empty", [None, "", "   "])
def test_missing_field_fails_without_side_effects(workflow, umoja_input, field_name, empty):
    auth = AuthContext()
    data = dataclasses.replace(umoja_input, **{field_name: empty})

    with pytest.raises(ValidationError) as exc:
        workflow.register_group(data, auth=auth)

    assert exc.value.field == field_name
    assert auth.current_identity() is None


def test_missing_chairman_email_keeps_previous_session(workflow, umoja_input):
    auth = AuthContext()
    earlier = workflow.register_group(umoja_input, auth=AuthContext()).chairman
    auth.login(earlier)

    with pytest.raises(ValidationError) as exc:
        workflow.register_group(dataclasses.replace(umoja_input, chairman_email=""), auth=auth)

    assert exc.value.field == "chairman_email"
    assert auth.current_identity() == earlier


def test_first_invalid_field_is_reported(workflow, auth, umoja_input):
    data = dataclasses.replace(umoja_input, account_no="", treasurer_email="")

    with pytest.raises(ValidationError) as exc:
        workflow.register_group(data, auth=auth)

    assert exc.value.field == "account_no"


@pytest.mark.parametrize("field_name", ["email", "chairman_email", "secretary_email", "treasurer_email"])
def test_malformed_email_rejected(workflow, auth, umoja_input, field_name):
    data = dataclasses.replace(umoja_input, **{field_name: "not-an-email"})

    with pytest.raises(ValidationError) as exc:
        workflow.register_group(data, auth=auth)

    assert exc.value.field == field_name
    assert auth.current_identity() is None


def test_short_password_is_weak(workflow, auth, umoja_input):
    data = dataclasses.replace(umoja_input, chairman_password="short")

    with pytest.raises(WeakCredentialError) as exc:
        workflow.register_group(data, auth=auth)

    assert exc.value.field == "chairman_password"
    assert auth.current_identity() is None


def test_password_policy_is_configurable(auth, umoja_input):
    strict = GroupRegistrationWorkflow(policy=CredentialPolicy(min_length=12))

    with pytest.raises(WeakCredentialError):
        strict.register_group(umoja_input, auth=auth)

    lenient = GroupRegistrationWorkflow(policy=CredentialPolicy(min_length=4))
    data = dataclasses.replace(umoja_input, chairman_password="abcd")
    assert lenient.register_group(data, auth=auth).chairman.role == Role.CHAIRMAN


def test_officer_emails_must_be_distinct(workflow, auth, umoja_input):
    data = dataclasses.replace(umoja_input, treasurer_email="ASHA@x.com")

    with pytest.raises(DuplicateEmailError) as exc:
        workflow.register_group(data, auth=auth)

    assert exc.value.field == "treasurer_email"
    assert auth.current_identity() is None


def test_group_contact_email_may_match_chairman(workflow, auth, umoja_input):
    data = dataclasses.replace(umoja_input, email="asha@x.com")
    assert workflow.register_group(data, auth=auth).group.email == "asha@x.com"


def test_fields_are_trimmed(workflow, auth, umoja_input):
    data = dataclasses.replace(umoja_input, group_name="  Umoja Chama  ", chairman_email=" asha@x.com ")
    registered = workflow.register_group(data, auth=auth)

    assert registered.group.name == "Umoja Chama"
    assert registered.chairman.email == "asha@x.com"


def test_ids_are_unique_across_many_registrations(umoja_input):
    workflow = GroupRegistrationWorkflow()
    auth = AuthContext()
    group_ids: set[str] = set()
    identity_ids: set[str] = set()

    for i in range(10_000):
        data = dataclasses.replace(umoja_input, group_name=f"Group {i}")
        registered = workflow.register_group(data, auth=auth)
        group_ids.add(registered.group.group_id)
        identity_ids.add(registered.chairman.identity_id)

    assert len(group_ids) == 10_000
    assert len(identity_ids) == 10_000
    assert not group_ids & identity_ids


def test_ids_are_128_bit_hex(workflow, auth, umoja_input):
    registered = workflow.register_group(umoja_input, auth=auth)
    assert len(registered.group.group_id) == 32
    int(registered.group.group_id, 16)


@pytest.mark.parametrize("document", [[], (), b"", 0, False])
def test_falsy_document_reference_is_missing(workflow, umoja_input, document):
    auth = AuthContext()

    with pytest.raises(ValidationError) as exc:
        workflow.register_group(dataclasses.replace(umoja_input, document=document), auth=auth)

    assert exc.value.field == "document"
    assert auth.current_identity() is None
