from __future__ import annotations

from datetime import datetime, timezone

import pytest

from chama_system.auth.context import AuthContext
from chama_system.groups.model import GroupRegistrationInput
from chama_system.groups.registration import GroupRegistrationWorkflow


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def auth() -> AuthContext:
    return AuthContext()


@pytest.fixture
def workflow(fixed_now) -> GroupRegistrationWorkflow:
    return GroupRegistrationWorkflow(clock=lambda: fixed_now)


@pytest.fixture
def umoja_input() -> GroupRegistrationInput:
    return GroupRegistrationInput(
        group_name="Umoja Chama",
        email="umoja@x.com",
        account_no="001122",
        chairman_name="Asha",
        chairman_email="asha@x.com",
        chairman_password="secretpw1",
        secretary_name="Beno",
        secretary_email="beno@x.com",
        treasurer_name="Cleo",
        treasurer_email="cleo@x.com",
        document="constitution.pdf",
    )
