"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the onboarding logic lives in services.
"""

import importlib

from chama_system.auth.context import AuthContext
from chama_system.container import build_container
from chama_system.groups.model import GroupRegistrationInput
from chama_system.navigation.service import NavigationService
from chama_system.settings import get_settings_module


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)
    auth = AuthContext()

    outcome = container.group_service.register(
        GroupRegistrationInput(
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
        ),
        auth=auth,
    )
    print(outcome.group.name, "persisted" if outcome.persisted else "NOT persisted")

    for entry in NavigationService(auth).current_navigation():
        print(f"{entry.label:<24} {entry.destination}")


if __name__ == "__main__":
    main()
