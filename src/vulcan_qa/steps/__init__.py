"""pytest-bdd step definitions, registered through ``pytest_plugins`` in the root conftest."""
