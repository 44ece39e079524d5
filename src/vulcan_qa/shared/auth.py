"""Credentials registry for the fixture users of the application under test.

Feature files name a role ("standard", "locked") and never a password. Passwords
default to the public fixture values and can be replaced from the environment
with ``CREDENTIALS_<MEMBER>_PASSWORD`` (e.g. ``CREDENTIALS_ADMINISTRATOR_PASSWORD``).
"""
from __future__ import annotations

import os
from enum import Enum


class UserRole(Enum):
    """Logical roles used by the application, independent of how login happens."""

    STANDARD = "standard"
    ADMINISTRATOR = "administrator"
    LOCKED = "locked"
    PROBLEM = "problem"
    PERFORMANCE = "performance"

    @classmethod
    def from_name(cls, role_name: str) -> "UserRole":
        try:
            return cls[role_name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown user role: {role_name!r}") from None


class Credentials(Enum):
    STANDARD_USER = (UserRole.STANDARD, "standard_user", "secret_sauce")
    ADMINISTRATOR = (UserRole.ADMINISTRATOR, "admin_user", "secret_sauce")
    LOCKED_USER = (UserRole.LOCKED, "locked_out_user", "secret_sauce")
    PROBLEM_USER = (UserRole.PROBLEM, "problem_user", "secret_sauce")
    PERFORMANCE_USER = (UserRole.PERFORMANCE, "performance_glitch_user", "secret_sauce")

    def __init__(self, role: UserRole, username: str, default_password: str) -> None:
        self.role = role
        self.username = username
        self._default_password = default_password

    @property
    def password_env_var(self) -> str:
        return f"CREDENTIALS_{self.name}_PASSWORD"

    @property
    def password(self) -> str:
        return os.getenv(self.password_env_var) or self._default_password

    def __repr__(self) -> str:
        return f"<Credentials {self.name} role={self.role.value} username={self.username!r}>"

    __str__ = __repr__

    @classmethod
    def by_role(cls, role_name: str) -> "Credentials":
        role = UserRole.from_name(role_name)
        for credentials in cls:
            if credentials.role is role:
                return credentials
        raise ValueError(f"No credentials found for role: {role_name}")
