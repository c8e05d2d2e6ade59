"""Seeded accounts of the demo shop and the messages they trigger."""

from __future__ import annotations

from dataclasses import dataclass

from .models import LoginCredentials
from .utils.config import load_settings


@dataclass(frozen=True)
class Persona:
    """A seeded account together with the behaviour it is known for."""

    key: str
    username: str
    quirk: str

    def credentials(self, password: str | None = None) -> LoginCredentials:
        if password is None:
            password = load_settings().password
        return LoginCredentials(username=self.username, password=password)


STANDARD = Persona("standard", "standard_user", "Behaves as documented.")
LOCKED_OUT = Persona("locked_out", "locked_out_user", "Login is refused.")
PROBLEM = Persona("problem", "problem_user", "Same image for every product; sorting and some add-to-cart buttons are broken.")
PERFORMANCE_GLITCH = Persona("performance_glitch", "performance_glitch_user", "Login and sorting take several seconds.")
ERROR = Persona("error", "error_user", "Sorting raises a browser alert and leaves the list unchanged.")
VISUAL = Persona("visual", "visual_user", "Layout and images are visually altered.")

PERSONAS: dict[str, Persona] = {
    p.key: p for p in (STANDARD, LOCKED_OUT, PROBLEM, PERFORMANCE_GLITCH, ERROR, VISUAL)
}


def get_persona(key: str) -> Persona:
    """Look up a persona by key (``standard``) or username (``standard_user``)."""
    if key in PERSONAS:
        return PERSONAS[key]
    for persona in PERSONAS.values():
        if persona.username == key:
            return persona
    raise KeyError(f"Unknown persona: {key}")


INVALID_CREDENTIALS = LoginCredentials("invalid_user", "invalid_password")


class LoginErrors:
    INVALID_CREDENTIALS = "Epic sadface: Username and password do not match any user in this service"
    USERNAME_REQUIRED = "Epic sadface: Username is required"
    PASSWORD_REQUIRED = "Epic sadface: Password is required"
    LOCKED_OUT_USER = "Epic sadface: Sorry, this user has been locked out."


class CheckoutErrors:
    FIRST_NAME_REQUIRED = "Error: First Name is required"
    LAST_NAME_REQUIRED = "Error: Last Name is required"
    POSTAL_CODE_REQUIRED = "Error: Postal Code is required"


SORTING_BROKEN_ALERT = "Sorting is broken! This error has been reported to Backtrace."
ORDER_CONFIRMATION = "Thank you for your order"

# Timing window observed for performance_glitch_user, in seconds.
GLITCH_MIN_DELAY = 4.0
GLITCH_MAX_DELAY = 10.0
