"""Entities of the bike rental service: bikes, members, rentals and the login session."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Bike:
    """A bike that can be registered and rented once."""

    bike_id: str
    model: str
    is_rented: bool = False

    def rent(self) -> None:
        """Mark the bike as rented."""
        self.is_rented = True


@dataclass
class Member:
    """A registered member of the service."""

    member_id: str
    password: str = field(repr=False)
    phone: str

    def authenticate(self, member_id: str, password: str) -> bool:
        """Return True when both the id and the password match this member."""
        return self.member_id == member_id and self.password == password


@dataclass(frozen=True)
class Rental:
    """A bike rented by a member."""

    member_id: str
    bike: Bike


@dataclass
class Session:
    """Holds the member that is currently logged in, if any."""

    current_user: Member | None = None

    def clear(self) -> None:
        """Forget the logged-in member."""
        self.current_user = None