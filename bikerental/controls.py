"""Use-case controls that operate on the collections and the session."""

from __future__ import annotations

from dataclasses import dataclass

from .models import Bike, Member, Rental, Session
from .repositories import BikeCollection, MemberCollection, RentalCollection

ADMIN_ID = "admin"
_ADMIN_CREDENTIAL = "admin"


class NotLoggedInError(RuntimeError):
    """Raised when an action needs a logged-in member and there is none."""


@dataclass
class AddBikeControl:
    """Registers new bikes."""

    bikes: BikeCollection

    def add_bike(self, bike_id: str, model: str) -> Bike:
        """Register a bike with the given id and model and return it."""
        bike = Bike(bike_id, model)
        self.bikes.add(bike)
        return bike


@dataclass
class SignupControl:
    """Registers new members."""

    members: MemberCollection

    def signup(self, member_id: str, password: str, phone: str) -> Member:
        """Register a member and return it."""
        member = Member(member_id, password, phone)
        self.members.add(member)
        return member


@dataclass
class LoginControl:
    """Logs members, or the built-in administrator, into the session."""

    members: MemberCollection
    session: Session

    def login(self, member_id: str, password: str) -> Member | None:
        """Log in and return the member, or return None when the credentials fail."""
        if member_id == ADMIN_ID and password == _ADMIN_CREDENTIAL:
            admin = Member(ADMIN_ID, _ADMIN_CREDENTIAL, "")
            self.session.current_user = admin
            return admin
        member = self.members.find(member_id)
        if member is not None and member.authenticate(member_id, password):
            self.session.current_user = member
            return member
        return None


@dataclass
class LogoutControl:
    """Ends the current session."""

    session: Session

    def logout(self) -> Member:
        """Clear the session and return the member who was logged in."""
        member = self.session.current_user
        if member is None:
            raise NotLoggedInError("nobody is logged in")
        self.session.clear()
        return member


@dataclass
class RentBikeControl:
    """Rents bikes to the logged-in member."""

    bikes: BikeCollection
    rentals: RentalCollection
    session: Session

    def rent_bike(self, bike_id: str) -> Bike | None:
        """Rent the bike to the current member; return it, or None if it cannot be rented."""
        member = self.session.current_user
        if member is None:
            return None
        bike = self.bikes.find(bike_id)
        if bike is None or bike.is_rented:
            return None
        self.rentals.add(member.member_id, bike)
        return bike


@dataclass
class RentalInfoControl:
    """Lists the rentals of the logged-in member."""

    rentals_store: RentalCollection
    session: Session

    def rentals(self) -> list[Rental]:
        """Return the current member's rentals ordered by bike id."""
        member = self.session.current_user
        if member is None:
            raise NotLoggedInError("nobody is logged in")
        return self.rentals_store.sorted_for_member(member.member_id)