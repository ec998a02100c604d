"""In-memory collections of bikes, members and rentals."""

from __future__ import annotations

from collections.abc import Iterator

from .models import Bike, Member, Rental


class BikeCollection:
    """Registered bikes, in registration order."""

    def __init__(self) -> None:
        self._bikes: list[Bike] = []

    def add(self, bike: Bike) -> None:
        """Register a bike."""
        self._bikes.append(bike)

    def find(self, bike_id: str) -> Bike | None:
        """Return the first bike with the given id, or None."""
        return next((bike for bike in self._bikes if bike.bike_id == bike_id), None)

    def __iter__(self) -> Iterator[Bike]:
        return iter(self._bikes)

    def __len__(self) -> int:
        return len(self._bikes)


class MemberCollection:
    """Registered members, in sign-up order."""

    def __init__(self) -> None:
        self._members: list[Member] = []

    def add(self, member: Member) -> None:
        """Register a member."""
        self._members.append(member)

    def find(self, member_id: str) -> Member | None:
        """Return the first member with the given id, or None."""
        return next(
            (member for member in self._members if member.member_id == member_id),
            None,
        )

    def __iter__(self) -> Iterator[Member]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)


class RentalCollection:
    """All rentals made so far."""

    def __init__(self) -> None:
        self._rentals: list[Rental] = []

    def add(self, member_id: str, bike: Bike) -> Rental:
        """Record a rental of the bike by the member and mark the bike rented."""
        rental = Rental(member_id, bike)
        self._rentals.append(rental)
        bike.rent()
        return rental

    def sorted_for_member(self, member_id: str) -> list[Rental]:
        """Return the member's rentals ordered by bike id."""
        return sorted(
            (rental for rental in self._rentals if rental.member_id == member_id),
            key=lambda rental: rental.bike.bike_id,
        )

    def __iter__(self) -> Iterator[Rental]:
        return iter(self._rentals)

    def __len__(self) -> int:
        return len(self._rentals)