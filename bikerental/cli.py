"""Command-line driver that replays a file of menu commands and writes a report."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import TextIO

from .controls import (
    AddBikeControl,
    LoginControl,
    LogoutControl,
    NotLoggedInError,
    RentalInfoControl,
    RentBikeControl,
    SignupControl,
)
from .models import Session
from .repositories import BikeCollection, MemberCollection, RentalCollection


def _parse(line: str) -> tuple[int, int, list[str]]:
    """Split a command line into its two menu numbers and its parameters."""
    tokens = line.split()
    levels = []
    for token in tokens[:2]:
        try:
            levels.append(int(token))
        except ValueError:
            break
    if len(levels) < 2:
        levels += [0] * (2 - len(levels))
        return levels[0], levels[1], []
    return levels[0], levels[1], tokens[2:]


def _require(params: list[str], count: int, command: str) -> list[str]:
    if len(params) < count:
        raise ValueError(f"{command} needs {count} parameters, got {len(params)}")
    return params


class BikeRentalApp:
    """State of the service and the dispatcher for menu commands."""

    def __init__(self, out: TextIO) -> None:
        self.out = out
        self.session = Session()
        self.members = MemberCollection()
        self.bikes = BikeCollection()
        self.rentals = RentalCollection()

    def do_task(self, line: str) -> bool:
        """Run one command line; return False when the program should stop."""
        level1, level2, params = _parse(line)
        write = self.out.write
        command = (level1, level2)

        if command == (1, 1):
            signup_args = _require(params, 3, "1 1")[:3]
            write("1.1. 회원가입\n> ")
            write(" ".join(signup_args) + "\n\n")
            SignupControl(self.members).signup(*signup_args)
        elif command == (2, 1):
            login_args = _require(params, 2, "2 1")[:2]
            write("2.1. 로그인\n> ")
            write(" ".join(login_args) + "\n\n")
            LoginControl(self.members, self.session).login(*login_args)
        elif command == (2, 2):
            write("2.2. 로그아웃\n> ")
            member = LogoutControl(self.session).logout()
            write(f"{member.member_id}\n\n")
        elif command == (3, 1):
            bike_id, model = _require(params, 2, "3 1")[:2]
            write("3.1. 자전거 등록\n> ")
            write(f"{bike_id} {model}\n\n")
            AddBikeControl(self.bikes).add_bike(bike_id, model)
        elif command == (4, 1):
            (bike_id,) = _require(params, 1, "4 1")[:1]
            write("4.1. 자전거 대여\n> ")
            bike = RentBikeControl(self.bikes, self.rentals, self.session).rent_bike(bike_id)
            if bike is not None:
                write(f"{bike.bike_id} {bike.model}\n\n")
        elif command == (5, 1):
            write("5.1. 자전거 대여 리스트\n")
            try:
                rentals = RentalInfoControl(self.rentals, self.session).rentals()
            except NotLoggedInError:
                return True
            for rental in rentals:
                write(f"> {rental.bike.bike_id} {rental.bike.model}\n")
            write("\n")
        elif command == (6, 1):
            write("6.1. 종료\n")
            return False
        return True


def run(input_path: str, output_path: str) -> None:
    """Replay the commands in input_path and write the report to output_path."""
    with open(output_path, "w", encoding="utf-8") as out:
        try:
            source = open(input_path, encoding="utf-8")
        except FileNotFoundError:
            return
        app = BikeRentalApp(out)
        with source:
            for raw in source:
                line = raw.rstrip("\n")
                if line and not app.do_task(line):
                    break


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the command."""
    parser = argparse.ArgumentParser(description="Replay bike rental commands.")
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument("output", nargs="?", default="output.txt")
    args = parser.parse_args(argv)
    run(args.input, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())