# bikerental

A small bike rental system. Members sign up and log in, bikes are
registered, logged-in members rent them, and each member can list the
bikes they have rented, sorted by bike ID.

The program is driven by a command file. Each line starts with two menu
numbers, followed by that command's parameters, separated by whitespace:

| Line                    | Action                                    |
|-------------------------|-------------------------------------------|
| `1 1 <id> <pw> <phone>` | Sign up a member                          |
| `2 1 <id> <pw>`         | Log in (`admin` / `admin` is the admin)   |
| `2 2`                   | Log out                                   |
| `3 1 <bike_id> <model>` | Register a bike                           |
| `4 1 <bike_id>`         | Rent a bike as the logged-in member       |
| `5 1`                   | List the logged-in member's rentals       |
| `6 1`                   | Stop processing                           |

Blank lines are skipped, and lines with any other menu numbers are
ignored. Each command writes its menu heading to the output, followed by
its result:

- Sign-up, log-in and bike registration echo their parameters.
- Log-out writes the ID of the member who was logged in.
- Renting writes the bike's ID and model when the rental succeeds; an
  unknown bike, a bike that is already rented, or no one being logged in
  leaves the line after the heading empty.
- The rental list writes one `> <bike_id> <model>` line per rental of the
  logged-in member; with no one logged in, only the heading is written.
- A failed log-in writes nothing beyond the echo and leaves the session
  as it was.

A command with too few parameters raises `ValueError`, and `2 2` with no
one logged in raises `bikerental.controls.NotLoggedInError`; both stop the
run.

## Installation

```
pip install .
```

## Usage

```
bikerental [input] [output]
```

`input` defaults to `input.txt` and `output` to `output.txt`, both in the
current directory. The output file is always created; if the input file
does not exist, it is left empty.

### Example

`input.txt`:

```
1 1 alice password placeholder
3 1 B002 road
3 1 B001 city
2 1 alice password
4 1 B002
4 1 B001
5 1
2 2
6 1
```

The output lists alice's rentals in bike ID order, `B001` and then `B002`.

## Using it from Python

```python
import io

from bikerental.cli import BikeRentalApp, run

run("input.txt", "output.txt")

out = io.StringIO()
app = BikeRentalApp(out)
app.do_task("3 1 B001 city")
```

`BikeRentalApp.do_task(line)` handles a single command line and returns
`False` after `6 1`, `True` otherwise. The app keeps its state in
`session`, `members`, `bikes` and `rentals`.

The building blocks are:

- `bikerental.models`: `Bike` (with `rent()`), `Member` (with
  `authenticate(member_id, password)`), `Rental` and `Session` (with
  `clear()`).
- `bikerental.repositories`: `BikeCollection`, `MemberCollection` and
  `RentalCollection`, each with `add` and iterable; the first two have
  `find(id)`, and `RentalCollection.sorted_for_member(member_id)` returns a
  member's rentals ordered by bike ID.
- `bikerental.controls`: `SignupControl.signup`, `LoginControl.login`,
  `LogoutControl.logout`, `AddBikeControl.add_bike`,
  `RentBikeControl.rent_bike` and `RentalInfoControl.rentals`.

## Limitations

- All data lives in memory for a single run; nothing is saved between
  runs.
- Bikes cannot be returned once rented.
- Sign-up does not check for duplicate member IDs, and registering a bike
  does not check for duplicate bike IDs; lookups return the first match.

## Running the tests

```
pip install .[test]
pytest
```