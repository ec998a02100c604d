import io

import pytest

from bikerental.cli import BikeRentalApp, main, run
from bikerental.controls import NotLoggedInError

SCRIPT = "\n".join(
    [
        "1 1 alice password phone",
        "2 1 alice password",
        "3 1 B2 road",
        "3 1 B1 city",
        "4 1 B2",
        "4 1 B1",
        "5 1",
        "2 2",
        "6 1",
        "3 1 B3 late",
    ]
)

EXPECTED = (
    "1.1. 회원가입\n> alice password phone\n\n"
    "2.1. 로그인\n> alice password\n\n"
    "3.1. 자전거 등록\n> B2 road\n\n"
    "3.1. 자전거 등록\n> B1 city\n\n"
    "4.1. 자전거 대여\n> B2 road\n\n"
    "4.1. 자전거 대여\n> B1 city\n\n"
    "5.1. 자전거 대여 리스트\n> B1 city\n> B2 road\n\n"
    "2.2. 로그아웃\n> alice\n\n"
    "6.1. 종료\n"
)


def test_run_full_scenario(tmp_path):
    input_file = tmp_path / "input.txt"
    output_file = tmp_path / "output.txt"
    input_file.write_text(SCRIPT + "\n", encoding="utf-8")
    run(str(input_file), str(output_file))
    assert output_file.read_text(encoding="utf-8") == EXPECTED


def test_main_with_arguments(tmp_path):
    input_file = tmp_path / "in.txt"
    output_file = tmp_path / "out.txt"
    input_file.write_text(SCRIPT, encoding="utf-8")
    assert main([str(input_file), str(output_file)]) == 0
    assert output_file.read_text(encoding="utf-8") == EXPECTED


def test_missing_input_gives_empty_output(tmp_path):
    output_file = tmp_path / "out.txt"
    run(str(tmp_path / "absent.txt"), str(output_file))
    assert output_file.read_text(encoding="utf-8") == ""


def test_exit_command_stops():
    out = io.StringIO()
    app = BikeRentalApp(out)
    assert app.do_task("6 1") is False
    assert out.getvalue() == "6.1. 종료\n"


def test_unknown_command_does_nothing():
    out = io.StringIO()
    app = BikeRentalApp(out)
    assert app.do_task("9 9 x") is True
    assert app.do_task("abc") is True
    assert out.getvalue() == ""


def test_rent_without_login_prints_only_header():
    out = io.StringIO()
    app = BikeRentalApp(out)
    app.do_task("3 1 B1 city")
    out.seek(0)
    out.truncate()
    app.do_task("4 1 B1")
    assert out.getvalue() == "4.1. 자전거 대여\n> "
    assert app.bikes.find("B1").is_rented is False


def test_rental_list_without_login_prints_header_only():
    out = io.StringIO()
    app = BikeRentalApp(out)
    app.do_task("5 1")
    assert out.getvalue() == "5.1. 자전거 대여 리스트\n"


def test_admin_login_and_logout():
    out = io.StringIO()
    app = BikeRentalApp(out)
    app.do_task("2 1 admin admin")
    assert app.session.current_user.member_id == "admin"
    app.do_task("2 2")
    assert app.session.current_user is None
    assert out.getvalue().endswith("2.2. 로그아웃\n> admin\n\n")


def test_logout_without_login_raises():
    app = BikeRentalApp(io.StringIO())
    with pytest.raises(NotLoggedInError):
        app.do_task("2 2")


def test_missing_parameters_raise():
    app = BikeRentalApp(io.StringIO())
    with pytest.raises(ValueError):
        app.do_task("1 1 alice")