import pytest

from deskapps.attendance import (
    ADMIN_PASSWORD,
    ADMIN_USERNAME,
    Student,
    StudentRegistry,
    UsernameTaken,
    is_admin,
    main,
)


def _student(username="ann"):
    password = "password"
    return Student(
        name="Ann",
        username=username,
        password=password,
        roll_no="12",
        address="1 Main Street",
        father="Bob",
        mother="Cat",
    )


def test_register_lists_username(tmp_path):
    registry = StudentRegistry(tmp_path)
    registry.register(_student())
    assert registry.usernames() == ["ann"]


def test_index_file_holds_record_names(tmp_path):
    registry = StudentRegistry(tmp_path)
    registry.register(_student("ann"))
    registry.register(_student("ben"))
    assert (tmp_path / "db.dat").read_text().splitlines() == ["ann.dat", "ben.dat"]


def test_load_round_trip(tmp_path):
    registry = StudentRegistry(tmp_path)
    student = _student()
    registry.register(student)
    assert registry.load("ann") == student


def test_duplicate_username_rejected(tmp_path):
    registry = StudentRegistry(tmp_path)
    registry.register(_student())
    with pytest.raises(UsernameTaken):
        registry.register(_student())
    assert registry.usernames() == ["ann"]


def test_load_unknown_raises(tmp_path):
    with pytest.raises(LookupError):
        StudentRegistry(tmp_path).load("nobody")


def test_empty_registry_has_no_usernames(tmp_path):
    assert StudentRegistry(tmp_path).usernames() == []


def test_check_credentials(tmp_path):
    registry = StudentRegistry(tmp_path)
    registry.register(_student())
    assert registry.check_credentials("ann", "password") is True
    assert registry.check_credentials("ann", "secret") is False
    assert registry.check_credentials("nobody", "password") is False


@pytest.mark.parametrize("username", ["", "two words", "a/b"])
def test_bad_username_rejected(tmp_path, username):
    with pytest.raises(ValueError):
        StudentRegistry(tmp_path).register(_student(username))


def test_line_break_in_details_rejected(tmp_path):
    student = _student()
    student.address = "line\nbreak"
    with pytest.raises(ValueError):
        StudentRegistry(tmp_path).register(student)


def test_is_admin():
    assert is_admin(ADMIN_USERNAME, ADMIN_PASSWORD) is True
    assert is_admin(ADMIN_USERNAME, "secret") is False
    assert is_admin("ann", ADMIN_PASSWORD) is False


def test_main_registers_through_admin_menu(tmp_path, monkeypatch):
    answers = iter(
        [
            "2", ADMIN_USERNAME, ADMIN_PASSWORD,
            "1", "Ann", "ann", "password", "12", "1 Main Street", "Bob", "Cat",
            "0", "0", "y",
        ]
    )
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--dir", str(tmp_path)]) == 0
    assert StudentRegistry(tmp_path).usernames() == ["ann"]