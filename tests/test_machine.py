from deskapps.machine import (
    Machine,
    MachineInventory,
    MachineProduct,
    main,
    menu_text,
)


def test_codes_assigned_in_order(tmp_path):
    inv = MachineInventory(tmp_path / "inv.txt")
    a = inv.add_product(MachineProduct("Bolt", 4, 0.25, "steel"))
    b = inv.add_product(MachineProduct("Nut", 8, 0.1, "steel"))
    assert (a.code, b.code) == (1, 2)
    assert inv.products == [a, b]


def test_save_format(tmp_path):
    inv = MachineInventory(tmp_path / "inv.txt")
    inv.add_product(MachineProduct("Bolt", 4, 0.25, "steel"))
    inv.save()
    assert inv.path.read_text() == '1 "Bolt" 4 0.25\n'


def test_save_quotes_names(tmp_path):
    inv = MachineInventory(tmp_path / "inv.txt")
    inv.add_product(MachineProduct('Say "hi"', 1, 1, "misc"))
    inv.save()
    assert inv.path.read_text() == '1 "Say \\"hi\\"" 1 1\n'


def test_format_table(tmp_path):
    inv = MachineInventory(tmp_path / "inv.txt")
    product = inv.add_product(MachineProduct("Bolt", 4, 0.25, "steel"))
    lines = inv.format_table().splitlines()
    assert lines[0].split() == ["Code", "Name", "Quantity", "Price"]
    assert lines[1].split() == ["1", "Bolt", "4", "0.25"]
    assert product.describe() == inv.format_table()


def test_machine_ids_increase():
    first = Machine("Press", "P-1")
    second = Machine("Lathe", "P-1")
    assert second.machine_id > first.machine_id
    assert first.products == []


def test_menu_lists_options():
    text = menu_text()
    assert "6. See all registered products" in text
    assert text.endswith("Enter your choice (1-4): ")


def test_main_creates_product(tmp_path, monkeypatch):
    path = tmp_path / "inv.txt"
    answers = iter(["2", "Bolt", "4", "0.25", "steel", "4"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--file", str(path)]) == 0
    assert path.read_text() == '1 "Bolt" 4 0.25\n'


def test_main_invalid_choice_then_exit(tmp_path, monkeypatch, capsys):
    path = tmp_path / "inv.txt"
    answers = iter(["9", "4"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--file", str(path)]) == 0
    assert "Invalid choice" in capsys.readouterr().out
    assert path.read_text() == ""