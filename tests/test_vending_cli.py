import io

import pytest

from vending_cli import VendingShell, build_service, main


def _run(lines, service=None):
    service = service or build_service()
    stdout = io.StringIO()
    shell = VendingShell(service, io.StringIO("".join(f"{line}\n" for line in lines)), stdout)
    shell.run()
    return shell, service, stdout.getvalue()


def test_menu_lists_categories_and_items():
    shell = VendingShell(build_service(), io.StringIO(), io.StringIO())
    menu = shell.render_menu()
    assert "VENDING MACHINE 3000" in menu
    assert "Your balance: £0.00" in menu
    assert menu.index("[Chocolate]") < menu.index("[Cold Drinks]") < menu.index("[Hot Drinks]")
    assert "Espresso" in menu
    assert "£1.50" in menu
    assert "Stock: 5" in menu


def test_add_buy_and_quit():
    shell, service, out = _run(["add", "2", "a1", "quit"])
    assert "Added £2.00. New balance: £2.00" in out
    assert "Dispensing: Espresso (A1) ... Enjoy!" in out
    assert "Remaining balance: £0.50" in out
    assert "You might also like: Biscuits [C2] for £1.40" in out
    assert "Returning change: £0.50" in out
    assert "Change breakdown:\n  50p x 1" in out
    assert "Thank you for using VENDING MACHINE 3000!" in out
    assert shell.finalized
    assert service.inventory.get("A1").stock == 4


def test_invalid_amount_message():
    _, service, out = _run(["add", "1.505", "q"])
    assert "Invalid amount. Please try again." in out
    assert service.balance == 0
    assert "No change." in out


def test_error_messages():
    _, _, out = _run(["add", "1", "Z9", "a3", "exit"])
    assert "Unknown code. Please check and try again." in out
    assert "Insufficient funds. You need £0.90 more." in out
    assert "Returning change: £1.00" in out
    assert "  £1 x 1" in out


def test_out_of_stock_message():
    _, _, out = _run(["add", "20"] + ["D2"] * 4 + ["q"])
    assert out.count("Dispensing: Dark Choc (D2)") == 3
    assert "Sorry, Dark Choc is out of stock." in out


def test_help_and_blank_lines():
    _, _, out = _run(["h", "", "HELP", "quit"])
    assert out.count("HELP\n") == 2
    assert "Type 'add' to insert money" in out


def test_eof_ends_without_checkout():
    shell, _, out = _run(["add", "1"])
    assert not shell.finalized
    assert "Returning change" not in out


def test_main_runs_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("add\n1\nq\n"))
    main([])
    out = capsys.readouterr().out
    assert "Returning change: £1.00" in out


def test_main_rejects_bad_catalog(tmp_path):
    with pytest.raises(SystemExit):
        main(["--catalog", str(tmp_path / "missing.yaml")])


def test_oversized_amount_is_rejected_in_session():
    _, service, out = _run(["add", "1" * 5000, "q"])
    assert "Invalid amount. Please try again." in out
    assert service.balance == 0
    assert "No change." in out
