#!/usr/bin/env python3
"""
Console front end for the vending machine.

Shows the menu, reads commands or item codes, and returns change on quit.

Commands:
  <code>   buy an item (e.g. A1)
  add      insert money (e.g. 1, 1.50, £2.00)
  help, h  show commands
  quit, q  finish and get change (also: exit)
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from catalog import CatalogError, load_catalog, seed
from change import ChangeMaker, denomination_label
from inventory import Inventory
from money import format_pennies
from suggestions import SuggestionEngine
from vending_service import VendingService

TITLE = "VENDING MACHINE 3000"
RULE = "=" * 41

QUIT_COMMANDS = {"QUIT", "Q", "EXIT"}
HELP_COMMANDS = {"HELP", "H"}

COMMANDS_TEXT = (
    "Commands:\n"
    "  code (e.g., A1)   -> buy item\n"
    "  add               -> insert money\n"
    "  help              -> show commands\n"
    "  quit              -> finish and get change\n"
)

HELP_TEXT = (
    "HELP\n"
    " • Enter an item code (e.g., A1) to buy an item if you have enough balance.\n"
    " • Type 'add' to insert money (e.g., 1, 1.50, £2.00).\n"
    " • Type 'quit' to finish your session and receive change.\n"
)


class VendingShell:
    def __init__(self, service: VendingService, stdin: TextIO, stdout: TextIO) -> None:
        self._service = service
        self._in = stdin
        self._out = stdout
        self.finalized = False

    def _write(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def _prompt(self, text: str) -> Optional[str]:
        self._out.write(text)
        self._out.flush()
        line = self._in.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def render_menu(self) -> str:
        inventory = self._service.inventory
        lines = [RULE, TITLE.center(len(RULE)).rstrip(), RULE]
        lines.append(f"Your balance: {format_pennies(self._service.balance)}")
        lines.append("")
        for category, codes in inventory.categories().items():
            lines.append(f"[{category}]")
            for code in codes:
                item = inventory.get(code)
                if item is None:
                    continue
                lines.append(
                    f"  {item.code:<3}  {item.name:<20}  {format_pennies(item.price):<8}  Stock: {item.stock}"
                )
            lines.append("")
        lines.append(COMMANDS_TEXT.rstrip("\n"))
        lines.append("-" * len(RULE))
        return "\n".join(lines)

    def handle_add(self) -> None:
        raw = self._prompt("Enter amount to add (e.g., 1, 1.50, £2.00): ")
        if raw is None:
            raw = ""
        result = self._service.add_funds(raw)
        if not result.ok:
            self._write("Invalid amount. Please try again.")
            return
        self._write(
            f"Added {format_pennies(result.added)}. New balance: {format_pennies(result.balance)}"
        )

    def handle_purchase(self, raw_code: str) -> None:
        result = self._service.purchase(raw_code)
        if result.status == "unknown_code":
            self._write("Unknown code. Please check and try again.")
        elif result.status == "out_of_stock":
            self._write(f"Sorry, {result.item.name} is out of stock.")
        elif result.status == "insufficient_funds":
            self._write(f"Insufficient funds. You need {format_pennies(result.shortfall)} more.")
        elif result.status == "stock_error":
            self._write("Unexpected stock error. Purchase cancelled.")
        else:
            self._write(f"Dispensing: {result.item.name} ({result.item.code}) ... Enjoy!")
            self._write(f"Remaining balance: {format_pennies(result.balance)}")
            if result.suggestion:
                s = result.suggestion
                self._write(f"You might also like: {s.name} [{s.code}] for {format_pennies(s.price)}")

    def checkout(self) -> None:
        receipt = self._service.finalize()
        self.finalized = True
        self._write()
        self._write(f"Returning change: {format_pennies(receipt.amount)}")
        if not receipt.breakdown:
            self._write("No change.")
        else:
            self._write("Change breakdown:")
            for denomination, count in receipt.breakdown:
                self._write(f"  {denomination_label(denomination)} x {count}")
        self._write(f"Thank you for using {TITLE}!")

    def run(self) -> None:
        while not self.finalized:
            self._write(self.render_menu())
            line = self._prompt("Enter command or code: ")
            if line is None:
                break
            command = line.strip()
            upper = command.upper()

            if upper in QUIT_COMMANDS:
                self.checkout()
            elif upper in HELP_COMMANDS:
                self._out.write(HELP_TEXT)
            elif upper == "ADD":
                self.handle_add()
            elif not command:
                continue
            else:
                self.handle_purchase(command)


def build_service(catalog_path: Optional[Path] = None) -> VendingService:
    inventory = Inventory()
    suggestions = SuggestionEngine()
    seed(inventory, suggestions, load_catalog(catalog_path))
    return VendingService(inventory, suggestions, ChangeMaker())


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--catalog", type=Path, default=None, help="YAML catalog to load instead of the demo stock")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        service = build_service(args.catalog)
    except CatalogError as exc:
        raise SystemExit(f"Could not load catalog: {exc}")

    VendingShell(service, sys.stdin, sys.stdout).run()


if __name__ == "__main__":
    main()
