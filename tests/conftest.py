import pytest

from audit import AuditLogger
from catalog import Item
from change import ChangeMaker
from inventory import Inventory
from suggestions import SuggestionEngine
from vending_service import VendingService


@pytest.fixture
def inventory():
    inventory = Inventory()
    inventory.add_item(Item(code="A1", name="Espresso", category="Hot Drinks", price=150, stock=5))
    inventory.add_item(Item(code="C2", name="Biscuits", category="Snacks", price=140, stock=7))
    inventory.add_item(Item(code="C3", name="Nuts", category="Snacks", price=150, stock=0))
    inventory.add_item(Item(code="B3", name="Water", category="Cold Drinks", price=100, stock=1))
    return inventory


@pytest.fixture
def suggestions():
    engine = SuggestionEngine()
    engine.set("A1", "C2")
    engine.set("B3", "C3")
    return engine


@pytest.fixture
def audit():
    return AuditLogger()


@pytest.fixture
def service(inventory, suggestions, audit):
    return VendingService(inventory, suggestions, ChangeMaker(), audit)
