"""Scenarios for populating a ledger."""

from bank_ledger.scenarios.demo import DEMO_CUSTOMERS, DemoScenario

__all__ = ["DEMO_CUSTOMERS", "DemoScenario"]
