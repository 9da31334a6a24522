"""Faker-backed generators for demo data."""

from bank_ledger.generators.account import AccountSeed, AccountSeedGenerator
from bank_ledger.generators.base import BaseGenerator

__all__ = ["AccountSeed", "AccountSeedGenerator", "BaseGenerator"]
