"""Seed-inventory ledger service: inward, outward, returns and expiry records over HTTP."""
