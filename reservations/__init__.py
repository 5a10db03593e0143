"""Seat reservation domain: ledger, persistence and services."""
