"""Cashier data models."""
