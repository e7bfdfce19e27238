"""Drivers implementing the hexlint ports."""
