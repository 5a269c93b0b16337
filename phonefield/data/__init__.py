"""Compiled-in country and territory dial-code tables."""
