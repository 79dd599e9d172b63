"""Claim and header construction."""
