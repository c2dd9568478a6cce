"""Lending desk for a small library: add, borrow, return and list books."""
