"""Utilities shared by the generator."""
