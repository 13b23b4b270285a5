"""Idempotent schema creation and reference data for a fresh database."""

from app.seed.initial import init_database

__all__ = ["init_database"]
