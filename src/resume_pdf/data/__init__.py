"""Persistence layer for site content."""
