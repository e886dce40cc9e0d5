"""Postboard API - users and posts demo service."""

__version__ = "1.0.0"
