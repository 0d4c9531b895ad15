"""Stateless preliminary check service for credit applications."""
