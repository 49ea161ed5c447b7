"""Repository helpers for the gym API."""
