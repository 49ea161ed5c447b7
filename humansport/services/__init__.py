"""Service layer of the gym API."""
