"""Human Sport gym management API."""
