"""Local HTTP data API."""
