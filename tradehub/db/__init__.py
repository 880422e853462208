"""ORM models for the trade hub database."""
