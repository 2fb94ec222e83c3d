"""routecov CLI."""
