"""Core infrastructure for routecov."""
