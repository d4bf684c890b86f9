"""cleanpath API - pure path transforms and their configuration."""
