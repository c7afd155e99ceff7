"""Configuration package for wcount."""
