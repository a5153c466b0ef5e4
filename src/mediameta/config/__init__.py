"""Configuration loading and derived extraction settings."""
