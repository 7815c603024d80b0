"""Configuration, logging, persistence and the priority engine."""
