"""Configuration for project-path-checker hosts."""
