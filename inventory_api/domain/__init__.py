"""Domain types and rules shared by the repositories and services."""
