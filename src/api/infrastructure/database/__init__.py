"""Database infrastructure - engines, sessions and shared ORM primitives."""
