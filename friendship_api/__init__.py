"""Friendship relationship backend."""
