"""Leaderboard domain services: keys, authority and scores.

This package holds the logic imported by the HTTP routes and the CLI,
keeping transport concerns separated from who may read, write or
administer a game's leaderboard.
"""
