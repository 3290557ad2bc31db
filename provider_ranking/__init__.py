"""Ranking and matching service for the local business directory."""
