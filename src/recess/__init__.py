"""Recess - burnout risk classification and recovery break planning."""
