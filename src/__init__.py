"""Voyage Quote Engine - deterministic charter pricing and advisories."""
