"""Infoblox network container provider."""
