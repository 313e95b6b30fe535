"""Utility modules for Solana Wrapped."""
