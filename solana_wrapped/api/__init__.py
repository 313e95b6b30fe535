"""API helpers for Solana Wrapped."""
