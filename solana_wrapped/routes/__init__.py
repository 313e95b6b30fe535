"""HTTP routes for Solana Wrapped."""
