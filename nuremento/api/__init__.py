"""HTTP API for Nuremento."""
