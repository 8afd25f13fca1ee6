"""HTTP API exposing join building and price impact."""
