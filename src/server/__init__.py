"""HTTP service exposing tagmark compilation."""
