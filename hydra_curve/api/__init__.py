"""HTTP quote service for the Hydra curve."""
