"""HTTP decision service for the Taiga decision core."""
