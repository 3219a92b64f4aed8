"""HTTP API for the nested details style."""
