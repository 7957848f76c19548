"""HTTP API routers and wiring."""
