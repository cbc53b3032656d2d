"""HTTP API for running simulations."""
