"""HTTP API for the Payment Gateway."""
