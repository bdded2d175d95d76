# Shared helpers for the L-Mart backend
