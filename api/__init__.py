"""SP-API order relay HTTP surface."""
