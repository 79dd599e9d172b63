"""Token assembly, issuance, and decoding for display."""
