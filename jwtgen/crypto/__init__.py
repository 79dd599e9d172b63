"""Signing algorithms, key material, and the JWS signer."""
