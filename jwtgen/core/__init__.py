"""Settings, errors, and logging shared across jwtgen."""
