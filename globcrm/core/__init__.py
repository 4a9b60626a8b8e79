"""Core: settings, constants, exception handlers, lifespan, rate limiter."""
