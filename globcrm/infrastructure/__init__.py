"""Infrastructure: persistence, security, and service implementations of application ports."""
