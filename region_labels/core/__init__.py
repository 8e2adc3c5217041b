"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (sphere radius, epsilons, default keys)
- exceptions: Custom exception hierarchy
- ingress: HTTP request handling for the label-point endpoint
"""
