"""
Services Package

Cross-cutting services that sit outside the request handlers.

Current services:
- rate_limiter.py: Rate limiting with slowapi
"""
