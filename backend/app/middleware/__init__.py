# Middleware package init
"""
Noteful Backend — Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [CORS] → [Request ID] → [Logging] → [Bearer Token] → [Unhandled Error] → Route Handler

    1. CORS answers preflight requests itself, before authentication
    2. Request ID: correlation ID for every later log line
    3. Logging: access log, including requests rejected by the token check
    4. Bearer Token: nothing below it runs without the shared token
    5. Unhandled Error: converts exceptions escaping a route into the 500
       response while the request ID and CORS layers are still around it

    Responses travel back through the same chain in reverse.
"""
