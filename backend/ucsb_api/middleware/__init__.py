# Middleware package init
"""
UCSB Resources API — Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    - Request ID runs first so every log line of the request carries it
    - Access log records method, path, status and duration on the way out

Authorization is not middleware: it is a per-route dependency (see
ucsb_api.security) so each handler states the role it needs.
"""
