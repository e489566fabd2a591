"""Course administration backend.

This package is organized by feature modules (attendance, courses, applications, ...)
with a thin Flask controller layer over service/repository layers and an injected
Firebase store.
"""
