"""
Application layer package.

This package contains use cases, services, and interfaces that implement
the business logic of the application. Import from the subpackages
directly; they depend on infrastructure, which depends back on the
interfaces declared here.
"""
