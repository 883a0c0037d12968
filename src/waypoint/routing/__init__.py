"""Routing — destination descriptors, path building, and resolution.

Destinations are registered into graphs during setup; graphs are frozen
into read-only tables before the first path is resolved.
"""
