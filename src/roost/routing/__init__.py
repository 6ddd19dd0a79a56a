"""Routing — the ordered route table a host exposes for introspection.

Routes are registered during setup and frozen into an immutable,
ordered snapshot when the host starts.
"""
