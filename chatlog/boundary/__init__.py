"""Boundary layer: adapters to external systems (the relational store)."""
