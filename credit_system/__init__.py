"""
Package marker for source code under `credit_system`.
It groups the domain model, the relational stores, and the HTTP API under one import path.
Most functionality lives in the sibling modules; this file intentionally stays lightweight.
"""
