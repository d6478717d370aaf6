"""
Package marker for source code under `credit_system.common`.
It groups settings, logging, and database helpers shared by the stores and the API.
"""
