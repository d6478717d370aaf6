"""
Package marker for source code under `credit_system.repositories`.
Each store owns the SQL for one table and returns domain records, never raw rows.
"""
