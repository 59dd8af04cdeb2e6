"""
MSSQL to TypeScript Generator

A Python package for generating TypeScript declarations from the tables and views
of a SQL Server database, with check constraints rendered as literal unions.
"""

from mssql_to_ts.cli.generator import TypeGenerator

__all__ = ["TypeGenerator"]
