"""
MSSQL to TypeScript Generator

Entry point for the type generator script.
"""

from mssql_to_ts.cli.main import main

if __name__ == "__main__":
    main()
