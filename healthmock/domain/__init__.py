"""
Domain layer package.

Pure lookup tables and errors. No framework imports allowed.
"""
