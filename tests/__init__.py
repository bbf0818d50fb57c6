"""
This __init__.py file is kept in the root tests directory while other __init__.py files
in the test structure are left out.

It makes pytest treat the tests/ directory as a package, which keeps imports consistent
across environments. Subdirectories work as namespace packages (PEP 420), so test module
names must stay unique across the whole tree.
"""
