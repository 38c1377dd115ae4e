"""mysql-codemode unit tests

These tests exercise the code mode API without a database: tool handlers are
``AsyncMock`` objects registered through ``StaticToolAdapter``.

Test Structure:
- test_registry.py - grouping, method naming and alias tables
- test_normalization.py - call-site argument normalization
- test_group_api.py - per-group method wrappers and dispatch
- test_mysql_api.py - top-level API and sandbox bindings
- test_validation.py - static table consistency checks
- test_config.py - configuration file and environment options
- test_cli.py - the mysql-codemode CLI

Shared builders live in helpers.py; conftest.py resets process-wide state.

Usage:
    pytest tests/ -v
    pytest tests/test_normalization.py -v
    pytest tests/ -k "alias" -v
"""
