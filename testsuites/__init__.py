"""
Test suites package.

`testsuites` is importable so that page objects and the framework can be
used from IDEs, `run_tests.py` and CI jobs, not only from pytest.
"""
