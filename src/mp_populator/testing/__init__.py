"""Testing support – pytest plugin exposing a ``populator`` fixture.

Enable it in your ``conftest.py``::

    pytest_plugins = ["mp_populator.testing.fixtures"]
"""
