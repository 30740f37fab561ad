"""Root conftest – enables the mp-populator pytest plugin for the test suite."""

pytest_plugins = ["mp_populator.testing.fixtures"]
