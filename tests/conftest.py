from pytest import fixture

from pymultiset.configurations import reset_configurations


@fixture(autouse=True)
def default_configurations():
    reset_configurations()
    yield
    reset_configurations()
