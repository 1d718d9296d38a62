import importlib
import pytest

@pytest.fixture(scope="session")
def logic():
    return importlib.import_module("hexvalue.logic")

@pytest.fixture(scope="session")
def Hex():
    return importlib.import_module("hexvalue").HexValue
