import pytest

from minilib.library import Library
from minilib.sample_data import load_sample_data
from utils.ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # set_output_mode writes to the environment; keep each test on the default
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")

@pytest.fixture
def lib():
    return Library()

@pytest.fixture
def seeded_lib():
    library = Library()
    load_sample_data(library)
    return library
