from collections.abc import Generator

import pytest

from simple_hashtag.core import configuration


@pytest.fixture(autouse=True)
def reset_configuration() -> Generator[None, None, None]:
    configuration.reset()
    yield
    configuration.reset()
