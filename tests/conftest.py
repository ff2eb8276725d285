from typing import Any

import pytest

from ._events import FROM_TOPIC, TO_TOPIC, TRANSFER_SIG
from ._node import FakeNode


@pytest.fixture
def make_raw_log():
    def build(**overrides: Any) -> dict[str, Any]:
        raw = {
            "address": "0x8ca88e083ec89a8110b722ec46aace1c1d1b260e",
            "blockHash": "0x" + "0" * 64,
            "blockNumber": "0x27",
            "data": "0x" + "0" * 62 + "64",
            "logIndex": "0x0",
            "topics": [TRANSFER_SIG, FROM_TOPIC, TO_TOPIC],
        }
        raw.update(overrides)
        return raw

    return build


@pytest.fixture
def node() -> FakeNode:
    return FakeNode()
