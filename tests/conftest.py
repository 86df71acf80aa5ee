"""Shared fixtures for registry and driver tests."""

import pytest

from modparams import ArrayBuffer, ParameterRegistry, Ref, StringBuffer


@pytest.fixture
def storage():
    """Caller-owned storage for the standard test registry."""
    count = Ref(0)
    return {
        "test": Ref(0),
        "flag": Ref(False),
        "nums_count": count,
        "nums": ArrayBuffer("long", 10, count=count),
        "name": StringBuffer(10),
    }


@pytest.fixture
def registry(storage):
    """Registry declaring test:int, flag:bool, nums:long[10], name:string[10]."""
    reg = ParameterRegistry(8)
    reg.declare_scalar("test", "int", storage["test"])
    reg.declare_bool("flag", storage["flag"])
    reg.declare_array("nums", storage["nums"])
    reg.declare_string("name", storage["name"])
    return reg
