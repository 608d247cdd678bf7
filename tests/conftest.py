"""Shared fixtures built on the module set in tests/fixtures.py."""

import pytest

from showdeps.resolver import IndexResolver, ModuleDescriptor

from .fixtures import MODULES


@pytest.fixture
def resolver():
    return IndexResolver.from_mapping(MODULES)


class CountingResolver(IndexResolver):
    """IndexResolver that records every resolve call."""

    def __init__(self, modules):
        super().__init__(modules)
        self.calls = []

    def resolve(self, path, base_dir):
        self.calls.append(path)
        return super().resolve(path, base_dir)


@pytest.fixture
def counting_resolver():
    return CountingResolver(
        ModuleDescriptor.from_dict(fields, import_path=path) for path, fields in MODULES.items()
    )
