import pytest

from ens_resolver.exceptions import InvalidInput
from ens_resolver.options import ResolutionOptions


def test_defaults():
    options = ResolutionOptions()
    assert options.client is None
    assert options.block is None
    assert options.ttl is None
    assert not options.pinned


def test_from_dict():
    options = ResolutionOptions.from_dict({"uri": "http://localhost:8545", "block": 100, "ttl": 5000})
    assert options.uri == "http://localhost:8545"
    assert options.block == 100
    assert options.ttl == 5000
    assert options.pinned


@pytest.mark.parametrize("block", [0, 12, "latest", "0x10"])
def test_valid_blocks(block):
    assert ResolutionOptions(block=block).validate().pinned


def test_unknown_options_are_rejected():
    with pytest.raises(InvalidInput) as excinfo:
        ResolutionOptions.from_dict({"uri": "http://localhost:8545", "infuraKey": "abc"})
    assert "infuraKey" in str(excinfo.value)


@pytest.mark.parametrize("ttl", ["1000", True, [1]])
def test_non_numeric_ttl_is_rejected(ttl):
    with pytest.raises(InvalidInput):
        ResolutionOptions(ttl=ttl).validate()


@pytest.mark.parametrize("block", [-1, "yesterday", 1.5, False])
def test_invalid_blocks_are_rejected(block):
    with pytest.raises(InvalidInput):
        ResolutionOptions(block=block).validate()


def test_non_string_construction_params_are_rejected():
    with pytest.raises(InvalidInput):
        ResolutionOptions(network=1).validate()


def test_construction_key_ignores_per_call_options():
    first = ResolutionOptions(uri="http://localhost:8545", block=1, ttl=10)
    second = ResolutionOptions(uri="http://localhost:8545")
    assert first.construction_key() == second.construction_key()
    assert first.construction_key() != ResolutionOptions(uri="http://localhost:7545").construction_key()
