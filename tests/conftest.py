"""
Common fixtures for pytest unit and integration tests for the stake-shares library.

"""

from __future__ import annotations

import copy
from decimal import Decimal

import pytest

from stake_shares.library.pools import StakingPool, build_pool_catalog

ZERO_EX_LOGO = "https://github.com/0xProject/0x-staking-pool-registry/raw/master/logos/0x.png"


def _epoch_stats(pool_id, zrx_staked, operator_share, maker_addresses=()):
    return {
        "poolId": pool_id,
        "zrxStaked": zrx_staked,
        "operatorShare": operator_share,
        "approximateStakeRatio": 0,
        "makerAddresses": list(maker_addresses),
        "totalProtocolFeesGeneratedInEth": 0,
    }


def _pool_record(
    pool_id,
    operator_address,
    block_number,
    tx_hash,
    meta_data,
    zrx_staked,
    operator_share,
    next_zrx_staked=None,
    maker_addresses=(),
):
    if next_zrx_staked is None:
        next_zrx_staked = zrx_staked
    return {
        "poolId": pool_id,
        "operatorAddress": operator_address,
        "createdAt": {"blockNumber": block_number, "txHash": tx_hash},
        "metaData": meta_data,
        "sevenDayProtocolFeesGeneratedInEth": 0,
        "currentEpochStats": _epoch_stats(
            pool_id, zrx_staked, operator_share, maker_addresses
        ),
        "nextEpochStats": _epoch_stats(
            pool_id, next_zrx_staked, operator_share, maker_addresses
        ),
    }


def _named(name):
    return {
        "name": name,
        "bio": "All your stake are belong to us",
        "location": "San Francisco, CA",
        "isVerified": False,
        "logoUrl": ZERO_EX_LOGO,
        "websiteUrl": "http://0x.org",
    }


# Snapshot of the Kovan pool catalog (1/3/2020)
KOVAN_POOL_RECORDS = [
    _pool_record(
        "1",
        "0x5409ed021d9299bf6814279a6a1411a7e866a631",
        14491738,
        "0xea30da4f4a5ccb209fe7861c71b0c365684af076924a23e48a9028c8b7e13e5b",
        _named("Over 9000"),
        29602.75,
        0.000004,
    ),
    _pool_record(
        "2",
        "0x6ecbe1db9ef729cbe972c83fb886247691fb6beb",
        14576829,
        "0x4d587b256b712a456cca2297d599460942444f0cf04774fe48d380b06e89bfb0",
        _named("Will Warren's Magical Market Making Machine (MMM)"),
        1738.6666666666667,
        0.000002,
        maker_addresses=["0x6ecbe1db9ef729cbe972c83fb886247691fb6beb"],
    ),
    _pool_record(
        "3",
        "0xe36ea790bc9d7ab70c55260c66d52b1eca985f84",
        14730024,
        "0x7cdeab4f2dbc5e231db5b28593891943c516908af8335f99bc92168e04e6aceb",
        _named("Amir's Liquidity Floodgate"),
        318.26666666666665,
        0.49,
        maker_addresses=["0xe36ea790bc9d7ab70c55260c66d52b1eca985f84"],
    ),
    _pool_record(
        "4",
        "0x3998a82afec0bbde9021fcf16c753b3cbb6a78b2",
        14768235,
        "0x0bea3f8bf9e35c00313fc8126f2997c3eda95bef33a24e7e71b5c78d9390ace0",
        _named("0x 4 lyfe"),
        1145.4833333333333,
        0.000095,
    ),
    _pool_record(
        "5",
        "0x3998a82afec0bbde9021fcf16c753b3cbb6a78b2",
        14768243,
        "0x0463f2b864b14262377b4edfd42e48ff0c514a95a138269084aa1e52aadf609b",
        {"isVerified": False},
        35.33333333333333,
        0.7,
        next_zrx_staked=49.70333333333333,
    ),
    _pool_record(
        "6",
        "0x3998a82afec0bbde9021fcf16c753b3cbb6a78b2",
        14769171,
        "0x8687710e59c44f0632e9a64f67c03e30dc5e52dac198bd04a26628bec3321e90",
        {"isVerified": False},
        2,
        0.999999,
    ),
    _pool_record(
        "7",
        "0x5409ed021d9299bf6814279a6a1411a7e866a631",
        14797004,
        "0x99a283cb02f925cc03d20998f0c565e388fc0740c5f7ace360b3cb07f4d7a5eb",
        {"isVerified": False},
        0,
        1,
    ),
    _pool_record(
        "8",
        "0x5409ed021d9299bf6814279a6a1411a7e866a631",
        14797017,
        "0xb6e261156d6a4a01ced813662e305cfd485d487710f66b259fe7e50009e7db87",
        {"isVerified": False},
        1474.0966666666668,
        0,
        next_zrx_staked=1174.0966666666668,
    ),
    _pool_record(
        "9",
        "0x5409ed021d9299bf6814279a6a1411a7e866a631",
        15303667,
        "0x3fe6dc177e40c260bb43716753186a9ba716e097cbac74ac00a9a86d4e360482",
        {"isVerified": False},
        0,
        1,
    ),
    _pool_record(
        "10",
        "0x5409ed021d9299bf6814279a6a1411a7e866a631",
        15303725,
        "0x34de21634f0aee11980ec656b2ea681aa806d5cad380b1dbc9c3aa6ccd139267",
        {"isVerified": False},
        0,
        1,
        maker_addresses=["0x5409ed021d9299bf6814279a6a1411a7e866a631"],
    ),
]

# Pools 7, 9 and 10 keep all rewards and hold no stake
KOVAN_EXPECTED_RANKING = ["8", "2", "1", "4", "3", "5", "6"]


def make_pool(
    pool_id: str,
    operator_share="0",
    current_zrx_staked="0",
    seven_day_fees_generated_in_eth="0",
    **kwargs,
) -> StakingPool:
    """Build a StakingPool with zero statistics unless given."""
    return StakingPool(
        pool_id=pool_id,
        operator_share=operator_share,
        current_zrx_staked=current_zrx_staked,
        seven_day_fees_generated_in_eth=seven_day_fees_generated_in_eth,
        **kwargs,
    )


@pytest.fixture
def kovan_records():
    """Raw backend records for the Kovan snapshot (safe to mutate)."""
    return copy.deepcopy(KOVAN_POOL_RECORDS)


@pytest.fixture
def kovan_pools(kovan_records):
    """Kovan snapshot as a validated pool catalog."""
    return build_pool_catalog(kovan_records)


@pytest.fixture
def fee_pools():
    """Pools with fee history, for ranking tests."""
    return [
        make_pool("alpha", operator_share="0.1", seven_day_fees_generated_in_eth="2"),
        make_pool("beta", operator_share="0.5", seven_day_fees_generated_in_eth="3"),
        make_pool("gamma", operator_share="0", seven_day_fees_generated_in_eth="0"),
    ]


@pytest.fixture
def zero_signal_pools():
    """Pools with no score, no stake and no fee history."""
    return [make_pool(pool_id, operator_share="1") for pool_id in ("x", "y", "z")]


@pytest.fixture
def large_amount():
    return Decimal("123456789.12")
