import ipaddress

import pytest

from cynan.ipsec import (
    IpsecManager,
    IpsecMode,
    PolicyAction,
    PolicyDirection,
    SecurityAssociation,
    SecurityPolicy,
    TrafficSelector,
)


def make_sa(spi=1000, source="10.0.0.2", destination="127.0.0.1"):
    return SecurityAssociation(
        spi=spi,
        source=source,
        destination=destination,
        mode=IpsecMode.TRANSPORT,
        encryption_alg="null",
        encryption_key=b"",
        integrity_alg="hmac-sha-1-96",
        integrity_key=bytes(16),
    )


def make_sp(priority=1000):
    return SecurityPolicy(
        selector=TrafficSelector(
            source_ip="10.0.0.2",
            dest_ip="127.0.0.1",
            protocol=17,
            source_port=5060,
            dest_port=5060,
        ),
        action=PolicyAction.PROTECT,
        direction=PolicyDirection.IN,
        priority=priority,
    )


def test_sa_converts_addresses():
    sa = make_sa()
    assert sa.source == ipaddress.ip_address("10.0.0.2")
    assert sa.destination == ipaddress.ip_address("127.0.0.1")


def test_sa_repr_hides_keys():
    sa = make_sa()
    assert "integrity_key" not in repr(sa)
    assert "hmac-sha-1-96" in repr(sa)


def test_sa_rejects_bad_spi():
    with pytest.raises(ValueError):
        make_sa(spi=-1)
    with pytest.raises(ValueError):
        make_sa(spi=1 << 32)


def test_sa_rejects_bad_address():
    with pytest.raises(ValueError):
        make_sa(source="not-an-ip")


def test_selector_rejects_bad_port():
    with pytest.raises(ValueError):
        TrafficSelector(source_ip="10.0.0.2", dest_ip="127.0.0.1", source_port=70000)


def test_wipe_keys_clears_material():
    sa = make_sa()
    sa.wipe_keys()
    assert sa.integrity_key == b""
    assert sa.encryption_key == b""


@pytest.mark.asyncio
async def test_add_and_delete_sa():
    manager = IpsecManager()
    sa_in = make_sa(spi=1001, source="10.0.0.2", destination="127.0.0.1")
    sa_out = make_sa(spi=1000, source="127.0.0.1", destination="10.0.0.2")
    await manager.add_sa(sa_in)
    await manager.add_sa(sa_out)
    assert len(manager.security_associations) == 2

    await manager.delete_sa(1001, "127.0.0.1")
    assert manager.security_associations == [sa_out]
    assert sa_in.integrity_key == b""


@pytest.mark.asyncio
async def test_delete_missing_sa_is_harmless():
    manager = IpsecManager()
    sa = make_sa()
    await manager.add_sa(sa)
    await manager.delete_sa(sa.spi, "192.0.2.1")
    assert manager.security_associations == [sa]


@pytest.mark.asyncio
async def test_re_adding_same_sa_replaces_it():
    manager = IpsecManager()
    await manager.add_sa(make_sa(spi=7))
    replacement = make_sa(spi=7)
    await manager.add_sa(replacement)
    assert manager.security_associations == [replacement]


@pytest.mark.asyncio
async def test_policies_ordered_by_priority():
    manager = IpsecManager()
    low = make_sp(priority=10)
    high = make_sp(priority=1000)
    await manager.add_sp(low)
    await manager.add_sp(high)
    assert manager.security_policies == [high, low]
    assert manager.security_policies[0].action is PolicyAction.PROTECT