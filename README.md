# cynan

Building blocks for an IMS (IP Multimedia Subsystem) core, as a plain Python
library with no third-party dependencies:

- `cynan.pqc`: post-quantum mode settings: `PqcMode`, `PqcConfig` and the
  enums `MlDsaLevel`, `MlKemLevel` and `PqcSigningAlgorithm`.
- `cynan.pqc_messages`: builds the exact byte strings that are signed for SIP
  authentication and IBCF traffic, and checks the sizes of ML-DSA-65 and
  ML-KEM-768 keys, signatures and ciphertexts.
- `cynan.ipsec`: Gm interface IPsec security associations and policies, and an
  `IpsecManager` that keeps them.
- `cynan.registry`: the `ImsModule` base class and a `ModuleRegistry` that
  initialises modules and hands them out as route handlers.
- `cynan.metrics`: SIP counters exported in Prometheus text format.
- `cynan.targets`: `extract_domain` for gRPC targets.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## PQC modes

```python
from cynan.pqc import PqcConfig, PqcMode

mode = PqcMode.parse("pqc-only")   # "pqc_only" is accepted too, any case
assert mode.is_pqc_enabled()
assert not mode.allows_classical()

config = PqcConfig()               # hybrid, ML-KEM-768, ML-DSA-65
```

Unknown mode names raise `ValueError`.

## Signed messages and size checks

```python
from cynan.pqc_messages import auth_message, check_ml_dsa_signature, ibcf_message

auth_message("abc123", "REGISTER", "sip:cynan.ims")
# b"abc123:REGISTER:sip:cynan.ims"

ibcf_message("INVITE", "sip:bob@example.com", "call-1", "1 INVITE")
# b"INVITE:sip:bob@example.com:call-1:1 INVITE"

check_ml_dsa_signature(bytes(3309))  # returned unchanged
check_ml_dsa_signature(b"short")     # ValueError
```

`check_ml_dsa_public_key` expects 1952 bytes, `check_ml_kem_ciphertext` 1088
and `check_ml_kem_public_key` 1184.

## IPsec

```python
import asyncio
from cynan.ipsec import (
    IpsecManager, PolicyAction, PolicyDirection,
    SecurityAssociation, SecurityPolicy, TrafficSelector,
)

async def main():
    manager = IpsecManager()
    await manager.add_sa(SecurityAssociation(spi=1000, source="10.0.0.2", destination="10.0.0.1"))
    await manager.add_sp(SecurityPolicy(
        selector=TrafficSelector("10.0.0.2", "10.0.0.1", protocol=17,
                                 source_port=5060, dest_port=5060),
        action=PolicyAction.PROTECT,
        direction=PolicyDirection.IN,
        priority=1000,
    ))
    print(manager.security_associations, manager.security_policies)
    await manager.delete_sa(1000, "10.0.0.1")

asyncio.run(main())
```

Associations are keyed by SPI and destination; deleting one wipes its keys.
`security_policies` lists policies highest priority first. Addresses may be
given as strings and are stored as `ipaddress` objects; out-of-range SPIs,
protocols or ports raise `ValueError`.

## Modules and the registry

```python
import asyncio
from cynan.registry import ImsModule, ModuleRegistry

class Echo(ImsModule):
    def name(self):
        return "echo"

    def description(self):
        return "Answers every request with itself"

    async def init(self, config, state):
        pass

    async def handle_request(self, request, context):
        return request

registry = ModuleRegistry()
registry.register_module(Echo())
asyncio.run(registry.initialize_modules(config={}, state=None))
handlers = registry.route_handlers()  # in registration order
```

`initialize_modules` stops at the first module whose `init` raises.

## Metrics

```python
from cynan.metrics import Metrics

metrics = Metrics()
metrics.increment_requests()
metrics.increment_invite()
print(metrics.export_prometheus())
```

## gRPC targets

```python
from cynan.targets import extract_domain

extract_domain("https://armoricore.service:50051")  # "armoricore.service"
```

## What this package does not do

- It has no SIP stack: it does not parse SIP messages, run digest
  authentication or handle calls, and it has no server or command-line program.
- It carries no post-quantum crypto backend: nothing here generates keys,
  signs, verifies or encapsulates. It only fixes what is signed and checks
  encoded sizes.
- `IpsecManager` keeps associations and policies in memory; it does not
  install them in the operating system.