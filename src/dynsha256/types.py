import os
from typing import TypeVar, Generic, Any
from mpyc import finfields

T = TypeVar('T', bound=Any)
N = TypeVar('N')

bn256_scalar_field_modulus = 21888242871839275222246405745257275088548364400416034343698204186575808495617
bls12_381_scalar_field_modulus = 52435875175126190479447740508185965837690552500527637822603658699938581184513
curve25519_scalar_field_modulus = 7237005577332262213973186563042994240857116359379907606001950938285454250989
pallas_base_field_modulus = 0x40000000000000000000000000000000224698fc094cf91b992d30ed00000001

_moduli = {
    "bn256": bn256_scalar_field_modulus,
    "bls12_381": bls12_381_scalar_field_modulus,
    "curve25519": curve25519_scalar_field_modulus,
    "pallas": pallas_base_field_modulus,
}


def _set_modulus(value):
    if value is None or value == "":
        return finfields.GF(bls12_381_scalar_field_modulus)
    if isinstance(value, str) and value in _moduli:
        return finfields.GF(_moduli[value])
    if isinstance(value, str) and value.isdigit():
        value = int(value)
    if value in _moduli.values():
        return finfields.GF(value)
    raise ValueError("The only supported fields are those of the following curves: bn256, bls12_381, curve25519, pallas.")


# The field is fixed for the lifetime of the process: circuit modules bind it at import.
field = _set_modulus(os.environ.get("DYNSHA256_FIELD"))


class Public(Generic[T]):
    pass

class Private(Generic[T]):
    pass

class Array(Generic[T, N]):
    def __getitem__(self, key: int) -> T:
        return self[key]
