import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from dynsha256.types import Public, Private, Array, field
from dynsha256.stdlib.EMBED import to_int
from dynsha256.stdlib.hashes.sha256.sha256 import sha256
from dynsha256.stdlib.utils.pack.u32.pack import split_into_message_blocks, words_to_bytes

logger = logging.getLogger(__name__)


def parse_argument_value(value, arg_type, prefix=''):
    if getattr(arg_type, "__origin__", None) in {Private, Public}:
        inner_type = arg_type.__args__[0]
        return parse_argument_value(value, inner_type, prefix)
    elif arg_type == field:
        if isinstance(value, field):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Expected an integer for {prefix}, got {type(value).__name__}")
        return field(value)
    elif arg_type == int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Expected an integer for {prefix}, got {type(value).__name__}")
        return value
    elif arg_type == bool:
        return bool(value)
    elif getattr(arg_type, "__origin__", None) == Array:
        inner_type, length = arg_type.__args__
        if isinstance(length, int) and len(value) != length:
            raise ValueError(f"Expected {length} elements for {prefix}, got {len(value)}")
        return [
            parse_argument_value(inner_value, inner_type, f'{prefix}.{i}')
            for i, inner_value in enumerate(value)
        ]
    else:
        raise ValueError(f"Unsupported type annotation for {prefix}: {arg_type!r}")


def parse_return_value(value, return_type):
    if getattr(return_type, "__origin__", None) in {Private, Public}:
        return parse_return_value(value, return_type.__args__[0])
    elif return_type == field:
        return to_int(value)
    elif getattr(return_type, "__origin__", None) == Array:
        inner_type = return_type.__args__[0]
        return [parse_return_value(inner_value, inner_type) for inner_value in value]
    else:
        return value


def prepare_inputs(argument_names, argument_types, *args, **kwargs):
    if len(args) > len(argument_names):
        raise ValueError(f"Expected at most {len(argument_names)} arguments, got {len(args)}")

    # Get argument values
    argument_values = dict(zip(argument_names, args))
    for name, value in kwargs.items():
        if name not in argument_names or name in argument_values:
            raise ValueError(f"Unexpected argument: {name}")
        argument_values[name] = value

    missing = [name for name in argument_names if name not in argument_values]
    if missing:
        raise ValueError(f"Missing arguments: {', '.join(missing)}")

    inputs = {}
    for name in argument_names:
        arg_type = argument_types.get(name, None)
        if arg_type is None:
            raise ValueError(f"Missing type annotation for argument {name}")
        inputs[name] = parse_argument_value(argument_values[name], arg_type, name)

    logger.debug("Prepared circuit inputs: %s", ", ".join(argument_names))
    return inputs


# Standard SHA256 padding followed by zero filler up to `max_sha_bytes`.
# Also returns the length of the padded content.
def sha256_pad(message: bytes, max_sha_bytes: int) -> Tuple[bytes, int]:
    if max_sha_bytes % 64 != 0:
        raise ValueError(f"Maximum padded length {max_sha_bytes} is not a multiple of 64")

    padded = bytes(message) + b'\x80'
    padded += b'\x00' * ((56 - len(padded) % 64) % 64)
    padded += (len(message) * 8).to_bytes(8, byteorder='big')
    message_length = len(padded)

    if message_length > max_sha_bytes:
        raise ValueError(
            f"Padded message is {message_length} bytes long but the maximum is {max_sha_bytes}"
        )

    return padded + b'\x00' * (max_sha_bytes - message_length), message_length


# Padded buffer and digest index (word offset of the final hash value).
def dynamic_sha256_pad(message: bytes, max_sha_bytes: int) -> Tuple[bytes, int]:
    padded, message_length = sha256_pad(message, max_sha_bytes)
    return padded, (message_length - 64) // 8


# Intermediate hash value after compressing `prefix`, no padding.
def partial_sha(prefix: bytes) -> bytes:
    blocks = split_into_message_blocks([field(b) for b in prefix])
    state = sha256(blocks, len(blocks))
    return bytes(to_int(b) for b in words_to_bytes(state))


@dataclass
class PartialSha256Inputs:
    precomputed_hash: bytes
    remaining: bytes
    digest_index: int


# Cut the padded message at the block boundary before `selector` and hash
# the part before the cut.
def generate_partial_sha256_inputs(
    message: bytes,
    max_padded_bytes: int,
    selector: Optional[str] = None,
) -> PartialSha256Inputs:
    if max_padded_bytes % 64 != 0:
        raise ValueError(f"Maximum padded length {max_padded_bytes} is not a multiple of 64")

    # 1 byte for the 0x80 marker, 8 for the length field, rounded up to a block
    message_sha_length = (len(message) + 63 + 65) // 64 * 64
    padded, padded_length = sha256_pad(message, max(max_padded_bytes, message_sha_length))

    selector_index = 0
    if selector is not None:
        # padding and filler never count as a match
        selector_index = bytes(message).find(selector.encode('utf-8'))
        if selector_index == -1:
            raise ValueError(f'SHA precompute selector "{selector}" not found in the message')

    sha_cutoff_index = selector_index // 64 * 64
    precompute_text = padded[:sha_cutoff_index]
    remaining_length = padded_length - len(precompute_text)

    if remaining_length > max_padded_bytes:
        raise ValueError(
            f"Remaining message is {remaining_length} bytes long after the selector "
            f"but the maximum is {max_padded_bytes}"
        )

    remaining = padded[sha_cutoff_index:padded_length]
    remaining += b'\x00' * (max_padded_bytes - remaining_length)

    logger.debug(
        "Precomputed %d bytes, %d bytes left for the circuit", len(precompute_text), remaining_length
    )
    return PartialSha256Inputs(
        precomputed_hash=partial_sha(precompute_text),
        remaining=remaining,
        digest_index=remaining_length // 8 - 8,
    )
