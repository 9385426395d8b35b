"""Decoding v4 router calldata back into named actions.

The result is a pydantic model so it can be dumped to JSON directly.
Addresses are returned lowercase and byte strings as 0x-prefixed hex;
pool keys, path keys and swap structs become mappings keyed by their
Solidity field names.
"""

from typing import Any

import structlog
from eth_abi import decode
from eth_abi.exceptions import DecodingError
from pydantic import BaseModel, Field

from v4sdk.errors import InvalidCalldataError
from v4sdk.planner.actions import (
    PATH_KEY_FIELDS,
    POOL_KEY_FIELDS,
    SWAP_EXACT_IN_FIELDS,
    SWAP_EXACT_IN_SINGLE_FIELDS,
    SWAP_EXACT_OUT_FIELDS,
    SWAP_EXACT_OUT_SINGLE_FIELDS,
    V4_BASE_ACTIONS_ABI_DEFINITION,
    Actions,
    Subparser,
    abi_types,
)

logger = structlog.get_logger()


class Param(BaseModel):
    """One named action parameter."""

    name: str = Field(description="Solidity parameter name.")
    value: Any = Field(description="Decoded value (ints, bools, hex strings, mappings).")


class V4RouterAction(BaseModel):
    action_name: str = Field(alias="actionName", description="Action enum name.")
    action_type: int = Field(alias="actionType", description="Action opcode.")
    params: list[Param] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class V4RouterCall(BaseModel):
    """All actions encoded in one router call, in execution order."""

    actions: list[V4RouterAction] = Field(default_factory=list)


# =============================================================================
# Value conversion
# =============================================================================


def _plain(value: Any) -> Any:
    """Convert eth_abi output into JSON-friendly values."""
    if isinstance(value, bytes):
        return "0x" + value.hex()
    if isinstance(value, str):
        # eth_abi returns checksummed addresses
        return value.lower()
    if isinstance(value, (tuple, list)):
        return [_plain(v) for v in value]
    return value


def _struct(fields: tuple[str, ...], value: tuple) -> dict[str, Any]:
    return {name: _plain(v) for name, v in zip(fields, value, strict=True)}


def _swap_single(fields: tuple[str, ...], value: tuple) -> dict[str, Any]:
    result = _struct(fields, value)
    result["poolKey"] = _struct(POOL_KEY_FIELDS, value[0])
    return result


def _swap_multi(fields: tuple[str, ...], value: tuple) -> dict[str, Any]:
    result = _struct(fields, value)
    result["path"] = [_struct(PATH_KEY_FIELDS, key) for key in value[1]]
    return result


def _expand(subparser: Subparser | None, value: Any) -> Any:
    if subparser is None:
        return _plain(value)
    if subparser == Subparser.POOL_KEY:
        return _struct(POOL_KEY_FIELDS, value)
    if subparser == Subparser.V4_SWAP_EXACT_IN_SINGLE:
        return _swap_single(SWAP_EXACT_IN_SINGLE_FIELDS, value)
    if subparser == Subparser.V4_SWAP_EXACT_OUT_SINGLE:
        return _swap_single(SWAP_EXACT_OUT_SINGLE_FIELDS, value)
    if subparser == Subparser.V4_SWAP_EXACT_IN:
        return _swap_multi(SWAP_EXACT_IN_FIELDS, value)
    return _swap_multi(SWAP_EXACT_OUT_FIELDS, value)


# =============================================================================
# Parsing
# =============================================================================


def _to_bytes(calldata: str | bytes) -> bytes:
    if isinstance(calldata, bytes):
        return calldata
    try:
        return bytes.fromhex(calldata.removeprefix("0x"))
    except ValueError as e:
        raise InvalidCalldataError(f"Calldata is not valid hex: {e}") from e


def parse_action(action_type: int, encoded_params: bytes) -> V4RouterAction:
    """Decode the parameters of a single action.

    Raises:
        InvalidCalldataError: If the opcode is unknown or the parameters do
            not decode
    """
    try:
        action = Actions(action_type)
    except ValueError as e:
        raise InvalidCalldataError(f"Unknown action opcode: {action_type:#04x}") from e

    try:
        values = decode(abi_types(action), encoded_params)
    except DecodingError as e:
        raise InvalidCalldataError(f"Could not decode {action.name} parameters: {e}") from e

    definition = V4_BASE_ACTIONS_ABI_DEFINITION[action]
    params = [
        Param(name=param.name, value=_expand(param.subparser, value))
        for param, value in zip(definition, values, strict=True)
    ]
    return V4RouterAction(action_name=action.name, action_type=int(action), params=params)


def parse_calldata(calldata: str | bytes) -> V4RouterCall:
    """Decode ``abi.encode(bytes actions, bytes[] params)`` router calldata.

    Raises:
        InvalidCalldataError: If the calldata is malformed or the number of
            actions and parameter blobs differ
    """
    data = _to_bytes(calldata)
    try:
        actions, params = decode(["bytes", "bytes[]"], data)
    except DecodingError as e:
        raise InvalidCalldataError(f"Could not decode router calldata: {e}") from e

    if len(actions) != len(params):
        raise InvalidCalldataError(
            f"{len(actions)} actions but {len(params)} parameter blobs"
        )

    call = V4RouterCall(
        actions=[parse_action(action, encoded) for action, encoded in zip(actions, params)]
    )
    logger.debug("calldata_parsed", num_actions=len(call.actions))
    return call


__all__ = [
    "Param",
    "V4RouterAction",
    "V4RouterCall",
    "parse_action",
    "parse_calldata",
]
