"""Logic for loading an API item tree (``*.items.json``)."""

import json
from pathlib import Path
from typing import Any

from api_surface.api_item import (
    MEMBER_KINDS,
    STRUCTURED_TYPE_KINDS,
    ApiEnum,
    ApiEnumValue,
    ApiFunction,
    ApiItem,
    ApiItemKind,
    ApiMember,
    ApiModuleVariable,
    ApiNamespace,
    ApiPackage,
    ApiParameter,
    ApiStructuredType,
)
from api_surface.expect_object import expect_object

ITEMS_JSON_SUFFIX = ".items.json"


def _parameters(raw: Any, path: str) -> tuple[ApiParameter, ...]:
    params: list[ApiParameter] = []
    for i, raw_param in enumerate(raw or ()):
        p = expect_object(raw_param, f"{path}/{i}")
        if not p.get("name"):
            msg = f"Parameter without a name at {path}/{i}"
            raise ValueError(msg)
        params.append(
            ApiParameter(
                name=str(p["name"]),
                type=str(p.get("type") or ""),
                is_optional=bool(p.get("isOptional")),
                is_spread=bool(p.get("isSpread")),
                documentation=str(p.get("documentation") or ""),
            )
        )
    return tuple(params)


def _members(raw: Any, path: str) -> dict[str, ApiItem]:
    return {
        name: api_item_from_json(child, name, f"{path}/{name}")
        for name, child in expect_object(raw or {}, path).items()
    }


def api_item_from_json(
    raw: dict[str, Any], name: str = "", path: str = ""
) -> ApiItem:
    """Convert one deserialized item and its children.

    ``name`` is the key the item is stored under in its parent and is used
    when the item has no ``name`` of its own.
    """
    raw = expect_object(raw, path)
    kind = raw.get("kind")
    name = str(raw.get("name") or name)
    doc = str(raw.get("documentation") or "")

    if kind == ApiItemKind.PACKAGE:
        return ApiPackage(
            name=name, members=_members(raw.get("members"), path), documentation=doc
        )
    if kind == ApiItemKind.NAMESPACE:
        return ApiNamespace(
            name=name, members=_members(raw.get("members"), path), documentation=doc
        )
    if kind in STRUCTURED_TYPE_KINDS:
        return ApiStructuredType(
            name=name,
            kind=kind,
            members=_members(raw.get("members"), path),
            declaration=str(raw.get("declaration") or ""),
            extends=str(raw.get("extends") or ""),
            implements=str(raw.get("implements") or ""),
            documentation=doc,
        )
    if kind == ApiItemKind.ENUM:
        values: dict[str, ApiItem] = {}
        for vname, v in expect_object(raw.get("members") or {}, path).items():
            vpath = f"{path}/{vname}"
            values[vname] = api_item_from_json(
                {"kind": ApiItemKind.ENUM_VALUE, **expect_object(v, vpath)},
                vname,
                vpath,
            )
        return ApiEnum(name=name, members=values, documentation=doc)
    if kind == ApiItemKind.ENUM_VALUE:
        value = raw.get("value")
        return ApiEnumValue(
            name=name,
            value="" if value is None else str(value),
            declaration=str(raw.get("declaration") or ""),
            documentation=doc,
        )
    if kind == ApiItemKind.FUNCTION:
        return ApiFunction(
            name=name,
            parameters=_parameters(raw.get("parameters"), f"{path}/parameters"),
            return_type=str(raw.get("returnType") or ""),
            declaration=str(raw.get("declaration") or ""),
            documentation=doc,
        )
    if kind == ApiItemKind.MODULE_VARIABLE:
        return ApiModuleVariable(
            name=name,
            type=str(raw.get("type") or ""),
            value=str(raw.get("value") or ""),
            documentation=doc,
        )
    if kind in MEMBER_KINDS:
        literal = raw.get("typeLiteral")
        return ApiMember(
            name=name,
            kind=kind,
            access_modifier=str(raw.get("accessModifier") or ""),
            is_static=bool(raw.get("isStatic")),
            is_optional=bool(raw.get("isOptional")),
            is_read_only=bool(raw.get("isReadOnly")),
            type=str(raw.get("type") or ""),
            parameters=_parameters(raw.get("parameters"), f"{path}/parameters"),
            type_literal=(
                api_item_from_json(
                    {
                        "kind": ApiItemKind.TYPE_LITERAL,
                        **expect_object(literal, f"{path}/typeLiteral"),
                    },
                    "",
                    f"{path}/typeLiteral",
                )
                if literal
                else None
            ),
            declaration=str(raw.get("declaration") or ""),
            documentation=doc,
        )
    msg = f"Unknown API item kind {kind!r} at {path or '/'}"
    raise ValueError(msg)


def load_api_package(path: Path) -> ApiPackage:
    """Load a ``*.items.json`` file describing one package."""
    raw = json.loads(path.read_text(encoding="utf-8")) or {}
    fallback = path.name
    if fallback.lower().endswith(ITEMS_JSON_SUFFIX):
        fallback = fallback[: -len(ITEMS_JSON_SUFFIX)]
    item = api_item_from_json(raw, fallback)
    if not isinstance(item, ApiPackage):
        msg = f"{path}: expected a package at the root, got kind {item.kind!r}"
        raise ValueError(msg)
    return item
