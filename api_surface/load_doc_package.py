"""Logic for loading the documentation JSON (``*.api.json``) of a package."""

import json
import logging
from pathlib import Path
from typing import Any

from api_surface.doc_element import (
    DocElement,
    LinkElement,
    ParagraphElement,
    SeeElement,
    TextElement,
)
from api_surface.doc_item import (
    DocClass,
    DocElements,
    DocEnum,
    DocEnumValue,
    DocFunction,
    DocInterface,
    DocItem,
    DocMember,
    DocMethod,
    DocPackage,
    DocParam,
    DocProperty,
    DocReturnValue,
)
from api_surface.expect_object import expect_object

logger = logging.getLogger(__name__)

API_JSON_SUFFIX = ".api.json"


def doc_elements_from_json(raw: Any, path: str = "") -> DocElements:
    """Convert a list of doc element dicts.

    A bare string is accepted as a single text element.
    """
    if raw is None:
        return ()
    if isinstance(raw, str):
        return (TextElement(raw),) if raw else ()
    if not isinstance(raw, list):
        msg = f"Expected a list of doc elements at {path or '/'}"
        raise ValueError(msg)
    return tuple(
        _doc_element_from_json(el, f"{path}/{i}") for i, el in enumerate(raw)
    )


def _doc_element_from_json(raw: Any, path: str) -> DocElement:
    raw = expect_object(raw, path)
    kind = raw.get("kind")
    if kind == "textDocElement":
        return TextElement(str(raw.get("value") or ""))
    if kind == "linkDocElement":
        return LinkElement(
            reference_type=str(raw.get("referenceType") or "code"),
            value=str(raw.get("value") or ""),
            package_name=str(raw.get("packageName") or ""),
            export_name=str(raw.get("exportName") or ""),
            member_name=str(raw.get("memberName") or ""),
            target_url=str(raw.get("targetUrl") or ""),
        )
    if kind == "seeDocElement":
        return SeeElement(
            doc_elements_from_json(raw.get("seeElements"), f"{path}/seeElements")
        )
    if kind == "paragraphDocElement":
        return ParagraphElement()
    msg = f"Unknown doc element kind {kind!r} at {path or '/'}"
    raise ValueError(msg)


def _base_fields(raw: dict[str, Any], path: str) -> dict[str, Any]:
    return {
        "summary": doc_elements_from_json(raw.get("summary"), f"{path}/summary"),
        "remarks": doc_elements_from_json(raw.get("remarks"), f"{path}/remarks"),
        "deprecated_message": doc_elements_from_json(
            raw.get("deprecatedMessage"), f"{path}/deprecatedMessage"
        ),
        "is_beta": bool(raw.get("isBeta")),
    }


def _params_from_json(raw: Any, path: str) -> dict[str, DocParam]:
    params: dict[str, DocParam] = {}
    for name, raw_param in expect_object(raw or {}, path).items():
        p = expect_object(raw_param, f"{path}/{name}")
        params[name] = DocParam(
            name=str(p.get("name") or name),
            type=str(p.get("type") or ""),
            description=doc_elements_from_json(
                p.get("description"), f"{path}/{name}/description"
            ),
            is_optional=bool(p.get("isOptional")),
            is_spread=bool(p.get("isSpread")),
        )
    return params


def _return_from_json(raw: Any, path: str) -> DocReturnValue | None:
    if not raw:
        return None
    raw = expect_object(raw, path)
    return DocReturnValue(
        type=str(raw.get("type") or ""),
        description=doc_elements_from_json(
            raw.get("description"), f"{path}/description"
        ),
    )


def _member_from_json(raw: Any, path: str) -> DocMember | None:
    raw = expect_object(raw, path)
    kind = raw.get("kind")
    if kind == "method":
        return DocMethod(
            signature=str(raw.get("signature") or ""),
            access_modifier=str(raw.get("accessModifier") or ""),
            is_optional=bool(raw.get("isOptional")),
            is_static=bool(raw.get("isStatic")),
            parameters=_params_from_json(raw.get("parameters"), f"{path}/parameters"),
            return_value=_return_from_json(
                raw.get("returnValue"), f"{path}/returnValue"
            ),
            **_base_fields(raw, path),
        )
    if kind == "property":
        return DocProperty(
            type=str(raw.get("type") or ""),
            is_optional=bool(raw.get("isOptional")),
            is_read_only=bool(raw.get("isReadOnly")),
            is_static=bool(raw.get("isStatic")),
            **_base_fields(raw, path),
        )
    logger.warning("Skipping member %s: unsupported kind %r", path, kind)
    return None


def _members_from_json(raw: Any, path: str) -> dict[str, DocMember]:
    members: dict[str, DocMember] = {}
    for name, m in expect_object(raw or {}, path).items():
        member = _member_from_json(m, f"{path}/{name}")
        if member is not None:
            members[name] = member
    return members


def _enum_values_by_name(raw: Any, path: str) -> dict[str, Any]:
    # Either {name: {...}} or [{name: ..., value: ...}].
    if not isinstance(raw, list):
        return expect_object(raw or {}, path)
    by_name: dict[str, Any] = {}
    for i, v in enumerate(raw):
        name = expect_object(v, f"{path}/{i}").get("name")
        if not name:
            msg = f"Enum value without a name at {path}/{i}"
            raise ValueError(msg)
        by_name[str(name)] = v
    return by_name


def _enum_values_from_json(raw: Any, path: str) -> dict[str, DocEnumValue]:
    values: dict[str, DocEnumValue] = {}
    for name, raw_value in _enum_values_by_name(raw, path).items():
        vpath = f"{path}/{name}"
        v = expect_object(raw_value, vpath)
        values[name] = DocEnumValue(
            value=str(v.get("value") if v.get("value") is not None else ""),
            summary=doc_elements_from_json(v.get("summary"), f"{vpath}/summary"),
            remarks=doc_elements_from_json(v.get("remarks"), f"{vpath}/remarks"),
            deprecated_message=doc_elements_from_json(
                v.get("deprecatedMessage"), f"{vpath}/deprecatedMessage"
            ),
        )
    return values


def doc_item_from_json(raw: Any, path: str = "") -> DocItem | None:
    """Convert one export; unsupported kinds are logged and skipped."""
    raw = expect_object(raw, path)
    kind = raw.get("kind")
    if kind in {"class", "interface"}:
        cls = DocClass if kind == "class" else DocInterface
        return cls(
            members=_members_from_json(raw.get("members"), f"{path}/members"),
            extends=str(raw.get("extends") or ""),
            implements=str(raw.get("implements") or ""),
            type_parameters=tuple(raw.get("typeParameters") or ()),
            **_base_fields(raw, path),
        )
    if kind == "enum":
        return DocEnum(
            values=_enum_values_from_json(raw.get("values"), f"{path}/values"),
            **_base_fields(raw, path),
        )
    if kind == "function":
        return DocFunction(
            signature=str(raw.get("signature") or ""),
            parameters=_params_from_json(raw.get("parameters"), f"{path}/parameters"),
            return_value=_return_from_json(
                raw.get("returnValue"), f"{path}/returnValue"
            ),
            **_base_fields(raw, path),
        )
    logger.warning("Skipping export %s: unsupported kind %r", path, kind)
    return None


def doc_package_from_json(raw: Any, name: str = "") -> DocPackage:
    """Convert a deserialized package document.

    The package name comes from the document's ``name`` field, falling back
    to ``name``.
    """
    raw = expect_object(raw, "")
    kind = raw.get("kind", "package")
    if kind != "package":
        msg = f"Expected a package document, got kind {kind!r}"
        raise ValueError(msg)
    package_name = str(raw.get("name") or name)
    if not package_name:
        msg = "Package document has no name"
        raise ValueError(msg)

    exports: dict[str, DocItem] = {}
    raw_exports = expect_object(raw.get("exports") or {}, "/exports")
    for export_name, item_raw in raw_exports.items():
        item = doc_item_from_json(item_raw, f"/exports/{export_name}")
        if item is not None:
            exports[export_name] = item
    return DocPackage(name=package_name, exports=exports, **_base_fields(raw, ""))


def package_name_from_path(path: Path) -> str:
    """``sp-http.api.json`` -> ``sp-http``."""
    name = path.name
    if name.lower().endswith(API_JSON_SUFFIX):
        return name[: -len(API_JSON_SUFFIX)]
    return path.stem


def load_doc_package(path: Path) -> DocPackage:
    """Load and parse a ``*.api.json`` file."""
    raw = json.loads(path.read_text(encoding="utf-8"))
    return doc_package_from_json(raw or {}, package_name_from_path(path))
