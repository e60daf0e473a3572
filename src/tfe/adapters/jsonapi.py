"""Codec JSON-API.

Responsabilidades:
- Codificar opciones a un documento `{"data": {type, id?, attributes, relationships}}`.
- Decodificar documentos de un recurso o de una colección, resolviendo
  relaciones por ID y, si vienen en `included`, con sus atributos.
- Mapear respuestas no-2xx a errores tipados.

Todo el conocimiento de nombres del wire sale de `core.domain.mapping`.
"""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from tfe.core.domain.mapping import ResourceSchema
from tfe.core.errors import (
    APIError,
    DecodingError,
    NotFoundError,
    UnauthorizedError,
)

ModelT = TypeVar("ModelT", bound=BaseModel)

_Included = dict[tuple[str, str], dict[str, Any]]


# --------------------------------------------------------------------------
# Encoding
# --------------------------------------------------------------------------


def encode_document(schema: ResourceSchema[Any], options: BaseModel) -> dict[str, Any]:
    """Documento JSON-API para un objeto de opciones.

    Los campos en `None` se omiten; un `id` vacío nunca se envía.
    """

    values = options.model_dump(mode="json", by_alias=True, exclude_none=True)

    data: dict[str, Any] = {"type": schema.type_name}
    primary = values.get(schema.id_field)
    if isinstance(primary, str) and primary:
        data["id"] = primary

    attributes = {wire: values[name] for name, wire in schema.attributes.items() if name in values}
    if attributes:
        data["attributes"] = attributes

    relationships: dict[str, Any] = {}
    for name, relation in schema.relationships.items():
        related = getattr(options, name, None)
        if related is None:
            continue
        relationships[relation.name] = {
            "data": {
                "type": relation.schema.type_name,
                "id": getattr(related, relation.schema.id_field),
            }
        }
    if relationships:
        data["relationships"] = relationships

    return {"data": data}


def encode_plain(options: BaseModel) -> dict[str, Any]:
    """Cuerpo JSON plano (acciones como apply/cancel/lock)."""

    return options.model_dump(mode="json", by_alias=True, exclude_none=True)


# --------------------------------------------------------------------------
# Decoding
# --------------------------------------------------------------------------


def parse_document(response: httpx.Response) -> dict[str, Any]:
    if not response.content:
        raise DecodingError("Empty response body")
    try:
        document = response.json()
    except ValueError as exc:
        raise DecodingError(f"Invalid JSON in response: {exc}") from exc
    if not isinstance(document, dict):
        raise DecodingError("Response is not a JSON-API document")
    return document


def decode_one(document: dict[str, Any], schema: ResourceSchema[ModelT]) -> ModelT:
    data = document.get("data")
    if not isinstance(data, dict):
        raise DecodingError("Expected a single resource object under 'data'")
    return _decode_resource(data, schema, _index_included(document))


def decode_many(document: dict[str, Any], schema: ResourceSchema[ModelT]) -> list[ModelT]:
    """Decodifica una colección respetando el orden del servidor."""

    data = document.get("data")
    if not isinstance(data, list):
        raise DecodingError("Expected an array of resource objects under 'data'")
    included = _index_included(document)
    return [_decode_resource(item, schema, included) for item in data]


def _index_included(document: dict[str, Any]) -> _Included:
    raw = document.get("included")
    if raw is None:
        return {}
    if not isinstance(raw, list):
        raise DecodingError("'included' must be an array")

    index: _Included = {}
    for item in raw:
        if not isinstance(item, dict):
            continue
        type_name = item.get("type")
        item_id = item.get("id")
        if isinstance(type_name, str) and isinstance(item_id, str):
            index[(type_name, item_id)] = item
    return index


def _decode_resource(
    resource: Any,
    schema: ResourceSchema[ModelT],
    included: _Included,
) -> ModelT:
    if not isinstance(resource, dict):
        raise DecodingError("Resource object must be a JSON object")

    type_name = resource.get("type")
    if type_name != schema.type_name:
        raise DecodingError(f"Expected resource type {schema.type_name!r}, got {type_name!r}")

    resource_id = resource.get("id")
    if not isinstance(resource_id, str) or not resource_id:
        raise DecodingError(f"Resource of type {type_name!r} has no id")

    attributes = resource.get("attributes")
    if attributes is None:
        attributes = {}
    if not isinstance(attributes, dict):
        raise DecodingError("'attributes' must be a JSON object")

    # `null` en el wire equivale a "ausente": el modelo aplica su default.
    values: dict[str, Any] = {
        name: attributes[wire]
        for name, wire in schema.attributes.items()
        if attributes.get(wire) is not None
    }
    values[schema.id_field] = resource_id

    relationships = resource.get("relationships")
    if relationships is None:
        relationships = {}
    if not isinstance(relationships, dict):
        raise DecodingError("'relationships' must be a JSON object")

    for name, relation in schema.relationships.items():
        entry = relationships.get(relation.name)
        if not isinstance(entry, dict):
            continue
        reference = entry.get("data")
        if reference is None:
            continue
        if not isinstance(reference, dict):
            raise DecodingError(f"Relationship {relation.name!r} must reference a single resource")
        target = included.get((str(reference.get("type")), str(reference.get("id"))))
        values[name] = _decode_resource(target or reference, relation.schema, included)

    try:
        return schema.model.model_validate(values)
    except PydanticValidationError as exc:
        raise DecodingError(f"Invalid {schema.type_name!r} resource {resource_id!r}: {exc}") from exc


# --------------------------------------------------------------------------
# Errores
# --------------------------------------------------------------------------


def raise_for_status(response: httpx.Response) -> None:
    """Convierte una respuesta no-2xx en el error tipado correspondiente."""

    status = response.status_code
    if 200 <= status <= 299:
        return

    errors = _error_entries(response)
    if status == 401:
        raise UnauthorizedError(errors)
    if status == 404:
        raise NotFoundError(errors)

    messages: list[str] = []
    for entry in errors:
        text = entry.get("detail") or entry.get("title")
        if text:
            messages.append(str(text))
    message = "\n".join(messages) if messages else f"{status} {response.reason_phrase}".strip()
    raise APIError(status, message, errors)


def _error_entries(response: httpx.Response) -> list[dict[str, Any]]:
    if not response.content:
        return []
    try:
        document = response.json()
    except ValueError:
        return []
    if not isinstance(document, dict):
        return []
    entries = document.get("errors")
    if not isinstance(entries, list):
        return []
    return [entry for entry in entries if isinstance(entry, dict)]
