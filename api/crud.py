# api/crud.py
import logging
from typing import List

import httpx

from .connection import resource_path
from .models import Record

logger = logging.getLogger(__name__)


class RecordsApiError(Exception):
    """Error base del acceso a la API de registros."""


class NetworkError(RecordsApiError):
    """Fallo de conexión, timeout o respuesta con estado no 2xx."""


class DecodeError(RecordsApiError):
    """La respuesta no tiene la forma esperada."""


def _send(client: httpx.Client, method: str, path: str, payload: dict | None = None) -> httpx.Response:
    try:
        # httpx serializa `json=` y pone Content-Type: application/json
        response = client.request(method, path, json=payload)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise NetworkError(f"{method} {path} devolvió {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise NetworkError(f"{method} {path} falló: {exc}") from exc
    logger.debug("%s %s -> %s", method, path, response.status_code)
    return response


def list_records(client: httpx.Client) -> List[Record]:
    response = _send(client, "GET", resource_path())
    try:
        data = response.json()
    except ValueError as exc:
        raise DecodeError("La respuesta no es JSON válido") from exc
    if not isinstance(data, list):
        raise DecodeError(f"Se esperaba una lista, llegó {type(data).__name__}")
    try:
        return [Record.from_json(item) for item in data]
    except (KeyError, TypeError, AttributeError) as exc:
        raise DecodeError(f"Elemento sin forma de registro: {exc}") from exc


def create_record(client: httpx.Client, name: str, avatar: str) -> None:
    # El cuerpo de la respuesta no se usa: tras crear siempre se vuelve a listar
    _send(client, "POST", resource_path(), {"name": name, "avatar": avatar})


def update_record(client: httpx.Client, record_id: str, name: str, avatar: str) -> None:
    _send(client, "PUT", resource_path(record_id), {"name": name, "avatar": avatar})


def delete_record(client: httpx.Client, record_id: str) -> None:
    _send(client, "DELETE", resource_path(record_id))
