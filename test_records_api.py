#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pruebas del acceso HTTP a la API de registros (sin red: httpx.MockTransport)
"""

import json

import httpx
import pytest

from api.connection import get_client, resource_path
from api.crud import DecodeError, NetworkError, create_record, delete_record, list_records, update_record
from api.models import Record


def make_client(handler):
    calls = []

    def recording(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return handler(request)

    return get_client(transport=httpx.MockTransport(recording)), calls


def test_list_records_decodes_array():
    payload = [
        {"id": "1", "name": "Alice", "avatar": "http://x/a.png", "createdAt": "2024-11-22"},
        {"id": 2, "name": "Bob", "avatar": "http://x/b.png"},
    ]
    client, calls = make_client(lambda req: httpx.Response(200, json=payload))

    records = list_records(client)

    assert records == [
        Record(id="1", name="Alice", avatar="http://x/a.png"),
        Record(id="2", name="Bob", avatar="http://x/b.png"),
    ]
    assert calls[0].method == "GET"
    assert calls[0].url.path == "/Books"


def test_create_record_posts_json_body():
    client, calls = make_client(lambda req: httpx.Response(201, json={"id": "9"}))

    create_record(client, "Carol", "http://x/c.png")

    req = calls[0]
    assert req.method == "POST"
    assert req.url.path == "/Books"
    assert req.headers["Content-Type"] == "application/json"
    assert json.loads(req.content) == {"name": "Carol", "avatar": "http://x/c.png"}


def test_update_record_puts_to_item_path():
    client, calls = make_client(lambda req: httpx.Response(200, json={}))

    update_record(client, "7", "Dave", "http://x/d.png")

    req = calls[0]
    assert req.method == "PUT"
    assert req.url.path == "/Books/7"
    assert json.loads(req.content) == {"name": "Dave", "avatar": "http://x/d.png"}


def test_delete_record_has_no_body():
    client, calls = make_client(lambda req: httpx.Response(200, json={}))

    delete_record(client, "7")

    req = calls[0]
    assert req.method == "DELETE"
    assert req.url.path == "/Books/7"
    assert req.content == b""


def test_resource_path():
    assert resource_path() == "/Books"
    assert resource_path("abc") == "/Books/abc"
    assert resource_path("a?b") == "/Books/a%3Fb"
    assert resource_path("x/y") == "/Books/x%2Fy"


def test_update_record_escapes_id():
    client, calls = make_client(lambda req: httpx.Response(200, json={}))

    update_record(client, "a?b", "Dave", "http://x/d.png")

    req = calls[0]
    assert req.url.query == b""
    assert req.url.raw_path == b"/Books/a%3Fb"


@pytest.mark.parametrize("response", [
    httpx.Response(200, text="<html>no json</html>"),
    httpx.Response(200, json={"error": "not a list"}),
    httpx.Response(200, json=[{"name": "sin id"}]),
    httpx.Response(200, json=["texto"]),
])
def test_list_records_decode_failures(response):
    client, _ = make_client(lambda req: response)

    with pytest.raises(DecodeError):
        list_records(client)


def test_non_2xx_is_network_error():
    client, _ = make_client(lambda req: httpx.Response(500, text="boom"))

    with pytest.raises(NetworkError):
        list_records(client)
    with pytest.raises(NetworkError):
        create_record(client, "a", "b")


def test_transport_failure_is_network_error():
    def handler(request):
        raise httpx.ConnectError("sin conexión", request=request)

    client, _ = make_client(handler)

    with pytest.raises(NetworkError):
        list_records(client)
    with pytest.raises(NetworkError):
        delete_record(client, "1")
