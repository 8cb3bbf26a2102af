from urllib.parse import quote

import httpx
from config.settings import Config


if not Config.API_BASE_URL:
    raise ValueError("API_BASE_URL no está definida en .env o Config.")

def get_client(transport: httpx.BaseTransport | None = None) -> httpx.Client:
    """Cliente HTTP apuntando a la API mock. `transport` permite inyectar uno falso en pruebas."""
    return httpx.Client(
        base_url=Config.API_BASE_URL,
        timeout=httpx.Timeout(Config.HTTP_TIMEOUT),
        headers={"Accept": "application/json"},
        transport=transport,
    )

def resource_path(record_id: str | None = None) -> str:
    if record_id is None:
        return f"/{Config.RESOURCE}"
    # El id es opaco: se escapa entero para que "?" o "/" no cambien la ruta
    return f"/{Config.RESOURCE}/{quote(str(record_id), safe='')}"
