# utils/log.py
# -*- coding: utf-8 -*-
import logging

_configured = {"done": False}

def setup_logging(level: str = "INFO") -> None:
    """Configura el logging raíz una sola vez (main y pruebas pueden llamarlo)."""
    if _configured["done"]:
        return
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
    # httpx registra cada petición en INFO; lo bajamos para no duplicar
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _configured["done"] = True
