"""Preparo da imagem do cartão de visita para o OCR."""

from __future__ import annotations

_DATA_URL_PREFIX = "data:"


def split_data_url(image: str) -> tuple[str, str | None]:
    """Separa `data:<mime>;base64,<dados>` em (dados, mime).

    Base64 puro (sem prefixo) é retornado como está, com mime None.
    """
    text = image.strip()
    if not text.startswith(_DATA_URL_PREFIX) or "," not in text:
        return text, None
    header, data = text.split(",", 1)
    mime_type = header[len(_DATA_URL_PREFIX):].split(";", 1)[0] or None
    return data, mime_type
