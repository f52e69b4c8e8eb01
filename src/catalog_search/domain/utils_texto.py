#chegoou_engine/src/catalog_search/domain/utils_texto.py

import unicodedata


def normalize(text: str) -> str:
    """
    Forma canônica para busca: minúsculas, sem acentos, sem espaços nas pontas.
    Idempotente: normalize(normalize(s)) == normalize(s).
    """
    if not text:
        return ""

    s = unicodedata.normalize("NFD", text.lower())

    # remove marcas combinantes (acentos, til, cedilha)
    s = "".join(c for c in s if not unicodedata.combining(c))

    return s.strip()


def tokenize(text: str) -> list:
    """Quebra em palavras por qualquer espaço em branco."""
    return text.split()
