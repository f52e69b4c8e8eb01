# ============================================================
# 📦 src/catalog_search/domain/fuzzy_matcher.py
# ============================================================

from catalog_search.domain.utils_texto import normalize, tokenize

# palavras menores que isso nunca entram no fuzzy (muitos falsos positivos)
MIN_FUZZY_WORD_LEN = 3
LONG_WORD_LEN = 5


def edit_distance(a: str, b: str) -> int:
    """
    Distância de Levenshtein clássica (inserção, remoção e troca custam 1),
    calculada com a matriz completa de programação dinâmica.
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    matriz = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]
    for i in range(len(b) + 1):
        matriz[i][0] = i
    for j in range(len(a) + 1):
        matriz[0][j] = j

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matriz[i][j] = matriz[i - 1][j - 1]
            else:
                matriz[i][j] = 1 + min(
                    matriz[i - 1][j - 1],  # troca
                    matriz[i][j - 1],      # inserção
                    matriz[i - 1][j],      # remoção
                )

    return matriz[len(b)][len(a)]


def allowed_errors(word: str) -> int:
    return 2 if len(word) > LONG_WORD_LEN else 1


def is_match(source_text: str, query: str) -> bool:
    """
    Predicado de busca tolerante a erros de digitação.
    1) substring após normalização (sempre testado primeiro)
    2) fuzzy palavra a palavra, só para palavras da busca com 3+ letras
    Não ordena nem pontua resultados.
    """
    if not source_text or not query:
        return False

    norm_source = normalize(source_text)
    norm_query = normalize(query)

    if not norm_query:
        return False

    if norm_query in norm_source:
        return True

    source_words = tokenize(norm_source)

    for q_word in tokenize(norm_query):
        if len(q_word) < MIN_FUZZY_WORD_LEN:
            continue
        budget = allowed_errors(q_word)
        if any(edit_distance(q_word, s_word) <= budget for s_word in source_words):
            return True

    return False
