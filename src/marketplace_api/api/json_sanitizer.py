# ==========================================================
# 🧹 src/marketplace_api/api/json_sanitizer.py
# ==========================================================

import numpy as np


def clean(obj):
    """
    NaN/Infinito não existem em JSON: viram None.
    Distância ou frete desconhecido chega ao front como null (escondido),
    nunca como "R$ Infinity".
    """
    if isinstance(obj, dict):
        return {k: clean(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [clean(i) for i in obj]
    elif isinstance(obj, float):
        if np.isnan(obj) or np.isinf(obj):
            return None
        return obj
    else:
        return obj
