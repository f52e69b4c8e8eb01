# ============================================================
# 🍕 src/order_pricing/domain/product_pricing.py
# ============================================================
# Preço final unitário de um produto com opções:
#   preço base + contribuição de cada grupo com seleção
#   - grupo com max > 1 e modo "average" → média das opções
#   - grupo com max > 1 e modo "highest" → maior opção
#   - demais casos → soma das opções
# ============================================================

from typing import Dict, List

from loguru import logger

from order_pricing.domain.entities import CartLine, Product, ProductGroup, ProductOption
from order_pricing.domain.exceptions import InvalidOptionSelectionError


def _resolver_opcoes(group: ProductGroup, option_ids: List[str]) -> List[ProductOption]:
    por_id = {o.id: o for o in group.options}
    selecionadas = []
    for oid in option_ids:
        opcao = por_id.get(oid)
        if opcao is None:
            raise InvalidOptionSelectionError(f"Opção '{oid}' não existe em '{group.name}'.")
        if not opcao.is_available:
            raise InvalidOptionSelectionError(f"Opção '{opcao.name}' indisponível.")
        selecionadas.append(opcao)
    return selecionadas


def validate_selections(product: Product, selections: Dict[str, List[str]]) -> Dict[str, List[ProductOption]]:
    """
    Valida as escolhas (group_id → option_ids) contra min/max de cada grupo.
    Retorna as opções resolvidas por grupo.
    """
    grupos = {g.id: g for g in product.groups}

    desconhecidos = set(selections) - set(grupos)
    if desconhecidos:
        raise InvalidOptionSelectionError(f"Grupo(s) inexistente(s): {sorted(desconhecidos)}")

    resolvidas = {}
    for group in product.groups:
        ids = selections.get(group.id, [])
        if len(ids) > group.max:
            raise InvalidOptionSelectionError(
                f"'{group.name}' permite no máximo {group.max} opção(ões)."
            )
        if len(ids) < group.min:
            raise InvalidOptionSelectionError(
                f"'{group.name}' exige ao menos {group.min} opção(ões)."
            )
        resolvidas[group.id] = _resolver_opcoes(group, ids)

    return resolvidas


def group_contribution(product: Product, group: ProductGroup, selected: List[ProductOption]) -> float:
    if not selected:
        return 0.0

    precos = [o.price for o in selected]

    if group.max > 1 and product.pricing_mode == "average":
        return sum(precos) / len(precos)
    if group.max > 1 and product.pricing_mode == "highest":
        return max(precos)
    return sum(precos)


def unit_final_price(product: Product, selections: Dict[str, List[str]]) -> float:
    resolvidas = validate_selections(product, selections)
    total = product.price
    for group in product.groups:
        total += group_contribution(product, group, resolvidas[group.id])
    return total


def build_cart_line(product: Product, selections: Dict[str, List[str]], quantity: int = 1) -> CartLine:
    if not product.is_available:
        raise InvalidOptionSelectionError(f"Produto '{product.name}' indisponível.")

    preco = unit_final_price(product, selections)
    logger.debug(f"🛒 {product.name}: R$ {preco:.2f} x {quantity} (modo={product.pricing_mode})")

    return CartLine(
        unit_final_price=preco,
        quantity=quantity,
        product_id=product.id,
        product_name=product.name,
    )
