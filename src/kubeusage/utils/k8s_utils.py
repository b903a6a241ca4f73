import math
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

MIB = 1024 * 1024
KIB = 1024

NOT_SET = "Not Set"

# Longest suffixes first so "Mi" is matched before "m".
_BINARY_SUFFIXES = {
    "Ki": 1024,
    "Mi": 1024**2,
    "Gi": 1024**3,
    "Ti": 1024**4,
    "Pi": 1024**5,
    "Ei": 1024**6,
}

_DECIMAL_SUFFIXES = {
    "n": Decimal("0.000000001"),
    "u": Decimal("0.000001"),
    "m": Decimal("0.001"),
    "k": Decimal(1000),
    "M": Decimal(1000**2),
    "G": Decimal(1000**3),
    "T": Decimal(1000**4),
    "P": Decimal(1000**5),
    "E": Decimal(1000**6),
}


def parse_quantity(quantity: Union[str, int, float, Decimal, None]) -> Decimal:
    """
    Parse kubernetes quantity to Decimal.
    Adapted from kubernetes-python utils.

    Unparseable values count as zero.
    """
    if quantity is None:
        return Decimal(0)
    if isinstance(quantity, (int, float, Decimal)):
        return Decimal(quantity)

    quantity = str(quantity).strip()
    number = quantity
    multiplier = Decimal(1)

    for suffix, factor in _BINARY_SUFFIXES.items():
        if quantity.endswith(suffix):
            number = quantity[: -len(suffix)]
            multiplier = Decimal(factor)
            break
    else:
        last = quantity[-1:]
        if last in _DECIMAL_SUFFIXES:
            number = quantity[:-1]
            multiplier = _DECIMAL_SUFFIXES[last]

    try:
        value = Decimal(number)
    except InvalidOperation:
        return Decimal(0)

    if not value.is_finite():
        return Decimal(0)

    return value * multiplier


def parse_memory_quantity(memory: Optional[str]) -> int:
    """
    Converts a K8s memory string to bytes (int).

    Fractional byte amounts round up to the next whole byte, the same way the
    API server reports a quantity's integer value. Missing values are 0 (unset).
    """
    if not memory:
        return 0
    value = parse_quantity(memory)
    if value <= 0:
        return 0
    return int(math.ceil(value))


def format_memory_quantity(amount: int) -> str:
    """
    Renders a byte amount the way the usage and PV reports display it.

    0 is the unset sentinel and renders as "Not Set". Amounts of at least one
    MiB render as whole MiB, amounts of at least one KiB as whole KiB. Both
    use floor division. Positive amounts below one KiB render as "0Mi".
    """
    if amount == 0:
        return NOT_SET

    mib = amount // MIB
    if mib > 0:
        return f"{mib}Mi"

    kib = amount // KIB
    if kib > 0:
        return f"{kib}Ki"

    # Known anomaly: sub-KiB amounts are indistinguishable from zero here.
    return "0Mi"
