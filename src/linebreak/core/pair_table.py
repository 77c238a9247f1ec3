"""Pair table for tailorable line-break classes.

The table is the break-decision matrix of UAX #14 (Table 2). Rows are the
class of the codepoint already consumed, columns the class of the codepoint
being examined. Both indices are tailorable classes (0 through 28).
"""

from linebreak.domain import TAILORABLE_CLASS_COUNT, BreakAction, LineBreakClass

_ROWS = (
    # OP CL CP QU GL NS EX SY IS PR PO NU AL HL ID IN HY BA BB B2 ZW CM WJ H2 H3 JL JV JT RI
    "PR PR PR PR PR PR PR PR PR PR PR PR PR PR PR PR PR PR PR PR PR CP PR PR PR PR PR PR PR",  # OP
    "DI PR PR IN IN PR PR PR PR IN IN DI DI DI DI DI IN IN DI DI PR CI PR DI DI DI DI DI DI",  # CL
    "DI PR PR IN IN PR PR PR PR IN IN IN IN IN DI DI IN IN DI DI PR CI PR DI DI DI DI DI DI",  # CP
    "PR PR PR IN IN IN PR PR PR IN IN IN IN IN IN IN IN IN IN IN PR CI PR IN IN IN IN IN IN",  # QU
    "IN PR PR IN IN IN PR PR PR IN IN IN IN IN IN IN IN IN IN IN PR CI PR IN IN IN IN IN IN",  # GL
    "DI PR PR IN IN IN PR PR PR DI DI DI DI DI DI DI IN IN DI DI PR CI PR DI DI DI DI DI DI",  # NS
    "DI PR PR IN IN IN PR PR PR DI DI DI DI DI DI DI IN IN DI DI PR CI PR DI DI DI DI DI DI",  # EX
    "DI PR PR IN IN IN PR PR PR DI DI IN DI DI DI DI IN IN DI DI PR CI PR DI DI DI DI DI DI",  # SY
    "DI PR PR IN IN IN PR PR PR DI DI IN IN IN DI DI IN IN DI DI PR CI PR DI DI DI DI DI DI",  # IS
    "IN PR PR IN IN IN PR PR PR DI DI IN IN IN IN DI IN IN DI DI PR CI PR IN IN IN IN IN DI",  # PR
    "IN PR PR IN IN IN PR PR PR DI DI IN IN IN DI DI IN IN DI DI PR CI PR DI DI DI DI DI DI",  # PO
    "IN PR PR IN IN IN PR PR PR IN IN IN IN IN DI IN IN IN DI DI PR CI PR DI DI DI DI DI DI",  # NU
    "IN PR PR IN IN IN PR PR PR DI DI IN IN IN DI IN IN IN DI DI PR CI PR DI DI DI DI DI DI",  # AL
    "IN PR PR IN IN IN PR PR PR DI DI IN IN IN DI IN IN IN DI DI PR CI PR DI DI DI DI DI DI",  # HL
    "DI PR PR IN IN IN PR PR PR DI IN DI DI DI DI IN IN IN DI DI PR CI PR DI DI DI DI DI DI",  # ID
    "DI PR PR IN IN IN PR PR PR DI DI DI DI DI DI IN IN IN DI DI PR CI PR DI DI DI DI DI DI",  # IN
    "DI PR PR IN DI IN PR PR PR DI DI IN DI DI DI DI IN IN DI DI PR CI PR DI DI DI DI DI DI",  # HY
    "DI PR PR IN DI IN PR PR PR DI DI DI DI DI DI DI IN IN DI DI PR CI PR DI DI DI DI DI DI",  # BA
    "IN PR PR IN IN IN PR PR PR IN IN IN IN IN IN IN IN IN IN IN PR CI PR IN IN IN IN IN IN",  # BB
    "DI PR PR IN IN IN PR PR PR DI DI DI DI DI DI DI IN IN DI PR PR CI PR DI DI DI DI DI DI",  # B2
    "DI DI DI DI DI DI DI DI DI DI DI DI DI DI DI DI DI DI DI DI PR DI DI DI DI DI DI DI DI",  # ZW
    "IN PR PR IN IN IN PR PR PR DI DI IN IN IN DI IN IN IN DI DI PR CI PR DI DI DI DI DI DI",  # CM
    "IN PR PR IN IN IN PR PR PR IN IN IN IN IN IN IN IN IN IN IN PR CI PR IN IN IN IN IN IN",  # WJ
    "DI PR PR IN IN IN PR PR PR DI IN DI DI DI DI IN IN IN DI DI PR CI PR DI DI DI IN IN DI",  # H2
    "DI PR PR IN IN IN PR PR PR DI IN DI DI DI DI IN IN IN DI DI PR CI PR DI DI DI DI IN DI",  # H3
    "DI PR PR IN IN IN PR PR PR DI IN DI DI DI DI IN IN IN DI DI PR CI PR IN IN IN IN DI DI",  # JL
    "DI PR PR IN IN IN PR PR PR DI IN DI DI DI DI IN IN IN DI DI PR CI PR DI DI DI IN IN DI",  # JV
    "DI PR PR IN IN IN PR PR PR DI IN DI DI DI DI IN IN IN DI DI PR CI PR DI DI DI DI IN DI",  # JT
    "DI PR PR IN IN IN PR PR PR DI DI DI DI DI DI DI IN IN DI DI PR CI PR DI DI DI DI DI IN",  # RI
)

PAIR_TABLE: tuple[tuple[BreakAction, ...], ...] = tuple(
    tuple(BreakAction(code) for code in row.split()) for row in _ROWS
)

assert len(PAIR_TABLE) == TAILORABLE_CLASS_COUNT
assert all(len(row) == TAILORABLE_CLASS_COUNT for row in PAIR_TABLE)


def lookup_action(current: LineBreakClass, following: LineBreakClass) -> BreakAction:
    """Return the break action between two tailorable classes.

    Args:
        current: Class attributed to the text already scanned
        following: Class of the codepoint being examined

    Returns:
        Break action from the pair table

    Raises:
        ValueError: If either class is not tailorable
    """
    if not current.is_tailorable or not following.is_tailorable:
        raise ValueError(
            f"Pair table lookup needs tailorable classes, got {current.name}/{following.name}"
        )
    return PAIR_TABLE[current][following]
