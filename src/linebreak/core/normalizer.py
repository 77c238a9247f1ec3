"""Class normalization ahead of pair-table lookups."""

from linebreak.domain import LineBreakClass

_CONTEXTUAL_REMAP: dict[LineBreakClass, LineBreakClass] = {
    LineBreakClass.AI: LineBreakClass.AL,
    LineBreakClass.SA: LineBreakClass.AL,
    LineBreakClass.SG: LineBreakClass.AL,
    LineBreakClass.XX: LineBreakClass.AL,
    LineBreakClass.CJ: LineBreakClass.NS,
}

_FIRST_CLASS: dict[LineBreakClass, LineBreakClass] = {
    LineBreakClass.LF: LineBreakClass.BK,
    LineBreakClass.NL: LineBreakClass.BK,
    LineBreakClass.CB: LineBreakClass.BA,
    LineBreakClass.SP: LineBreakClass.WJ,
}


def contextual_remap(raw: LineBreakClass) -> LineBreakClass:
    """Collapse ambiguous and unsupported classes into table classes.

    AI, SA, SG and XX resolve to AL; CJ resolves to NS. The mandatory-break
    family, CR, CB and SP pass through unchanged and are left to the
    engine's special-case rules.

    Args:
        raw: Class reported by the classifier

    Returns:
        Normalized class
    """
    return _CONTEXTUAL_REMAP.get(raw, raw)


def first_class_adjust(cls: LineBreakClass) -> LineBreakClass:
    """Pin the class that opens a break sequence to a context-free one.

    Used for the first codepoint of the text and for the codepoint right
    after a mandatory break, where there is no preceding context.

    Args:
        cls: Normalized class of the opening codepoint

    Returns:
        BK for LF and NL, BA for CB, WJ for SP, otherwise ``cls``
    """
    return _FIRST_CLASS.get(cls, cls)
