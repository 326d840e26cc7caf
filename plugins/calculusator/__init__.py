"""Calculusator plugin manifest."""

manifest = {
    "title": "Calculusator",
    "summary": "Evaluate expressions, differentiate with SymPy and look up elementary antiderivatives.",
    "category": "General Utilities",
    "blueprint": "calculusator",
    "icon": "img/GeneralUtilityTools_icon.png",
}

__all__ = ["manifest"]
